"""Hand a URL to the user's browser."""

from __future__ import annotations

import logging
import webbrowser

from .errors import IoFailure

logger = logging.getLogger(__name__)


def open_url(url: str, browser: str = "") -> None:
    """Open url in the named browser, or the system default when browser is empty.

    Raises:
        IoFailure: no browser could be launched.
    """
    logger.debug("Opening %s (browser=%r)", url, browser or "default")
    try:
        controller = webbrowser.get(browser) if browser else webbrowser
        opened = controller.open(url)
    except webbrowser.Error as exc:
        raise IoFailure(f"Could not launch browser: {exc}") from exc
    if not opened:
        raise IoFailure(f"Could not open {url}")
