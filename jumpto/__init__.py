"""jumpto — open the web pages behind your git checkout, plus URL shortcuts."""

import os
from pathlib import Path

from .errors import HomeDirNotFound

__version__ = "0.1.0"

APP_NAME = "jumpto"


def get_config_home() -> Path:
    """Get the per-user config directory.

    Resolution order:
    1. $XDG_CONFIG_HOME/jumpto when the variable is set and non-empty
    2. Default: ~/.config/jumpto

    Raises:
        HomeDirNotFound: if the home directory cannot be determined.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME", "").strip()
    if xdg:
        return Path(xdg).expanduser() / APP_NAME

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirNotFound("Could not determine the home directory") from exc
    return home / ".config" / APP_NAME
