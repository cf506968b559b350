"""Error kinds raised by jumpto.

Every error carries a display message. I/O-sourced errors chain the
underlying exception as ``__cause__`` (``raise ... from exc``).
"""

from __future__ import annotations


class JumptoError(Exception):
    """Base jumpto error."""


class UnsupportedFormat(JumptoError):
    """Remote URL matches neither the SSH nor the HTTP(S) convention."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Unsupported remote URL format: {raw!r}")


class NotAGitRepository(JumptoError):
    """No usable git repository at the working directory."""


class OriginUrlNotFound(JumptoError):
    """Repository has no origin remote, or the remote has no URL."""

    def __init__(self, message: str = "No origin url found"):
        super().__init__(message)


class HomeDirNotFound(JumptoError):
    """Per-user config root cannot be resolved."""


class MalformedRegistry(JumptoError):
    """Shortcut file exists but is not a valid shortcut mapping."""


class ConfigError(JumptoError):
    """config.yaml exists but is not a valid YAML mapping."""


class IoFailure(JumptoError):
    """File or process I/O failure, including browser launch failures."""
