"""Durable URL shortcut registry.

This module owns the shortcut file at ~/.config/jumpto/urls.json:

    {
      "urls": {
        "gh": "https://github.com"
      }
    }

The registry is a plain value: load it, mutate it, save it. Every save
rewrites the whole file.
"""

from __future__ import annotations

import contextlib
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ValidationError

from . import get_config_home
from .errors import IoFailure, MalformedRegistry

logger = logging.getLogger(__name__)

REGISTRY_FILE = "urls.json"


class RegistryFile(BaseModel):
    """On-disk shape of the shortcut file."""

    urls: dict[str, str]


def get_registry_path() -> Path:
    """Return the default shortcut file location."""
    return get_config_home() / REGISTRY_FILE


@dataclass
class ShortcutRegistry:
    """Mapping of shortcut keys to URLs."""

    urls: dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path | None = None) -> ShortcutRegistry:
        """Load the registry. A missing file is an empty registry.

        Raises:
            MalformedRegistry: the file exists but is not valid shortcut JSON.
            IoFailure: the file exists but cannot be read.
        """
        if path is None:
            path = get_registry_path()

        if not path.exists():
            logger.debug("No shortcut file at %s, starting empty", path)
            return cls()

        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise IoFailure(f"Cannot read shortcut file {path}: {exc}") from exc

        # The "urls" map is required; a file without it is not a shortcut file.
        try:
            payload = RegistryFile.model_validate_json(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValidationError) as exc:
            raise MalformedRegistry(f"Malformed shortcut file at {path}") from exc

        logger.debug("Loaded %d shortcuts from %s", len(payload.urls), path)
        return cls(urls=dict(payload.urls))

    def save(self, path: Path | None = None) -> None:
        """Rewrite the shortcut file, creating parent directories as needed.

        Raises:
            IoFailure: on any filesystem error.
        """
        if path is None:
            path = get_registry_path()

        content = json.dumps({"urls": self.urls}, indent=2, sort_keys=True) + "\n"
        tmp = path.with_suffix(".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(content, encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise IoFailure(f"Cannot write shortcut file {path}: {exc}") from exc
        logger.debug("Saved %d shortcuts to %s", len(self.urls), path)

    def get(self, key: str) -> str | None:
        return self.urls.get(key)

    def upsert(self, key: str, url: str) -> bool:
        """Insert or replace a shortcut. Returns True if the key already existed."""
        if not key:
            raise ValueError("Shortcut key must not be empty")
        existed = key in self.urls
        self.urls[key] = url
        return existed

    def list_sorted(self) -> list[tuple[str, str]]:
        """All shortcuts ordered by key."""
        return sorted(self.urls.items())

    def __len__(self) -> int:
        return len(self.urls)

    def __contains__(self, key: object) -> bool:
        return key in self.urls
