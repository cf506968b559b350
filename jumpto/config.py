"""Configuration management for jumpto."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

from . import get_config_home
from .errors import ConfigError, IoFailure
from .urls import DEFAULT_CI_HOST, DEFAULT_WEB_HOST, RUST_DOC_SEARCH_URL


@dataclass
class JumptoConfig:
    """jumpto configuration."""

    # Hosts
    web_host: str = DEFAULT_WEB_HOST  # host name replaced when building CI URLs
    ci_host: str = DEFAULT_CI_HOST

    # Documentation search (`jumpto rust --search`)
    doc_search_url: str = RUST_DOC_SEARCH_URL

    # Browser name as understood by the webbrowser module. Empty = system default
    browser: str = ""

    # Shortcut file. Empty = <config home>/urls.json
    registry_path: str = ""

    @classmethod
    def load(cls, config_path: Path | None = None) -> JumptoConfig:
        """Load configuration from YAML file with environment variable overrides."""
        if config_path is None:
            config_path = get_config_home() / "config.yaml"

        config_dict: dict[str, Any] = {}
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    config_dict = yaml.safe_load(f) or {}
            except (yaml.YAMLError, UnicodeDecodeError) as exc:
                raise ConfigError(f"Malformed config file at {config_path}") from exc
            except OSError as exc:
                raise IoFailure(f"Cannot read config file {config_path}: {exc}") from exc
            if not isinstance(config_dict, dict):
                raise ConfigError(f"Malformed config file at {config_path}: expected a mapping")

        # Environment variable overrides (JUMPTO_ prefix)
        env_map = {
            "web_host": "JUMPTO_WEB_HOST",
            "ci_host": "JUMPTO_CI_HOST",
            "doc_search_url": "JUMPTO_DOC_SEARCH_URL",
            "browser": "JUMPTO_BROWSER",
            "registry_path": "JUMPTO_REGISTRY_PATH",
        }

        for field_name, env_var in env_map.items():
            value = os.getenv(env_var)
            if value is not None:
                config_dict[field_name] = value

        # Only pass known fields
        known = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: "" if v is None else str(v) for k, v in config_dict.items() if k in known})

    def save(self, config_path: Path | None = None) -> None:
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = get_config_home() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(asdict(self), f, default_flow_style=False, allow_unicode=True)

    @property
    def resolved_registry_path(self) -> Path | None:
        """Configured shortcut file (~ expanded), or None for the default location."""
        if not self.registry_path:
            return None
        return Path(self.registry_path).expanduser()
