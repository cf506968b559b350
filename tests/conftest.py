"""Keep tests away from the real ~/.config/jumpto."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    for var in (
        "JUMPTO_WEB_HOST",
        "JUMPTO_CI_HOST",
        "JUMPTO_DOC_SEARCH_URL",
        "JUMPTO_BROWSER",
        "JUMPTO_REGISTRY_PATH",
    ):
        monkeypatch.delenv(var, raising=False)
    return home / "jumpto"
