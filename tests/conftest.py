from __future__ import annotations

from pathlib import Path

import pytest

from update_notify import paths


@pytest.fixture(autouse=True)
def config_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Path:
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.delenv("UPDATE_NOTIFY_CONFIG_DIR", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr(paths, "_DEFAULT_CONFIG_HOME", config_dir)
    return config_dir


@pytest.fixture(autouse=True)
def _mock_npm_command(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UPDATE_NOTIFY_NPM", "npm")


@pytest.fixture
def current_timestamp() -> int:
    return 1_765_278_683_000
