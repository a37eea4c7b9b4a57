from __future__ import annotations

from collections.abc import Callable
import os
from pathlib import Path
import sys


class GlobalPath:
    def __init__(self, resolver: Callable[[], Path]) -> None:
        self._resolver = resolver

    @property
    def path(self) -> Path:
        return self._resolver()


_DEFAULT_CONFIG_HOME = Path.home() / ".config"


def is_windows() -> bool:
    return sys.platform == "win32"


def _get_config_home() -> Path:
    if config_dir := os.getenv("UPDATE_NOTIFY_CONFIG_DIR"):
        return Path(config_dir).expanduser().resolve()
    if xdg_config_home := os.getenv("XDG_CONFIG_HOME"):
        return Path(xdg_config_home).expanduser()
    return _DEFAULT_CONFIG_HOME


def get_npm_command() -> str:
    if npm := os.getenv("UPDATE_NOTIFY_NPM"):
        return npm
    return "npm.cmd" if is_windows() else "npm"


CONFIG_HOME = GlobalPath(_get_config_home)
CONFIGSTORE_DIR = GlobalPath(lambda: CONFIG_HOME.path / "configstore")
