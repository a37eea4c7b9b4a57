from __future__ import annotations

import asyncio
from collections.abc import Mapping
import json
import os
from pathlib import Path
from typing import Any

from update_notify.paths import CONFIGSTORE_DIR
from update_notify.ports.settings_repository import SettingsRepository

_DIR_MODE = 0o700
_FILE_MODE = 0o600


class FileSystemSettingsRepository(SettingsRepository):
    """One JSON document per record name, laid out like ``configstore``."""

    def __init__(self, base_path: Path | str | None = None) -> None:
        self._base_path = Path(base_path) if base_path is not None else None

    @property
    def base_path(self) -> Path:
        return self._base_path if self._base_path is not None else CONFIGSTORE_DIR.path

    def path_for(self, name: str) -> Path:
        return self.base_path / f"{name}.json"

    async def get(self, name: str) -> dict[str, Any] | None:
        try:
            return await asyncio.to_thread(_read_settings, self.path_for(name))
        except OSError:
            return None

    async def set(self, name: str, values: Mapping[str, Any]) -> dict[str, Any]:
        return await asyncio.to_thread(self._merge_and_write, name, dict(values))

    def _merge_and_write(self, name: str, values: dict[str, Any]) -> dict[str, Any]:
        path = self.path_for(name)
        settings = _read_settings(path) or {}
        settings.update(values)

        path.parent.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            tmp_path.write_text(json.dumps(settings, indent="\t"), encoding="utf-8")
            os.chmod(tmp_path, _FILE_MODE)
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        return settings


def _read_settings(path: Path) -> dict[str, Any] | None:
    try:
        content = path.read_bytes()
    except FileNotFoundError:
        return None

    try:
        data = json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None

    return data if isinstance(data, dict) else None
