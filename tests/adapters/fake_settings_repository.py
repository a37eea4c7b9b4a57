from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from update_notify.ports.settings_repository import SettingsRepository


class FakeSettingsRepository(SettingsRepository):
    def __init__(
        self,
        records: dict[str, dict[str, Any]] | None = None,
        error: OSError | None = None,
    ) -> None:
        self.records: dict[str, dict[str, Any]] = records or {}
        self._error = error
        self.set_calls = 0

    async def get(self, name: str) -> dict[str, Any] | None:
        record = self.records.get(name)
        return dict(record) if record is not None else None

    async def set(self, name: str, values: Mapping[str, Any]) -> dict[str, Any]:
        self.set_calls += 1
        if self._error is not None:
            raise self._error
        record = self.records.setdefault(name, {})
        record.update(values)
        return dict(record)
