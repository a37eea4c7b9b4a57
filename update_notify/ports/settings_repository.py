from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

CONFIG_NAMESPACE_PREFIX = "o-update-notify-"


def record_name(package_name: str) -> str:
    return f"{CONFIG_NAMESPACE_PREFIX}{package_name}"


class UpdateRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    update_available: bool = Field(alias="updateAvailable")
    latest: str
    current: str
    last_update_check: int = Field(alias="lastUpdateCheck")

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class SettingsRepository(Protocol):
    async def get(self, name: str) -> dict[str, Any] | None: ...
    async def set(self, name: str, values: Mapping[str, Any]) -> dict[str, Any]: ...
