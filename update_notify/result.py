from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Success:
    values: dict[str, Any]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    error: OSError

    @property
    def ok(self) -> bool:
        return False


SettingsResult: TypeAlias = Success | Failure
