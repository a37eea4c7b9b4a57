from __future__ import annotations

from typing import Protocol


class VersionComparator(Protocol):
    def is_older(self, current_version: str, latest_version: str) -> bool: ...
