from __future__ import annotations

from typing import Protocol


class CIDetector(Protocol):
    def is_ci(self) -> bool: ...
