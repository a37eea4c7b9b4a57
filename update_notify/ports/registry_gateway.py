from __future__ import annotations

from enum import StrEnum, auto
from typing import Protocol


class RegistryGatewayCause(StrEnum):
    @staticmethod
    def _generate_next_value_(
        name: str, start: int, count: int, last_values: list[str]
    ) -> str:
        return name.lower()

    COMMAND_NOT_FOUND = auto()
    COMMAND_FAILED = auto()
    ERROR_OUTPUT = auto()
    EMPTY_RESULT = auto()
    TIMEOUT = auto()
    UNKNOWN = auto()


DEFAULT_GATEWAY_MESSAGES: dict[RegistryGatewayCause, str] = {
    RegistryGatewayCause.COMMAND_NOT_FOUND: "The registry client executable could not be found.",
    RegistryGatewayCause.COMMAND_FAILED: "The registry client exited with an error.",
    RegistryGatewayCause.ERROR_OUTPUT: "The registry client reported an error.",
    RegistryGatewayCause.EMPTY_RESULT: "The registry returned no version for this dist-tag.",
    RegistryGatewayCause.TIMEOUT: "The registry did not answer in time.",
    RegistryGatewayCause.UNKNOWN: "Unable to query the registry.",
}


class RegistryGatewayError(Exception):
    def __init__(
        self, *, cause: RegistryGatewayCause, message: str | None = None
    ) -> None:
        self.cause = cause
        self.user_message = message
        detail = message or DEFAULT_GATEWAY_MESSAGES.get(
            cause, DEFAULT_GATEWAY_MESSAGES[RegistryGatewayCause.UNKNOWN]
        )
        super().__init__(detail)


class RegistryGateway(Protocol):
    async def ping(self) -> bool: ...
    async def fetch_dist_tag(self, package_name: str, dist_tag: str) -> str: ...
