from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
import time
from typing import Any

from pydantic import ValidationError

from update_notify.adapters.environment_ci_detector import EnvironmentCIDetector
from update_notify.adapters.filesystem_settings_repository import (
    FileSystemSettingsRepository,
)
from update_notify.adapters.npm_registry_gateway import NpmRegistryGateway
from update_notify.adapters.semver_version_comparator import (
    SemverVersionComparator,
)
from update_notify.ports.ci_detector import CIDetector
from update_notify.ports.registry_gateway import RegistryGateway, RegistryGatewayError
from update_notify.ports.settings_repository import (
    SettingsRepository,
    UpdateRecord,
    record_name,
)
from update_notify.ports.version_comparator import VersionComparator
from update_notify.result import Failure, SettingsResult, Success

logger = logging.getLogger(__name__)

DEFAULT_DIST_TAG = "latest"
PING_TIMEOUT_SECONDS = 5.0
DEFAULT_UPDATE_CHECK_INTERVAL_MS = 24 * 60 * 60 * 1000


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class PackageInfo:
    name: str | None = None
    version: str | None = None


@dataclass(frozen=True, slots=True)
class NotifyOptions:
    pkg: PackageInfo | None = None
    dist_tag: str = DEFAULT_DIST_TAG

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> NotifyOptions:
        pkg = options.get("pkg")
        if pkg is not None and not isinstance(pkg, PackageInfo):
            pkg = PackageInfo(name=pkg.get("name"), version=pkg.get("version"))
        dist_tag = options.get("dist_tag") or options.get("distTag")
        return cls(pkg=pkg, dist_tag=dist_tag or DEFAULT_DIST_TAG)


def is_ci(detector: CIDetector | None = None) -> bool:
    return (detector or EnvironmentCIDetector()).is_ci()


async def ping_registry(
    gateway: RegistryGateway | None = None,
    *,
    timeout: float = PING_TIMEOUT_SECONDS,
) -> bool:
    gateway = gateway or NpmRegistryGateway()
    try:
        return await asyncio.wait_for(gateway.ping(), timeout=timeout)
    except TimeoutError:
        logger.warning("Registry ping did not complete within %.1f seconds.", timeout)
        return False
    except RegistryGatewayError:
        logger.debug("Registry ping failed.", exc_info=True)
        return False


async def latest_version(
    package_name: str | None,
    dist_tag: str = DEFAULT_DIST_TAG,
    gateway: RegistryGateway | None = None,
) -> str | None:
    """Return the version published under ``dist_tag``, or ``None``.

    Every failure (unknown package, unknown tag, registry unreachable, npm
    missing) collapses to ``None``.
    """
    if not package_name:
        return None

    gateway = gateway or NpmRegistryGateway()
    try:
        return await gateway.fetch_dist_tag(package_name, dist_tag or DEFAULT_DIST_TAG)
    except RegistryGatewayError as error:
        logger.debug(
            "Could not resolve %s@%s (%s): %s", package_name, dist_tag, error.cause, error
        )
        return None


def semver_check(
    current_version: str,
    latest_version: str,
    comparator: VersionComparator | None = None,
) -> bool:
    return (comparator or SemverVersionComparator()).is_older(
        current_version, latest_version
    )


async def set_config(
    package_name: str,
    params: Mapping[str, Any] | None = None,
    repository: SettingsRepository | None = None,
) -> SettingsResult:
    repository = repository or FileSystemSettingsRepository()
    try:
        values = await repository.set(record_name(package_name), params or {})
    except PermissionError as error:
        logger.warning(
            "%s. Looks like an EACCES or EPERM error occurred, try running with "
            "sudo or get write access to the settings directory.",
            error,
        )
        return Failure(error)
    except OSError as error:
        logger.warning(
            "Failed to save update settings for %s.", package_name, exc_info=True
        )
        return Failure(error)
    return Success(values)


async def get_config(
    package_name: str,
    field: str = "",
    repository: SettingsRepository | None = None,
) -> Any | None:
    repository = repository or FileSystemSettingsRepository()
    values = await repository.get(record_name(package_name))
    if values is None or not field:
        return values

    value: Any = values
    for key in field.split("."):
        if not isinstance(value, dict) or key not in value:
            return None
        value = value[key]
    return value


async def load_update_record(
    package_name: str, repository: SettingsRepository | None = None
) -> UpdateRecord | None:
    values = await get_config(package_name, repository=repository)
    if values is None:
        return None
    try:
        return UpdateRecord.model_validate(values)
    except ValidationError:
        logger.debug("Ignoring malformed update record for %s.", package_name)
        return None


def should_check_updates(
    last_update_check: int | None,
    update_check_interval: int = DEFAULT_UPDATE_CHECK_INTERVAL_MS,
    *,
    get_current_timestamp: Callable[[], int] = _now_ms,
) -> bool:
    # a package that was never checked is not due; check_for_updates handles first runs
    if not last_update_check:
        return False
    return get_current_timestamp() - last_update_check >= update_check_interval


async def notify_flow(
    options: NotifyOptions | Mapping[str, Any],
    *,
    gateway: RegistryGateway | None = None,
    comparator: VersionComparator | None = None,
    repository: SettingsRepository | None = None,
    get_current_timestamp: Callable[[], int] = _now_ms,
) -> SettingsResult | None:
    """Resolve the latest version of ``options.pkg`` and store the outcome.

    Returns ``None`` without touching the settings when the latest version
    cannot be resolved, otherwise the result of writing the update record.
    """
    if not isinstance(options, NotifyOptions):
        options = NotifyOptions.from_mapping(options)
    pkg = options.pkg or PackageInfo()

    if not (latest := await latest_version(pkg.name, options.dist_tag, gateway)):
        return None

    current = pkg.version or ""
    record = UpdateRecord(
        update_available=semver_check(current, latest, comparator),
        latest=latest,
        current=current,
        last_update_check=get_current_timestamp(),
    )
    return await set_config(pkg.name or "", record.to_settings(), repository)


async def check_for_updates(
    pkg: PackageInfo,
    *,
    dist_tag: str = DEFAULT_DIST_TAG,
    update_check_interval: int = DEFAULT_UPDATE_CHECK_INTERVAL_MS,
    gateway: RegistryGateway | None = None,
    comparator: VersionComparator | None = None,
    repository: SettingsRepository | None = None,
    ci_detector: CIDetector | None = None,
    get_current_timestamp: Callable[[], int] = _now_ms,
) -> UpdateRecord | None:
    if not pkg.name or not pkg.version or is_ci(ci_detector):
        return None

    repository = repository or FileSystemSettingsRepository()
    record = await load_update_record(pkg.name, repository)

    if (
        record is None
        or record.current != pkg.version
        or should_check_updates(
            record.last_update_check,
            update_check_interval,
            get_current_timestamp=get_current_timestamp,
        )
    ):
        await notify_flow(
            NotifyOptions(pkg=pkg, dist_tag=dist_tag),
            gateway=gateway,
            comparator=comparator,
            repository=repository,
            get_current_timestamp=get_current_timestamp,
        )
        record = await load_update_record(pkg.name, repository)

    return record
