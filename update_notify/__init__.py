from __future__ import annotations

from update_notify.adapters.environment_ci_detector import EnvironmentCIDetector
from update_notify.adapters.filesystem_settings_repository import (
    FileSystemSettingsRepository,
)
from update_notify.adapters.npm_registry_gateway import NpmRegistryGateway
from update_notify.adapters.semver_version_comparator import (
    SemverVersionComparator,
)
from update_notify.ports.ci_detector import CIDetector
from update_notify.ports.registry_gateway import (
    DEFAULT_GATEWAY_MESSAGES,
    RegistryGateway,
    RegistryGatewayCause,
    RegistryGatewayError,
)
from update_notify.ports.settings_repository import (
    CONFIG_NAMESPACE_PREFIX,
    SettingsRepository,
    UpdateRecord,
    record_name,
)
from update_notify.ports.version_comparator import VersionComparator
from update_notify.result import Failure, SettingsResult, Success
from update_notify.update import (
    DEFAULT_DIST_TAG,
    DEFAULT_UPDATE_CHECK_INTERVAL_MS,
    PING_TIMEOUT_SECONDS,
    NotifyOptions,
    PackageInfo,
    check_for_updates,
    get_config,
    is_ci,
    latest_version,
    load_update_record,
    notify_flow,
    ping_registry,
    semver_check,
    set_config,
    should_check_updates,
)

__version__ = "0.2.0"

__all__ = [
    "CONFIG_NAMESPACE_PREFIX",
    "DEFAULT_DIST_TAG",
    "DEFAULT_GATEWAY_MESSAGES",
    "DEFAULT_UPDATE_CHECK_INTERVAL_MS",
    "PING_TIMEOUT_SECONDS",
    "CIDetector",
    "EnvironmentCIDetector",
    "Failure",
    "FileSystemSettingsRepository",
    "NotifyOptions",
    "NpmRegistryGateway",
    "PackageInfo",
    "SemverVersionComparator",
    "RegistryGateway",
    "RegistryGatewayCause",
    "RegistryGatewayError",
    "SettingsRepository",
    "SettingsResult",
    "Success",
    "UpdateRecord",
    "VersionComparator",
    "check_for_updates",
    "get_config",
    "is_ci",
    "latest_version",
    "load_update_record",
    "notify_flow",
    "ping_registry",
    "record_name",
    "semver_check",
    "set_config",
    "should_check_updates",
]
