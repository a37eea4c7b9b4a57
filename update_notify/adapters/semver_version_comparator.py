from __future__ import annotations

import semver

from update_notify.ports.version_comparator import VersionComparator


def parse_version(raw: str) -> semver.Version:
    """Parse an npm version string.

    A leading ``v`` or ``=`` is dropped as npm does. Anything that is not a
    valid SemVer 2.0 version raises :class:`ValueError`.
    """
    return semver.Version.parse(raw.strip().lstrip("=v"))


class SemverVersionComparator(VersionComparator):
    def is_older(self, current_version: str, latest_version: str) -> bool:
        return parse_version(current_version) < parse_version(latest_version)
