from __future__ import annotations

import pytest

from update_notify import semver_check


def test_current_version_is_older_than_a_newer_patch() -> None:
    assert semver_check("1.0.0", "1.0.1")


def test_current_version_is_not_older_than_an_earlier_one() -> None:
    assert not semver_check("1.0.1", "1.0.0")


def test_same_version_is_not_older() -> None:
    assert not semver_check("1.0.0", "1.0.0")


@pytest.mark.parametrize(
    "pre_release",
    ["1.0.0-next.3", "1.0.0-canary.1", "1.0.0-dev", "1.0.0-1", "1.0.0-beta.1"],
)
def test_pre_release_precedes_its_release(pre_release: str) -> None:
    assert semver_check(pre_release, "1.0.0")
    assert not semver_check("1.0.0", pre_release)


def test_pre_release_identifiers_are_ordered_by_semver_rules() -> None:
    assert semver_check("1.0.0-alpha", "1.0.0-alpha.1")
    assert semver_check("1.0.0-alpha.9", "1.0.0-alpha.10")
    assert semver_check("1.0.0-1", "1.0.0-next.3")
    assert semver_check("1.0.0-beta.11", "1.0.0-rc.1")


def test_pre_release_of_the_next_version_is_newer() -> None:
    assert semver_check("1.0.0", "1.1.0-next.0")


def test_numeric_parts_are_compared_as_numbers() -> None:
    assert semver_check("1.9.0", "1.10.0")


def test_build_metadata_does_not_affect_precedence() -> None:
    assert not semver_check("1.0.0+build.5", "1.0.0")
    assert not semver_check("1.0.0", "1.0.0+build.5")


def test_accepts_a_leading_v() -> None:
    assert semver_check("v1.0.0", "1.0.1")


@pytest.mark.parametrize("malformed", ["not-a-version", "1.0", ""])
def test_raises_on_malformed_versions(malformed: str) -> None:
    with pytest.raises(ValueError):
        semver_check(malformed, "1.0.0")


def test_uses_the_given_comparator() -> None:
    class AlwaysOlder:
        def is_older(self, current_version: str, latest_version: str) -> bool:
            return True

    assert semver_check("2.0.0", "1.0.0", comparator=AlwaysOlder())
