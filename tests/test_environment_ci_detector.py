from __future__ import annotations

import pytest

from update_notify import EnvironmentCIDetector, is_ci


def test_is_not_ci_in_a_clean_environment() -> None:
    assert not EnvironmentCIDetector(environ={}).is_ci()


@pytest.mark.parametrize(
    "variable", ["CI", "CONTINUOUS_INTEGRATION", "BUILD_NUMBER", "RUN_ID"]
)
def test_detects_generic_ci_variables(variable: str) -> None:
    assert EnvironmentCIDetector(environ={variable: "1"}).is_ci()


def test_detects_ci_vendors() -> None:
    detector = EnvironmentCIDetector(environ={"GITHUB_ACTIONS": "true"})

    assert detector.is_ci()
    assert detector.vendor() == "GitHub Actions"


def test_ci_false_opts_out() -> None:
    detector = EnvironmentCIDetector(environ={"CI": "false", "GITLAB_CI": "true"})

    assert not detector.is_ci()
    assert detector.vendor() == "GitLab CI"


def test_ignores_empty_variables() -> None:
    assert not EnvironmentCIDetector(environ={"CI": ""}).is_ci()


def test_reads_the_process_environment_by_default(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CI", "true")

    assert is_ci()


def test_uses_the_given_detector() -> None:
    class AlwaysCI:
        def is_ci(self) -> bool:
            return True

    assert is_ci(AlwaysCI())
