from __future__ import annotations

from collections.abc import Mapping
import os

from update_notify.ports.ci_detector import CIDetector

GENERIC_CI_VARIABLES = (
    "BUILD_ID",
    "BUILD_NUMBER",
    "CI",
    "CI_APP_ID",
    "CI_BUILD_ID",
    "CI_BUILD_NUMBER",
    "CI_NAME",
    "CONTINUOUS_INTEGRATION",
    "RUN_ID",
)

VENDOR_VARIABLES: dict[str, str] = {
    "AppVeyor": "APPVEYOR",
    "Azure Pipelines": "TF_BUILD",
    "Bitbucket Pipelines": "BITBUCKET_COMMIT",
    "Bitrise": "BITRISE_IO",
    "Buddy": "BUDDY_WORKSPACE_ID",
    "Buildkite": "BUILDKITE",
    "CircleCI": "CIRCLECI",
    "Codefresh": "CF_BUILD_ID",
    "AWS CodeBuild": "CODEBUILD_BUILD_ARN",
    "Drone": "DRONE",
    "GitHub Actions": "GITHUB_ACTIONS",
    "GitLab CI": "GITLAB_CI",
    "Hudson": "HUDSON_URL",
    "Jenkins": "JENKINS_URL",
    "Netlify CI": "NETLIFY",
    "Semaphore": "SEMAPHORE",
    "TeamCity": "TEAMCITY_VERSION",
    "Travis CI": "TRAVIS",
    "Vercel": "VERCEL",
}


class EnvironmentCIDetector(CIDetector):
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    @property
    def _env(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def vendor(self) -> str | None:
        env = self._env
        for name, variable in VENDOR_VARIABLES.items():
            if env.get(variable):
                return name
        return None

    def is_ci(self) -> bool:
        env = self._env
        # CI=false is an explicit opt-out, even on a CI vendor
        if env.get("CI") == "false":
            return False
        if any(env.get(variable) for variable in GENERIC_CI_VARIABLES):
            return True
        return self.vendor() is not None
