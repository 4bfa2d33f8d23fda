"""Reference resolution settings taken from the build environment."""

from __future__ import annotations

from dataclasses import dataclass

from refbuild.domain.model import BuildResult

from .env import optional_env_var
from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ReferenceSettings:
    """Optional overrides for a resolution run.

    ``target_branch`` replaces pull or merge request detection when set.
    ``required_result`` selects the result-based eligibility policy.
    """

    target_branch: str | None = None
    required_result: BuildResult | None = None


def get_reference_settings() -> ReferenceSettings:
    required = optional_env_var("REFBUILD_REQUIRED_RESULT")
    try:
        required_result = BuildResult.parse(required)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid REFBUILD_REQUIRED_RESULT: {required}") from exc
    return ReferenceSettings(
        target_branch=optional_env_var("REFBUILD_TARGET_BRANCH"),
        required_result=required_result,
    )
