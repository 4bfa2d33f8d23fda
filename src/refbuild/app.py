"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from refbuild.adapters.environment import EnvironmentScmFacade
from refbuild.adapters.jenkins import JenkinsBuildLoader
from refbuild.domain.eligibility import AcceptAnyBuild, RequireResult, SkipRunningBuilds
from refbuild.domain.filtered_log import FilteredLog
from refbuild.domain.resolution import ReferenceResolver

if TYPE_CHECKING:
    from refbuild.domain.model import BuildResult
    from refbuild.domain.ports import BuildLoader, EligibilityPolicy, ScmFacade
    from refbuild.domain.reference import ReferenceBuild

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolutionOutcome:
    reference: ReferenceBuild
    log: FilteredLog


def select_policy(
    *,
    required_result: BuildResult | None = None,
    skip_running: bool = False,
) -> EligibilityPolicy:
    """Pick the eligibility policy matching the command line options."""

    if required_result is not None:
        return RequireResult(required=required_result)
    if skip_running:
        return SkipRunningBuilds()
    return AcceptAnyBuild()


def resolve_reference_build(
    locator: str,
    *,
    loader: BuildLoader | None = None,
    scm_facade: ScmFacade | None = None,
    policy: EligibilityPolicy | None = None,
    target_branch: str | None = None,
) -> ResolutionOutcome:
    """Load the build at ``locator`` and resolve its reference build."""

    effective_loader = loader or JenkinsBuildLoader()
    effective_facade = scm_facade or EnvironmentScmFacade()
    log.info("Resolving reference build for %s", locator)

    build = effective_loader(locator)
    resolver = ReferenceResolver(policy, scm_facade=effective_facade)
    if target_branch is not None:
        resolver.set_target_branch(target_branch)

    trail = FilteredLog("Errors while resolving the reference build:")
    reference = resolver.find_reference_build(build, trail)
    trail.log_summary()

    log.info(f"Finished resolution: {reference}")
    return ResolutionOutcome(reference=reference, log=trail)
