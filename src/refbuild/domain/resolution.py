"""Resolution of the reference build for a branch or pull-request build.

The resolver walks from a build to its job and the job's container. In a
multi-branch project it picks the target branch (an explicitly configured
branch first, the target of a pull or merge request second), looks up the
latest completed build of that branch's job and lets the eligibility policy
accept or reject it. Without a target branch no job is searched. Every
decision is recorded on the caller's :class:`FilteredLog`; missing data
never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from refbuild.domain.eligibility import AcceptAnyBuild
from refbuild.domain.model import is_multi_branch_project
from refbuild.domain.ports.scm import NoScmFacade
from refbuild.domain.reference import ReferenceBuild

if TYPE_CHECKING:
    from refbuild.domain.filtered_log import FilteredLog
    from refbuild.domain.model import Build, Job, MultiBranchProject
    from refbuild.domain.ports import EligibilityPolicy, ScmFacade

DEFAULT_TARGET_BRANCH: Final[str] = "master"


@dataclass(slots=True)
class ReferenceConfig:
    """Step configuration; a blank ``target_branch`` means unset."""

    target_branch: str = ""

    @property
    def configured_target_branch(self) -> str | None:
        name = self.target_branch.strip()
        return name or None


class ReferenceResolver:
    """Finds the build that the results of a given build are compared with.

    The acceptance policy is injected; without one every located candidate is
    accepted. The configuration is only read while resolving, so it must not
    be changed while a resolution is running.
    """

    def __init__(
        self,
        policy: EligibilityPolicy | None = None,
        *,
        scm_facade: ScmFacade | None = None,
        config: ReferenceConfig | None = None,
    ) -> None:
        self.policy = policy or AcceptAnyBuild()
        self.scm_facade = scm_facade or NoScmFacade()
        self.config = config or ReferenceConfig()

    @property
    def target_branch(self) -> str:
        return self.config.target_branch

    def set_target_branch(self, target_branch: str) -> None:
        self.config.target_branch = target_branch

    def find(self, current: Build, candidate: Build) -> Build | None:
        """Apply the eligibility policy to a located candidate."""

        return self.policy.find(current, candidate)

    def find_reference_build(self, build: Build, log: FilteredLog) -> ReferenceBuild:
        job = build.parent
        parent = job.parent

        if not is_multi_branch_project(parent):
            log.log_info(
                "Found a `MultiBranchProject`: no, found non-multi-branch project '%s'",
                _display_name(parent),
            )
            log.log_info(
                "-> falling back to plugin default target branch '%s'", DEFAULT_TARGET_BRANCH
            )
            log.log_info("-> no target job available to search for a reference build")
            return ReferenceBuild(build)

        log.log_info(
            "Found a `MultiBranchProject`, trying to resolve the target branch from the "
            "configuration"
        )
        target_name = self._find_target_branch(job, log)
        if target_name is None:
            log.log_info("-> no target job available to search for a reference build")
            return ReferenceBuild(build)

        candidate = self._find_target_build(parent, target_name, log)
        if candidate is None:
            return ReferenceBuild(build)

        reference = self.find(build, candidate)
        if reference is None:
            log.log_info(
                "-> build '%s' has been rejected as reference build",
                candidate.externalizable_id,
            )
            return ReferenceBuild(build)

        log.log_info("-> using build '%s' as reference build", reference.externalizable_id)
        return ReferenceBuild(build, reference)

    def _find_target_branch(self, job: Job, log: FilteredLog) -> str | None:
        configured = self.config.configured_target_branch
        if configured is not None:
            log.log_info("-> using target branch '%s' as configured in step", configured)
            return configured

        log.log_info("-> no target branch configured in step")
        try:
            head = self.scm_facade.find_head(job)
        except Exception as exc:  # noqa: BLE001
            log.log_exception(exc, "-> could not determine the SCM head of job '%s'", job.name)
            head = None

        target = head.change_request_target if head is not None else None
        if head is not None and target is not None:
            log.log_info(
                "-> detected a pull or merge request '%s' for target branch '%s'",
                head,
                target.name,
            )
            return target.name

        if head is None:
            log.log_info("-> no SCM head found for job '%s'", job.name)
        else:
            log.log_info("-> no pull or merge request detected for branch '%s'", head)
        log.log_info(
            "-> falling back to plugin default target branch '%s'", DEFAULT_TARGET_BRANCH
        )
        return None

    @staticmethod
    def _find_target_build(
        parent: MultiBranchProject,
        target_name: str,
        log: FilteredLog,
    ) -> Build | None:
        target_job = parent.get_item_by_branch_name(target_name)
        if target_job is None:
            log.log_error(
                "-> no job found for target branch '%s' (branch has been deleted or renamed?)",
                target_name,
            )
            return None

        target_build = target_job.last_completed_build()
        if target_build is None:
            log.log_error("-> target job '%s' has no completed build yet", target_job.name)
            return None

        log.log_info(
            "-> found latest completed build '%s' of target branch '%s'",
            target_build.externalizable_id,
            target_name,
        )
        return target_build


def _display_name(item: object) -> str:
    full_name = getattr(item, "full_name", None)
    return full_name if isinstance(full_name, str) and full_name else str(item)
