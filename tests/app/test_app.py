from __future__ import annotations

from typing import TYPE_CHECKING

from refbuild.adapters.memory import StaticScmFacade
from refbuild.app import resolve_reference_build, select_policy
from refbuild.domain.eligibility import AcceptAnyBuild, RequireResult, SkipRunningBuilds
from refbuild.domain.model import BuildResult
from refbuild.domain.reference import NO_REFERENCE_BUILD

if TYPE_CHECKING:
    from refbuild.adapters.memory import MemoryBuild
    from tests.conftest import MultiBranchSetup


def test_select_policy() -> None:
    assert isinstance(select_policy(), AcceptAnyBuild)
    assert isinstance(select_policy(skip_running=True), SkipRunningBuilds)
    policy = select_policy(required_result=BuildResult.SUCCESS, skip_running=True)
    assert isinstance(policy, RequireResult)
    assert policy.required is BuildResult.SUCCESS


def test_resolve_reference_build_uses_loader_and_facade(multi_branch: MultiBranchSetup) -> None:
    requested: list[str] = []

    def loader(locator: str) -> MemoryBuild:
        requested.append(locator)
        return multi_branch.build

    outcome = resolve_reference_build(
        "job/org/job/repo/job/PR-1/1/",
        loader=loader,
        scm_facade=multi_branch.scm_facade,
    )

    assert requested == ["job/org/job/repo/job/PR-1/1/"]
    assert outcome.reference.reference_build is multi_branch.pr_target_build
    assert not outcome.log.has_errors


def test_resolve_reference_build_with_target_branch(multi_branch: MultiBranchSetup) -> None:
    outcome = resolve_reference_build(
        "ignored",
        loader=lambda _locator: multi_branch.build,
        scm_facade=multi_branch.scm_facade,
        target_branch="target",
    )

    assert outcome.reference.reference_build is multi_branch.target_build


def test_resolve_reference_build_without_reference(freestyle_build: MemoryBuild) -> None:
    outcome = resolve_reference_build(
        "ignored",
        loader=lambda _locator: freestyle_build,
        scm_facade=StaticScmFacade(),
    )

    assert outcome.reference.reference_build_id == NO_REFERENCE_BUILD
