from __future__ import annotations

from dataclasses import dataclass

import pytest

from refbuild.adapters.memory import (
    MemoryBuild,
    MemoryFolder,
    MemoryJob,
    MemoryMultiBranchProject,
    StaticScmFacade,
)
from refbuild.domain.filtered_log import FilteredLog
from refbuild.domain.model import BranchHead, BuildResult, ChangeRequestHead


@dataclass
class MultiBranchSetup:
    """A multi-branch project with a running pull request build.

    ``pr-target`` and ``target`` both have completed builds; ``build`` is the
    running build of job ``PR-1`` whose head targets ``pr-target``.
    """

    project: MemoryMultiBranchProject
    job: MemoryJob
    build: MemoryBuild
    pr_target_build: MemoryBuild
    target_build: MemoryBuild
    scm_facade: StaticScmFacade


@pytest.fixture
def multi_branch() -> MultiBranchSetup:
    project = MemoryMultiBranchProject(name="org/repo")

    pr_target = project.add_branch("pr-target")
    pr_target.add_build(result=BuildResult.SUCCESS)
    pr_target_build = pr_target.add_build(result=BuildResult.UNSTABLE)

    target = project.add_branch("target")
    target_build = target.add_build(result=BuildResult.SUCCESS)

    job = project.add_branch("PR-1")
    build = job.add_build(building=True)

    scm_facade = StaticScmFacade()
    scm_facade.set_head(job, ChangeRequestHead(name="pr", target=BranchHead("pr-target")))

    return MultiBranchSetup(
        project=project,
        job=job,
        build=build,
        pr_target_build=pr_target_build,
        target_build=target_build,
        scm_facade=scm_facade,
    )


@pytest.fixture
def freestyle_build() -> MemoryBuild:
    folder = MemoryFolder(name="folder")
    job = folder.add_job("job")
    job.add_build(result=BuildResult.SUCCESS)
    return job.add_build(building=True)


@pytest.fixture
def filtered_log() -> FilteredLog:
    return FilteredLog("EMPTY")
