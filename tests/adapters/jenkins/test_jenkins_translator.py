from __future__ import annotations

from refbuild.adapters.jenkins import BuildPayload, ContainerPayload, JobPayload, build_snapshot
from refbuild.adapters.memory import MemoryMultiBranchProject
from refbuild.domain.model import BuildResult, is_multi_branch_project
from tests.helpers.jenkins import JenkinsPayload


def test_build_snapshot_links_build_to_sibling_branches(
    build_payload: JenkinsPayload,
    job_payload: JenkinsPayload,
    container_payload: JenkinsPayload,
) -> None:
    build = build_snapshot(
        BuildPayload.model_validate(build_payload),
        JobPayload.model_validate(job_payload),
        ContainerPayload.model_validate(container_payload),
    )

    assert build.externalizable_id == "org/repo/PR-1#5"
    assert build.is_building
    assert build.previous_build is not None
    assert build.previous_build.result is BuildResult.FAILURE

    project = build.parent.parent
    assert isinstance(project, MemoryMultiBranchProject)
    assert is_multi_branch_project(project)

    main = project.get_item_by_branch_name("main")
    assert main is not None
    completed = main.last_completed_build()
    assert completed is not None
    assert completed.externalizable_id == "org/repo/main#12"

    feature = project.get_item_by_branch_name("feature/login")
    assert feature is not None
    assert feature.name == "feature%2Flogin"


def test_build_snapshot_of_folder_job_is_not_multi_branch(build_payload: JenkinsPayload) -> None:
    build = build_snapshot(
        BuildPayload.model_validate(build_payload),
        JobPayload.model_validate({"name": "nightly", "builds": []}),
        ContainerPayload.model_validate({"_class": "hudson.model.Hudson"}),
    )

    assert build.externalizable_id == "nightly#5"
    assert not is_multi_branch_project(build.parent.parent)
