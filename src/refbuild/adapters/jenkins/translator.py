"""Translate Jenkins payloads into an in-memory build snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

from refbuild.adapters.memory import MemoryFolder, MemoryMultiBranchProject

if TYPE_CHECKING:
    from refbuild.adapters.memory import MemoryBuild

    from .schema import BuildPayload, ContainerPayload, JobPayload


def translate_container(payload: ContainerPayload) -> MemoryFolder:
    name = payload.full_name or payload.name
    if payload.is_multi_branch:
        return MemoryMultiBranchProject(name=name)
    return MemoryFolder(name=name)


def add_job(folder: MemoryFolder, payload: JobPayload, *extra: BuildPayload) -> None:
    """Add a job and its builds (oldest first) to ``folder``."""

    builds = {build.number: build for build in payload.builds}
    for build in extra:
        builds[build.number] = build

    job = folder.add_job(payload.name)
    for number in sorted(builds):
        build = builds[number]
        job.add_build(result=build.result, building=build.building, number=number)


def build_snapshot(
    build: BuildPayload,
    job: JobPayload,
    container: ContainerPayload,
) -> MemoryBuild:
    """Return the translated ``build`` inside a snapshot of its job's container.

    Sibling jobs come from the container payload. The current job is taken
    from ``job`` so that its history includes ``build`` even when the
    container listing was truncated.
    """

    folder = translate_container(container)
    for sibling in container.jobs:
        if sibling.name != job.name:
            add_job(folder, sibling)
    add_job(folder, job, build)

    current_job = folder.jobs[job.name]
    snapshot = current_job.get_build(build.number)
    if snapshot is None:  # pragma: no cover - add_job always adds the build
        raise LookupError(f"Build #{build.number} missing from job {job.name!r}")
    return snapshot
