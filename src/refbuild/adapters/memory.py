"""In-memory build registry.

Used as the snapshot format produced by host adapters and as fakes in tests.
Branch jobs inside a multi-branch project are keyed by their encoded job name,
the same way build hosts derive job names from branch names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from refbuild.domain.model import BuildResult, Job, SourceHead

_NAME_ESCAPES: Final[Mapping[str, str]] = {
    "%": "%25",
    "/": "%2F",
    "\\": "%5C",
    ":": "%3A",
    "?": "%3F",
    "#": "%23",
    "|": "%7C",
    "*": "%2A",
    "<": "%3C",
    ">": "%3E",
    '"': "%22",
}


def encode_branch_name(name: str) -> str:
    """Encode a branch name into the job name a multi-branch project uses."""

    if name in {".", ".."}:
        return name.replace(".", "%2E")
    return "".join(_NAME_ESCAPES.get(char, char) for char in name)


@dataclass(eq=False)
class MemoryBuild:
    parent: MemoryJob = field(repr=False)
    number: int
    result: BuildResult | None = None
    is_building: bool = False
    previous_build: MemoryBuild | None = field(default=None, repr=False)

    @property
    def externalizable_id(self) -> str:
        return f"{self.parent.full_name}#{self.number}"

    def __str__(self) -> str:
        return self.externalizable_id


@dataclass(eq=False)
class MemoryJob:
    name: str
    parent: MemoryFolder = field(repr=False)
    builds: list[MemoryBuild] = field(default_factory=list["MemoryBuild"], repr=False)

    @property
    def full_name(self) -> str:
        prefix = self.parent.full_name
        return f"{prefix}/{self.name}" if prefix else self.name

    def add_build(
        self,
        *,
        result: BuildResult | None = None,
        building: bool = False,
        number: int | None = None,
    ) -> MemoryBuild:
        """Append a newer build and link it to its predecessor."""

        previous = self.last_build
        if number is None:
            number = previous.number + 1 if previous is not None else 1
        elif previous is not None and number <= previous.number:
            raise ValueError(f"Build number {number} must be greater than {previous.number}")
        build = MemoryBuild(
            parent=self,
            number=number,
            result=result,
            is_building=building,
            previous_build=previous,
        )
        self.builds.append(build)
        return build

    @property
    def last_build(self) -> MemoryBuild | None:
        return self.builds[-1] if self.builds else None

    def last_completed_build(self) -> MemoryBuild | None:
        for build in reversed(self.builds):
            if not build.is_building:
                return build
        return None

    def get_build(self, number: int) -> MemoryBuild | None:
        return next((build for build in self.builds if build.number == number), None)

    def __str__(self) -> str:
        return self.full_name


@dataclass(eq=False)
class MemoryFolder:
    """A plain container of jobs; it cannot look up jobs by branch name."""

    name: str
    parent: MemoryFolder | None = field(default=None, repr=False)
    jobs: dict[str, MemoryJob] = field(default_factory=dict[str, MemoryJob], repr=False)

    @property
    def full_name(self) -> str:
        if self.parent is None or not self.parent.full_name:
            return self.name
        return f"{self.parent.full_name}/{self.name}"

    def add_job(self, name: str) -> MemoryJob:
        if name in self.jobs:
            raise ValueError(f"Job {name!r} already exists in {self.full_name!r}")
        job = MemoryJob(name=name, parent=self)
        self.jobs[name] = job
        return job

    def get_item(self, name: str) -> MemoryJob | None:
        return self.jobs.get(name)

    def __iter__(self) -> Iterator[MemoryJob]:
        return iter(self.jobs.values())

    def __str__(self) -> str:
        return self.full_name


@dataclass(eq=False)
class MemoryMultiBranchProject(MemoryFolder):
    """A container holding one job per source-control branch."""

    def add_branch(self, branch_name: str) -> MemoryJob:
        return self.add_job(encode_branch_name(branch_name))

    def get_item_by_branch_name(self, name: str) -> MemoryJob | None:
        return self.jobs.get(encode_branch_name(name)) or self.jobs.get(name)


@dataclass
class StaticScmFacade:
    """SCM facade answering from a fixed mapping of job full names to heads."""

    heads: dict[str, SourceHead] = field(default_factory=dict[str, "SourceHead"])

    def set_head(self, job: Job | str, head: SourceHead) -> None:
        key = job if isinstance(job, str) else _job_key(job)
        self.heads[key] = head

    def find_head(self, job: Job) -> SourceHead | None:
        return self.heads.get(_job_key(job))


def _job_key(job: Job) -> str:
    full_name = getattr(job, "full_name", None)
    return full_name if isinstance(full_name, str) else job.name


__all__ = [
    "MemoryBuild",
    "MemoryFolder",
    "MemoryJob",
    "MemoryMultiBranchProject",
    "StaticScmFacade",
    "encode_branch_name",
]
