"""Boundary protocols for builds, jobs and the containers that own them.

These handles are owned by the build host. The resolver only reads them, so
the protocols list nothing beyond the lookups it needs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .enums import BuildResult


@runtime_checkable
class ItemGroup(Protocol):
    """Any container that owns jobs (folder, organization, multi-branch project)."""

    @property
    def full_name(self) -> str: ...


@runtime_checkable
class Job(Protocol):
    """A pipeline or branch project."""

    @property
    def name(self) -> str: ...

    @property
    def parent(self) -> ItemGroup: ...

    def last_completed_build(self) -> Build | None: ...


@runtime_checkable
class Build(Protocol):
    """One execution of a job."""

    @property
    def parent(self) -> Job: ...

    @property
    def externalizable_id(self) -> str: ...


@runtime_checkable
class BuildHistory(Build, Protocol):
    """A build that also exposes its outcome and predecessor.

    Eligibility policies that walk back through the history require this
    capability; the resolver itself never does.
    """

    @property
    def number(self) -> int: ...

    @property
    def result(self) -> BuildResult | None: ...

    @property
    def is_building(self) -> bool: ...

    @property
    def previous_build(self) -> BuildHistory | None: ...


@runtime_checkable
class MultiBranchProject(Protocol):
    """A container that owns one job per discovered source-control branch."""

    def get_item_by_branch_name(self, name: str) -> Job | None: ...


def is_multi_branch_project(item: object) -> bool:
    """Return whether ``item`` can look up branch jobs by name."""

    return isinstance(item, MultiBranchProject)
