"""Source-control heads of branch jobs.

A head is either a plain branch or a change request (pull or merge request)
that targets another branch. The variant is fixed when the head is looked up,
so callers ask ``change_request_target`` instead of checking types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BranchHead:
    """A plain branch head."""

    name: str

    @property
    def change_request_target(self) -> BranchHead | None:
        return None

    @property
    def is_change_request(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ChangeRequestHead:
    """A pull or merge request head carrying the branch it targets."""

    name: str
    target: BranchHead
    change_id: str | None = None
    source_branch: str | None = None

    @property
    def change_request_target(self) -> BranchHead:
        return self.target

    @property
    def is_change_request(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.name


type SourceHead = BranchHead | ChangeRequestHead
