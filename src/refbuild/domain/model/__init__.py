"""Domain model for reference-build resolution."""

from __future__ import annotations

from .enums import BuildResult
from .heads import BranchHead, ChangeRequestHead, SourceHead
from .items import (
    Build,
    BuildHistory,
    ItemGroup,
    Job,
    MultiBranchProject,
    is_multi_branch_project,
)

__all__ = [
    "BranchHead",
    "Build",
    "BuildHistory",
    "BuildResult",
    "ChangeRequestHead",
    "ItemGroup",
    "Job",
    "MultiBranchProject",
    "SourceHead",
    "is_multi_branch_project",
]
