"""Reference-build resolution domain."""

from __future__ import annotations

from .eligibility import AcceptAnyBuild, RequireResult, SkipRunningBuilds
from .filtered_log import FilteredLog
from .reference import NO_REFERENCE_BUILD, ReferenceBuild
from .resolution import DEFAULT_TARGET_BRANCH, ReferenceConfig, ReferenceResolver

__all__ = [
    "DEFAULT_TARGET_BRANCH",
    "NO_REFERENCE_BUILD",
    "AcceptAnyBuild",
    "FilteredLog",
    "ReferenceBuild",
    "ReferenceConfig",
    "ReferenceResolver",
    "RequireResult",
    "SkipRunningBuilds",
]
