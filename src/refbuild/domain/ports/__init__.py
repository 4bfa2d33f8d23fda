"""Domain port definitions for adapters."""

from __future__ import annotations

from .eligibility import EligibilityPolicy
from .loading import BuildLoader
from .scm import NoScmFacade, ScmFacade

__all__ = [
    "BuildLoader",
    "EligibilityPolicy",
    "NoScmFacade",
    "ScmFacade",
]
