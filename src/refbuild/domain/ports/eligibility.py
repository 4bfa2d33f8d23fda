"""Port for the pluggable reference-build acceptance policy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from refbuild.domain.model import Build


@runtime_checkable
class EligibilityPolicy(Protocol):
    """Decides whether a located candidate may serve as the reference build.

    ``find`` receives the build being analysed and the latest completed build
    of the target job. It returns the build to use (the candidate or one of
    its predecessors) or ``None`` to reject.
    """

    def find(self, current: Build, candidate: Build) -> Build | None: ...


__all__ = ["EligibilityPolicy"]
