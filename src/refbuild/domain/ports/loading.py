"""Ports for obtaining build snapshots from a build host."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from refbuild.domain.model import Build


@runtime_checkable
class BuildLoader(Protocol):
    """Callable port returning a read-only snapshot of the build at ``locator``.

    The snapshot must answer every lookup the resolver performs (owning job,
    its container, sibling branch jobs and their completed builds) without
    further I/O.
    """

    def __call__(self, locator: str) -> Build: ...


__all__ = ["BuildLoader"]
