"""Port for looking up the source-control head of a job."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from refbuild.domain.model import Job, SourceHead


@runtime_checkable
class ScmFacade(Protocol):
    """Answers which source-control head a branch job was created for.

    Implementations must be idempotent and free of side effects; ``None``
    means the host knows no head for the job.
    """

    def find_head(self, job: Job) -> SourceHead | None: ...


class NoScmFacade:
    """Facade for hosts without source-control metadata."""

    def find_head(self, job: Job) -> SourceHead | None:  # noqa: ARG002
        return None


__all__ = ["NoScmFacade", "ScmFacade"]
