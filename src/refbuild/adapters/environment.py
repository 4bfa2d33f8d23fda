"""SCM facade reading the branch variables a multi-branch build runs with."""

from __future__ import annotations

import os
from logging import getLogger
from typing import TYPE_CHECKING

from refbuild.domain.model import BranchHead, ChangeRequestHead

if TYPE_CHECKING:
    from collections.abc import Mapping

    from refbuild.domain.model import Job, SourceHead

log = getLogger(__name__)

BRANCH_NAME = "BRANCH_NAME"
CHANGE_ID = "CHANGE_ID"
CHANGE_TARGET = "CHANGE_TARGET"
CHANGE_BRANCH = "CHANGE_BRANCH"


class EnvironmentScmFacade:
    """Derives the head of the running build from its environment.

    A change request needs both ``CHANGE_ID`` and ``CHANGE_TARGET``; its display
    name is ``BRANCH_NAME`` (for example ``PR-42``). ``BRANCH_NAME`` alone
    describes a plain branch. The job argument is ignored since the variables
    always belong to the build that is running.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def find_head(self, job: Job) -> SourceHead | None:  # noqa: ARG002
        branch_name = self._get(BRANCH_NAME)
        change_id = self._get(CHANGE_ID)
        change_target = self._get(CHANGE_TARGET)

        if change_id is not None and change_target is not None:
            name = branch_name or f"PR-{change_id}"
            return ChangeRequestHead(
                name=name,
                target=BranchHead(change_target),
                change_id=change_id,
                source_branch=self._get(CHANGE_BRANCH),
            )
        if change_id is not None or change_target is not None:
            log.warning(
                "Incomplete change request variables: %s=%s, %s=%s",
                CHANGE_ID,
                change_id,
                CHANGE_TARGET,
                change_target,
            )
        if branch_name is not None:
            return BranchHead(branch_name)
        return None

    def _get(self, name: str) -> str | None:
        value = self._environ.get(name)
        if value is None or not value.strip():
            return None
        return value.strip()
