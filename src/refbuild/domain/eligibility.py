"""Concrete acceptance policies for located reference-build candidates."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from refbuild.domain.model import BuildHistory, BuildResult

if TYPE_CHECKING:
    from collections.abc import Iterator

    from refbuild.domain.model import Build

log = getLogger(__name__)

DEFAULT_MAX_DEPTH: Final[int] = 50


class AcceptAnyBuild:
    """Accepts the latest completed build of the target job as is."""

    def find(self, current: Build, candidate: Build) -> Build | None:  # noqa: ARG002
        return candidate


@dataclass(frozen=True, slots=True)
class SkipRunningBuilds:
    """Walks back from the candidate to the newest build that is not running."""

    max_depth: int = DEFAULT_MAX_DEPTH

    def find(self, current: Build, candidate: Build) -> Build | None:
        if not isinstance(candidate, BuildHistory):
            return candidate
        for build in _walk_history(candidate, self.max_depth):
            if build.is_building or _is_same_build(build, current):
                continue
            return build
        log.info("No finished build found within %s builds of %s", self.max_depth, candidate)
        return None


@dataclass(frozen=True, slots=True)
class RequireResult:
    """Walks back to the newest build whose result is at least ``required``.

    Running builds and builds without a result are skipped. When no build
    qualifies within ``max_depth`` builds, the original candidate is returned
    if ``fallback_to_latest`` is set.
    """

    required: BuildResult = BuildResult.UNSTABLE
    max_depth: int = DEFAULT_MAX_DEPTH
    fallback_to_latest: bool = False

    def find(self, current: Build, candidate: Build) -> Build | None:
        if not isinstance(candidate, BuildHistory):
            return candidate

        for build in _walk_history(candidate, self.max_depth):
            if build.is_building or _is_same_build(build, current):
                continue
            result = build.result
            if result is not None and result.is_better_or_equal_to(self.required):
                return build

        if self.fallback_to_latest:
            log.info(
                "No build with result %s or better found, using latest build %s",
                self.required.name,
                candidate.externalizable_id,
            )
            return candidate
        return None


def _walk_history(start: BuildHistory, max_depth: int) -> Iterator[BuildHistory]:
    build: BuildHistory | None = start
    depth = 0
    while build is not None and depth < max_depth:
        yield build
        build = build.previous_build
        depth += 1


def _is_same_build(build: Build, current: Build) -> bool:
    return build is current or build.externalizable_id == current.externalizable_id


__all__ = ["DEFAULT_MAX_DEPTH", "AcceptAnyBuild", "RequireResult", "SkipRunningBuilds"]
