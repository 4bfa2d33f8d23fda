"""Enumerations shared across the domain model."""

from __future__ import annotations

from enum import IntEnum


class BuildResult(IntEnum):
    """Outcome of a completed build, ordered from best to worst."""

    SUCCESS = 0
    UNSTABLE = 1
    FAILURE = 2
    NOT_BUILT = 3
    ABORTED = 4

    def is_better_or_equal_to(self, other: BuildResult) -> bool:
        return self <= other

    def is_worse_than(self, other: BuildResult) -> bool:
        return self > other

    @classmethod
    def parse(cls, value: str | None) -> BuildResult | None:
        """Parse a result name as reported by the build host (case-insensitive).

        ``None`` and blank strings mean the build has no result yet.
        """

        if value is None or not value.strip():
            return None
        try:
            return cls[value.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown build result: {value}") from exc
