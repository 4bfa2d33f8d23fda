"""Decision trail recorded while resolving a reference build."""

from __future__ import annotations

from logging import getLogger
from typing import Final

log = getLogger(__name__)

DEFAULT_MAX_LINES: Final[int] = 20
SKIPPED_MESSAGE: Final[str] = "  ... skipped logging of %d additional errors ..."


class FilteredLog:
    """Append-only info and error messages scoped to one resolution.

    Messages are formatted with ``%``-style arguments, stored in the order they
    were logged and mirrored to the standard ``logging`` tree. Only the first
    ``max_lines`` errors are stored; the rest are counted and reported by
    :meth:`log_summary`.
    """

    def __init__(
        self,
        title: str = "Errors while resolving the reference build:",
        *,
        max_lines: int = DEFAULT_MAX_LINES,
    ) -> None:
        if max_lines < 1:
            raise ValueError("max_lines must be positive")
        self.title = title
        self.max_lines = max_lines
        self._info: list[str] = []
        self._errors: list[str] = []
        self._error_count = 0

    def log_info(self, message: str, *args: object) -> None:
        text = _format(message, args)
        self._info.append(text)
        log.info(text)

    def log_error(self, message: str, *args: object) -> None:
        text = _format(message, args)
        log.error(text)
        self._error_count += 1
        if self._error_count <= self.max_lines:
            self._errors.append(text)

    def log_exception(self, exc: BaseException, message: str, *args: object) -> None:
        self.log_error(message, *args)
        self.log_error("%s: %s", type(exc).__name__, exc)

    def log_summary(self) -> None:
        skipped = self._error_count - len(self._errors)
        if skipped > 0:
            self._errors.append(SKIPPED_MESSAGE % skipped)

    def merge(self, other: FilteredLog) -> None:
        """Append the messages of ``other`` without mirroring them again."""

        self._info.extend(other._info)  # noqa: SLF001
        for text in other._errors:  # noqa: SLF001
            self._error_count += 1
            if self._error_count <= self.max_lines:
                self._errors.append(text)
        self._error_count += other._error_count - len(other._errors)  # noqa: SLF001

    def error_report(self) -> tuple[str, ...]:
        """Return the title followed by the error messages, or nothing without errors."""

        if not self._errors:
            return ()
        return (self.title, *self._errors)

    @property
    def info_messages(self) -> tuple[str, ...]:
        return tuple(self._info)

    @property
    def error_messages(self) -> tuple[str, ...]:
        return tuple(self._errors)

    @property
    def has_errors(self) -> bool:
        return self._error_count > 0

    @property
    def size(self) -> int:
        return len(self._info) + len(self._errors)

    def __repr__(self) -> str:
        return (
            f"FilteredLog(title={self.title!r}, info={len(self._info)}, "
            f"errors={self._error_count})"
        )


def _format(message: str, args: tuple[object, ...]) -> str:
    return message % args if args else message


__all__ = ["DEFAULT_MAX_LINES", "FilteredLog"]
