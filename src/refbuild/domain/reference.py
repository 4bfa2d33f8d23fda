"""Result record of a reference-build resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from refbuild.domain.model import Build

NO_REFERENCE_BUILD: Final[str] = "-"


@dataclass(frozen=True, slots=True, eq=False)
class ReferenceBuild:
    """Links a build to the build its results should be compared with.

    Two records are equal when they belong to the same owner and name the same
    reference build id, independent of the handle objects they hold.
    """

    owner: Build
    reference_build: Build | None = None

    @property
    def owner_id(self) -> str:
        return self.owner.externalizable_id

    @property
    def reference_build_id(self) -> str:
        if self.reference_build is None:
            return NO_REFERENCE_BUILD
        return self.reference_build.externalizable_id

    @property
    def has_reference_build(self) -> bool:
        return self.reference_build is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReferenceBuild):
            return NotImplemented
        return (
            self.owner_id == other.owner_id
            and self.reference_build_id == other.reference_build_id
        )

    def __hash__(self) -> int:
        return hash((self.owner_id, self.reference_build_id))

    def __str__(self) -> str:
        return f"{self.owner_id} -> {self.reference_build_id}"
