from __future__ import annotations

from typing import TYPE_CHECKING

from refbuild.domain.reference import NO_REFERENCE_BUILD, ReferenceBuild

if TYPE_CHECKING:
    from tests.conftest import MultiBranchSetup


def test_reference_build_exposes_reference_id(multi_branch: MultiBranchSetup) -> None:
    reference = ReferenceBuild(multi_branch.build, multi_branch.target_build)

    assert reference.has_reference_build
    assert reference.owner_id == "org/repo/PR-1#1"
    assert reference.reference_build_id == "org/repo/target#1"
    assert str(reference) == "org/repo/PR-1#1 -> org/repo/target#1"


def test_missing_reference_uses_sentinel_id(multi_branch: MultiBranchSetup) -> None:
    reference = ReferenceBuild(multi_branch.build)

    assert not reference.has_reference_build
    assert reference.reference_build is None
    assert reference.reference_build_id == NO_REFERENCE_BUILD


def test_equality_compares_ids(multi_branch: MultiBranchSetup) -> None:
    first = ReferenceBuild(multi_branch.build, multi_branch.target_build)
    same = ReferenceBuild(multi_branch.build, multi_branch.target_build)
    other = ReferenceBuild(multi_branch.build, multi_branch.pr_target_build)

    assert first == same
    assert hash(first) == hash(same)
    assert first != other
    assert first != ReferenceBuild(multi_branch.build)
