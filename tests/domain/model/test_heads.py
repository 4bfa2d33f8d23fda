from __future__ import annotations

from refbuild.domain.model import BranchHead, ChangeRequestHead


def test_branch_head_has_no_change_request_target() -> None:
    head = BranchHead("main")

    assert head.change_request_target is None
    assert not head.is_change_request
    assert str(head) == "main"


def test_change_request_head_exposes_target() -> None:
    head = ChangeRequestHead(name="PR-12", target=BranchHead("main"), change_id="12")

    assert head.change_request_target == BranchHead("main")
    assert head.is_change_request
    assert str(head) == "PR-12"
