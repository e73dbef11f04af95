from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from share_registry.schemas import HoldingReview, HoldingReviewStatus, ShareHolding
from share_registry.services import holdings as ops


def _holding(**overrides: object) -> ShareHolding:
    data: dict[str, object] = {
        "companyName": "Infosys Ltd",
        "isinNumber": "INE009A01021",
        "folioNumber": "F-1",
        "certificateNumber": "C-1",
        "quantity": 10,
        "faceValue": "5",
    }
    data.update(overrides)
    return ShareHolding.model_validate(data)


def test_review_holding_only_changes_review() -> None:
    target = _holding()
    other = _holding(companyName="TCS Ltd", isinNumber="INE467B01029")
    now = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)

    updated = ops.review_holding([target, other], target.id, "approved", "ok", now=now)

    assert updated[0].review == HoldingReview(
        status=HoldingReviewStatus.APPROVED, notes="ok", reviewed_at=now, reviewed_by="Admin User"
    )
    assert updated[0].model_dump(exclude={"review"}) == target.model_dump(exclude={"review"})
    assert updated[1] == other
    assert target.review is None


def test_review_rejects_unknown_status() -> None:
    holding = _holding()

    with pytest.raises(ops.InvalidHoldingError, match="maybe"):
        ops.review_holding([holding], holding.id, "maybe")


def test_add_holding_assigns_fresh_id_and_clears_review() -> None:
    existing = _holding()
    incoming = {
        "id": existing.id,
        "companyName": "Infosys Ltd",
        "isinNumber": "INE009A01021",
        "review": {"status": "approved"},
    }

    updated = ops.add_holding([existing], incoming)

    assert len(updated) == 2
    assert updated[1].id != existing.id
    assert updated[1].review is None


def test_add_holding_requires_identity() -> None:
    with pytest.raises(ops.InvalidHoldingError):
        ops.add_holding([], {"companyName": "  ", "isinNumber": "INE009A01021"})


def test_duplicate_pairs_are_edited_independently() -> None:
    first = _holding()
    second = _holding()

    updated = ops.edit_holding([first, second], second.id, {"quantity": 99})

    assert updated[0].quantity == 10
    assert updated[1].quantity == 99
    assert updated[1].id == second.id


def test_edit_holding_keeps_review_and_accepts_snake_case() -> None:
    holding = _holding(review={"status": "approved"})

    updated = ops.edit_holding([holding], holding.id, {"folio_number": "F-2", "id": "ignored"})

    assert updated[0].folio_number == "F-2"
    assert updated[0].id == holding.id
    assert updated[0].review is not None
    assert updated[0].review.status is HoldingReviewStatus.APPROVED


def test_edit_holding_rejects_blank_isin() -> None:
    holding = _holding()

    with pytest.raises(ops.InvalidHoldingError):
        ops.edit_holding([holding], holding.id, {"isinNumber": ""})


def test_missing_holding_raises() -> None:
    with pytest.raises(ops.HoldingNotFoundError) as excinfo:
        ops.remove_holding([_holding(), _holding()], "nope")

    assert excinfo.value.holding_id == "nope"


def test_remove_last_holding_is_guarded() -> None:
    holding = _holding()

    with pytest.raises(ops.LastHoldingError):
        ops.remove_holding([holding], holding.id)
    assert ops.remove_holding([holding], holding.id, enforce_minimum=False) == []


def test_filter_uses_persisted_review() -> None:
    unreviewed = _holding()
    flagged = _holding(review={"status": "needs_attention"})
    approved_but_incomplete = _holding(folioNumber=None, review={"status": "approved"})

    holdings = [unreviewed, flagged, approved_but_incomplete]

    assert ops.filter_by_review_status(holdings, "pending") == [unreviewed]
    assert ops.filter_by_review_status(holdings, HoldingReviewStatus.APPROVED) == [approved_but_incomplete]
    assert ops.filter_by_review_status(holdings, None) == holdings
    assert ops.completeness_status(approved_but_incomplete) is HoldingReviewStatus.PENDING
    assert ops.completeness_status(unreviewed) is HoldingReviewStatus.APPROVED


def test_holding_totals() -> None:
    totals = ops.holding_totals([_holding(quantity=10, faceValue="5"), _holding(quantity=3, faceValue="2.5")])

    assert totals.total_shares == 13
    assert totals.total_investment == Decimal("57.5")
