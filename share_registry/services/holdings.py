"""Pure transformations over a client profile's share holdings.

Holdings are only ever persisted as part of a whole-profile replacement, so
each operation here takes the current list and returns a new one without
touching its input. A holding is located by its ``id``; two holdings may
share the same company name and ISIN.

Review state has two signals. The persisted ``review`` sub-record is the
source of truth for filtering and display (see :func:`effective_review_status`);
:func:`completeness_status` is a derived hint about data completeness and is
never written back.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from share_registry.schemas.client_profile import HoldingReview, HoldingReviewStatus, ShareHolding
from share_registry.services.errors import RegistryError

DEFAULT_REVIEWER = "Admin User"


class HoldingError(RegistryError):
    """Base exception for holding transformations."""


class InvalidHoldingError(HoldingError):
    """Raised when a holding lacks its company name or ISIN."""


class HoldingNotFoundError(HoldingError):
    """Raised when no holding carries the requested identifier."""

    def __init__(self, holding_id: str) -> None:
        super().__init__(f"Holding '{holding_id}' was not found")
        self.holding_id = holding_id


class LastHoldingError(HoldingError):
    """Raised when removing the only remaining holding of a profile."""


@dataclass(slots=True, frozen=True)
class HoldingTotals:
    total_shares: int
    total_investment: Decimal


def _index_of(holdings: Sequence[ShareHolding], holding_id: str) -> int:
    for index, holding in enumerate(holdings):
        if holding.id == holding_id:
            return index
    raise HoldingNotFoundError(holding_id)


def _require_identity(company_name: str | None, isin_number: str | None) -> None:
    if not (company_name or "").strip() or not (isin_number or "").strip():
        raise InvalidHoldingError("Company name and ISIN number are required")


def find_holding(holdings: Sequence[ShareHolding], holding_id: str) -> ShareHolding:
    return holdings[_index_of(holdings, holding_id)]


def add_holding(
    holdings: Sequence[ShareHolding], holding: ShareHolding | Mapping[str, Any]
) -> list[ShareHolding]:
    """Append a new holding under a fresh identifier with no review yet."""

    data = holding.model_dump(by_alias=True) if isinstance(holding, ShareHolding) else dict(holding)
    data = _aliased(data)
    _require_identity(data.get("companyName"), data.get("isinNumber"))
    for key in ("id", "review"):
        data.pop(key, None)
    return [*holdings, ShareHolding.model_validate(data)]


def edit_holding(
    holdings: Sequence[ShareHolding], holding_id: str, changes: Mapping[str, Any]
) -> list[ShareHolding]:
    """Replace the fields named in ``changes`` on one holding, keeping its id and review."""

    index = _index_of(holdings, holding_id)
    current = holdings[index].model_dump(by_alias=True)
    incoming = {key: value for key, value in changes.items() if key != "id"}
    merged = {**current, **_aliased(incoming)}
    _require_identity(merged.get("companyName"), merged.get("isinNumber"))
    updated = list(holdings)
    updated[index] = ShareHolding.model_validate(merged)
    return updated


def remove_holding(
    holdings: Sequence[ShareHolding], holding_id: str, *, enforce_minimum: bool = True
) -> list[ShareHolding]:
    """Drop one holding.

    ``enforce_minimum`` keeps at least one holding on the profile; the server
    itself accepts a profile with none.
    """

    index = _index_of(holdings, holding_id)
    if enforce_minimum and len(holdings) <= 1:
        raise LastHoldingError("A client profile must keep at least one holding")
    return [holding for position, holding in enumerate(holdings) if position != index]


def review_holding(
    holdings: Sequence[ShareHolding],
    holding_id: str,
    status: HoldingReviewStatus | str,
    notes: str | None = None,
    *,
    reviewer: str = DEFAULT_REVIEWER,
    now: datetime | None = None,
) -> list[ShareHolding]:
    """Stamp a review on one holding; every other field is left as it was."""

    index = _index_of(holdings, holding_id)
    try:
        review_status = HoldingReviewStatus(status)
    except ValueError as exc:
        raise InvalidHoldingError(f"Unknown review status '{status}'") from exc
    review = HoldingReview(
        status=review_status,
        notes=notes,
        reviewed_at=now or datetime.now(timezone.utc),
        reviewed_by=reviewer,
    )
    updated = list(holdings)
    updated[index] = holdings[index].model_copy(update={"review": review})
    return updated


def effective_review_status(holding: ShareHolding) -> HoldingReviewStatus:
    if holding.review is None:
        return HoldingReviewStatus.PENDING
    return holding.review.status


def completeness_status(holding: ShareHolding) -> HoldingReviewStatus:
    """Derive a status from which fields are filled in."""

    has_identity = bool(holding.company_name.strip()) and bool(holding.isin_number.strip())
    has_certificate = bool((holding.folio_number or "").strip()) and bool(
        (holding.certificate_number or "").strip()
    )
    if has_identity and has_certificate:
        return HoldingReviewStatus.APPROVED
    if has_identity:
        return HoldingReviewStatus.PENDING
    return HoldingReviewStatus.REJECTED


def filter_by_review_status(
    holdings: Iterable[ShareHolding], status: HoldingReviewStatus | str | None
) -> list[ShareHolding]:
    if status is None:
        return list(holdings)
    wanted = HoldingReviewStatus(status)
    return [holding for holding in holdings if effective_review_status(holding) is wanted]


def holding_totals(holdings: Iterable[ShareHolding]) -> HoldingTotals:
    total_shares = 0
    total_investment = Decimal("0")
    for holding in holdings:
        total_shares += holding.quantity
        total_investment += Decimal(holding.quantity) * holding.face_value
    return HoldingTotals(total_shares=total_shares, total_investment=total_investment)


def _aliased(changes: Mapping[str, Any]) -> dict[str, Any]:
    """Map snake_case field names onto their wire aliases so merges never duplicate a key."""

    fields = ShareHolding.model_fields
    result: dict[str, Any] = {}
    for key, value in changes.items():
        field = fields.get(key)
        result[field.alias if field is not None and field.alias else key] = value
    return result


__all__ = [
    "DEFAULT_REVIEWER",
    "HoldingError",
    "HoldingNotFoundError",
    "HoldingTotals",
    "InvalidHoldingError",
    "LastHoldingError",
    "add_holding",
    "completeness_status",
    "edit_holding",
    "effective_review_status",
    "filter_by_review_status",
    "find_holding",
    "holding_totals",
    "remove_holding",
    "review_holding",
]
