"""Report calculators for holdings and IPF movements."""
from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

DIVIDEND_PER_SHARE = Decimal("2.5")
BONUS_RATIO = Decimal("0.1")


@dataclass(frozen=True, slots=True)
class HoldingReport:
    expected_dividends: Decimal
    bonus_allocation: int
    remaining_dues: Decimal


@dataclass(frozen=True, slots=True)
class IpfDetails:
    dividends_received: Decimal
    pending_dividends: Decimal
    bonus_shares: int


def _decimal(value: Decimal | int | float) -> Decimal:
    return Decimal(str(value))


def calculate_report(quantity: Decimal | int | float, buy_amount: Decimal | int | float) -> HoldingReport:
    """Project dividends, bonus shares and outstanding dues for a position.

    Dividends accrue at a flat 2.5 per share, rounded to two places; one bonus
    share is allotted per ten held; dues are what remains of the buy amount
    after the dividend credit, never negative.
    """

    quantity_decimal = _decimal(quantity)
    dividend_credit = quantity_decimal * DIVIDEND_PER_SHARE
    expected = dividend_credit.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    bonus = math.floor(quantity_decimal * BONUS_RATIO)
    remaining = max(Decimal("0"), _decimal(buy_amount) - dividend_credit)
    return HoldingReport(expected_dividends=expected, bonus_allocation=bonus, remaining_dues=remaining)


def calculate_ipf_details(
    *,
    dividends_history: Sequence[Decimal | int | float] | None = None,
    bonus_ratio: Decimal | int | float | None = None,
    quantity: int | None = None,
) -> IpfDetails:
    """Summarise dividends and bonus shares for a holding moved to the Investor Protection Fund."""

    history = [_decimal(amount) for amount in dividends_history or []]
    received = sum(history, Decimal("0"))
    expected = received if history else Decimal("0")
    pending = max(Decimal("0"), expected - received)
    bonus = math.floor(_decimal(quantity or 0) * _decimal(bonus_ratio or 0))
    return IpfDetails(dividends_received=received, pending_dividends=pending, bonus_shares=bonus)


__all__ = [
    "BONUS_RATIO",
    "DIVIDEND_PER_SHARE",
    "HoldingReport",
    "IpfDetails",
    "calculate_ipf_details",
    "calculate_report",
]
