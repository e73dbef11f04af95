"""Holding report calculator endpoint."""
from __future__ import annotations

from fastapi import APIRouter

from share_registry.schemas import ReportRequest, ReportResponse
from share_registry.services.reporting import calculate_report

router = APIRouter(prefix="/reports")


@router.post("/calculate", response_model=ReportResponse)
def calculate(payload: ReportRequest) -> ReportResponse:
    """Project dividends, bonus allocation and remaining dues for a position."""

    report = calculate_report(payload.quantity, payload.buy_amount)
    return ReportResponse(
        expected_dividends=report.expected_dividends,
        bonus_allocation=report.bonus_allocation,
        remaining_dues=report.remaining_dues,
    )


__all__ = ["calculate", "router"]
