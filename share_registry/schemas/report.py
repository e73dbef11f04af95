"""Schemas for the holding report calculator."""
from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from share_registry.schemas.common import RegistryModel


class ReportRequest(RegistryModel):
    symbol: str | None = Field(default=None, max_length=32)
    quantity: int = Field(..., ge=0)
    buy_amount: Decimal = Field(..., ge=0, description="Total amount paid for the position")


class ReportResponse(RegistryModel):
    expected_dividends: Decimal
    bonus_allocation: int
    remaining_dues: Decimal


__all__ = ["ReportRequest", "ReportResponse"]
