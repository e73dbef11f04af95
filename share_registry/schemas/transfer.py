"""Pydantic schemas for share transfers."""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from share_registry.models.shareholder import ShareholderType
from share_registry.models.transfer import TransferStatus
from share_registry.schemas.common import RegistryModel, coerce_date


class TransferBase(RegistryModel):
    person_id: str = Field(..., min_length=1, max_length=36)
    person_type: ShareholderType
    person_name: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    transfer_date: date
    status: TransferStatus = Field(default=TransferStatus.INITIATED)
    expected_credit_date: date | None = None
    moved_to_ipf: bool = Field(default=False, alias="movedToIPF")
    dividends_received: Decimal | None = Field(default=None, ge=0)
    pending_dividends: Decimal | None = Field(default=None, ge=0)
    bonus_shares: int | None = Field(default=None, ge=0)

    @field_validator("transfer_date", "expected_credit_date", mode="before")
    @classmethod
    def _dates(cls, value: Any) -> Any:
        return coerce_date(value)


class TransferCreate(TransferBase):
    pass


class TransferReplace(TransferBase):
    pass


class TransferRead(TransferBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


__all__ = ["TransferBase", "TransferCreate", "TransferRead", "TransferReplace"]
