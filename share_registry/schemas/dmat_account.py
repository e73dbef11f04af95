"""Pydantic schemas for DMAT accounts."""
from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from share_registry.models.dmat_account import RenewalStatus
from share_registry.schemas.common import RegistryModel, coerce_date


class DmatAccountBase(RegistryModel):
    account_number: str = Field(..., min_length=1, max_length=64)
    holder_name: str = Field(..., min_length=1, max_length=255)
    expiry_date: date
    renewal_status: RenewalStatus = Field(default=RenewalStatus.ACTIVE)

    @field_validator("expiry_date", mode="before")
    @classmethod
    def _expiry_date(cls, value: Any) -> Any:
        return coerce_date(value)


class DmatAccountCreate(DmatAccountBase):
    pass


class DmatAccountReplace(DmatAccountBase):
    pass


class DmatAccountRead(DmatAccountBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


__all__ = ["DmatAccountBase", "DmatAccountCreate", "DmatAccountRead", "DmatAccountReplace"]
