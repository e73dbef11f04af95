"""Pydantic schemas for client profiles and their nested share holdings."""
from __future__ import annotations

import enum
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from share_registry.models.base import new_id
from share_registry.models.client_profile import ClientProfileStatus
from share_registry.schemas.common import RegistryModel, coerce_date


class HoldingReviewStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    NEEDS_ATTENTION = "needs_attention"


def _upper(value: str | None) -> str | None:
    return value.upper() if value else value


class DistinctiveNumber(RegistryModel):
    """Range of distinctive numbers printed on a physical certificate."""

    from_: str | None = Field(default=None, alias="from")
    to: str | None = None


class HoldingReview(RegistryModel):
    status: HoldingReviewStatus = HoldingReviewStatus.PENDING
    notes: str | None = None
    reviewed_at: datetime | None = None
    reviewed_by: str | None = None


class ShareHolding(RegistryModel):
    """One company's shares held by a client.

    ``id`` is assigned when a holding is first seen without one and is the
    only key used to locate a holding for edit, delete and review.
    """

    id: str = Field(default_factory=new_id, min_length=1, max_length=36)
    company_name: str = Field(..., min_length=1, max_length=255)
    isin_number: str = Field(..., min_length=1, max_length=32)
    folio_number: str | None = Field(default=None, max_length=64)
    certificate_number: str | None = Field(default=None, max_length=64)
    distinctive_number: DistinctiveNumber | None = None
    quantity: int = Field(default=0, ge=0)
    face_value: Decimal = Field(default=Decimal("0"), ge=0)
    purchase_date: date | None = None
    review: HoldingReview | None = None

    @model_validator(mode="before")
    @classmethod
    def _rename_legacy_distinctive(cls, data: Any) -> Any:
        if isinstance(data, dict) and "distinctive" in data:
            data = dict(data)
            legacy = data.pop("distinctive")
            data.setdefault("distinctiveNumber", legacy)
        return data

    @field_validator("isin_number")
    @classmethod
    def _normalise_isin(cls, value: str) -> str:
        return value.upper()

    @field_validator("purchase_date", mode="before")
    @classmethod
    def _purchase_date(cls, value: Any) -> Any:
        return coerce_date(value)


class ShareholderName(RegistryModel):
    name1: str = Field(..., min_length=1, max_length=255)
    name2: str | None = Field(default=None, max_length=255)
    name3: str | None = Field(default=None, max_length=255)


class BankDetails(RegistryModel):
    bank_number: str | None = Field(default=None, max_length=64)
    branch: str | None = Field(default=None, max_length=255)
    bank_name: str | None = Field(default=None, max_length=255)
    ifsc_code: str | None = Field(default=None, max_length=32)
    micr_code: str | None = Field(default=None, max_length=32)

    @field_validator("ifsc_code")
    @classmethod
    def _normalise_ifsc(cls, value: str | None) -> str | None:
        return _upper(value)


class Dividend(RegistryModel):
    amount: Decimal = Field(default=Decimal("0"))
    date: datetime | None = None


class ClientProfileBase(RegistryModel):
    shareholder_name: ShareholderName
    pan_number: str = Field(..., min_length=1, max_length=32)
    aadhaar_number: str | None = Field(default=None, max_length=32)
    address: str | None = None
    bank_details: BankDetails | None = None
    demat_account_number: str | None = Field(default=None, max_length=64)
    demat_created_with: str | None = Field(default=None, max_length=255)
    demat_created_with_person: str | None = Field(default=None, max_length=255)
    share_holdings: list[ShareHolding] = Field(default_factory=list)
    current_date: datetime | None = None
    status: ClientProfileStatus = ClientProfileStatus.ACTIVE
    remarks: str | None = None
    dividend: Dividend | None = None

    @model_validator(mode="before")
    @classmethod
    def _migrate_legacy_companies(cls, data: Any) -> Any:
        """Older documents carry holdings under ``companies``; fold them into ``shareHoldings``."""
        if not isinstance(data, dict) or "companies" not in data:
            return data
        data = dict(data)
        legacy = data.pop("companies")
        if "shareHoldings" not in data and "share_holdings" not in data:
            data["shareHoldings"] = legacy
        return data

    @field_validator("pan_number")
    @classmethod
    def _normalise_pan(cls, value: str) -> str:
        return value.upper()


class ClientProfileCreate(ClientProfileBase):
    pass


class ClientProfileReplace(ClientProfileBase):
    """Full replacement payload; holdings left out of the list are dropped."""


class ClientProfileRead(ClientProfileBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


__all__ = [
    "BankDetails",
    "ClientProfileBase",
    "ClientProfileCreate",
    "ClientProfileRead",
    "ClientProfileReplace",
    "DistinctiveNumber",
    "Dividend",
    "HoldingReview",
    "HoldingReviewStatus",
    "ShareHolding",
    "ShareholderName",
]
