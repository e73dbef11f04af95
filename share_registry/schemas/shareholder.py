"""Pydantic schemas for shareholder resources."""
from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from share_registry.models.shareholder import ShareholderType
from share_registry.schemas.common import RegistryModel
from share_registry.schemas.dmat_account import DmatAccountRead


class ShareholderBase(RegistryModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=320)
    phone: str = Field(..., min_length=1, max_length=32)
    pan: str = Field(..., min_length=1, max_length=32)
    type: ShareholderType
    linked_dmat_account_id: str | None = Field(default=None, max_length=36)

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("pan")
    @classmethod
    def _normalise_pan(cls, value: str) -> str:
        return value.upper()


class ShareholderCreate(ShareholderBase):
    pass


class ShareholderReplace(ShareholderBase):
    pass


class ShareholderRead(ShareholderBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    linked_dmat_account: DmatAccountRead | None = None
    created_at: datetime
    updated_at: datetime


__all__ = [
    "ShareholderBase",
    "ShareholderCreate",
    "ShareholderRead",
    "ShareholderReplace",
]
