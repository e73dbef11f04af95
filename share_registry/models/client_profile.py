"""Client profile ORM model."""
from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from share_registry.models.base import Base, IdentifierMixin, TimestampMixin, enum_column, utcnow


class ClientProfileStatus(str, enum.Enum):
    ACTIVE = "Active"
    CLOSED = "Closed"
    PENDING = "Pending"
    SUSPENDED = "Suspended"


class ClientProfile(IdentifierMixin, TimestampMixin, Base):
    """A shareholder's registry profile with its share holdings kept as a JSON document.

    ``primary_name`` and ``company_names`` are denormalised copies of
    ``shareholder_name["name1"]`` and the holdings' company names, rewritten on
    every save so the list endpoint can search them with plain ``ILIKE``.
    """

    __tablename__ = "client_profiles"
    __table_args__ = (
        Index("ix_client_profiles_pan_number", "pan_number"),
        Index("ix_client_profiles_status", "status"),
        Index("ix_client_profiles_created_at", "created_at"),
    )

    shareholder_name: Mapped[dict] = mapped_column(JSON, nullable=False)
    primary_name: Mapped[str] = mapped_column(String(255), nullable=False)
    pan_number: Mapped[str] = mapped_column(String(32), nullable=False)
    aadhaar_number: Mapped[str | None] = mapped_column(String(32))
    address: Mapped[str | None] = mapped_column(Text)
    bank_details: Mapped[dict | None] = mapped_column(JSON)
    demat_account_number: Mapped[str | None] = mapped_column(String(64))
    demat_created_with: Mapped[str | None] = mapped_column(String(255))
    demat_created_with_person: Mapped[str | None] = mapped_column(String(255))
    share_holdings: Mapped[list[dict]] = mapped_column(JSON, nullable=False, default=list)
    company_names: Mapped[str] = mapped_column(Text, nullable=False, default="")
    current_date: Mapped[datetime] = mapped_column(
        "profile_date", DateTime(timezone=True), nullable=False, default=utcnow
    )
    status: Mapped[ClientProfileStatus] = mapped_column(
        enum_column(ClientProfileStatus, "client_profile_status"),
        nullable=False,
        default=ClientProfileStatus.ACTIVE,
    )
    remarks: Mapped[str | None] = mapped_column(Text)
    dividend: Mapped[dict | None] = mapped_column(JSON)


__all__ = ["ClientProfile", "ClientProfileStatus"]
