"""Share transfer ORM model."""
from __future__ import annotations

import enum
from datetime import date

from sqlalchemy import Boolean, Date, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from share_registry.models.base import Base, IdentifierMixin, TimestampMixin, enum_column
from share_registry.models.shareholder import ShareholderType


class TransferStatus(str, enum.Enum):
    INITIATED = "Initiated"
    IN_PROCESS = "In-Process"
    COMPLETED = "Completed"


class Transfer(IdentifierMixin, TimestampMixin, Base):
    """A share transfer for a person; the person reference is not a foreign key."""

    __tablename__ = "transfers"
    __table_args__ = (
        Index("ix_transfers_person_id", "person_id"),
        Index("ix_transfers_status", "status"),
    )

    person_id: Mapped[str] = mapped_column(String(36), nullable=False)
    person_type: Mapped[ShareholderType] = mapped_column(
        enum_column(ShareholderType, "transfer_person_type"), nullable=False
    )
    person_name: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    transfer_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[TransferStatus] = mapped_column(
        enum_column(TransferStatus, "transfer_status"), nullable=False, default=TransferStatus.INITIATED
    )
    expected_credit_date: Mapped[date | None] = mapped_column(Date)
    moved_to_ipf: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    dividends_received: Mapped[float | None] = mapped_column(Numeric(18, 2))
    pending_dividends: Mapped[float | None] = mapped_column(Numeric(18, 2))
    bonus_shares: Mapped[int | None] = mapped_column(Integer)


__all__ = ["Transfer", "TransferStatus"]
