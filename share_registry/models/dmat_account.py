"""DMAT account ORM model."""
from __future__ import annotations

import enum
from datetime import date

from sqlalchemy import Date, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from share_registry.models.base import Base, IdentifierMixin, TimestampMixin, enum_column


class RenewalStatus(str, enum.Enum):
    ACTIVE = "Active"
    EXPIRING = "Expiring"
    EXPIRED = "Expired"
    PENDING = "Pending"


class DmatAccount(IdentifierMixin, TimestampMixin, Base):
    """Dematerialised securities account with an explicitly stored renewal status."""

    __tablename__ = "dmat_accounts"
    __table_args__ = (Index("ix_dmat_accounts_account_number", "account_number"),)

    account_number: Mapped[str] = mapped_column(String(64), nullable=False)
    holder_name: Mapped[str] = mapped_column(String(255), nullable=False)
    expiry_date: Mapped[date] = mapped_column(Date, nullable=False)
    renewal_status: Mapped[RenewalStatus] = mapped_column(
        enum_column(RenewalStatus, "renewal_status"), nullable=False, default=RenewalStatus.ACTIVE
    )

    holders = relationship("Shareholder", back_populates="linked_dmat_account", passive_deletes=True)


__all__ = ["DmatAccount", "RenewalStatus"]
