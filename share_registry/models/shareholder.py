"""Shareholder ORM model."""
from __future__ import annotations

import enum

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from share_registry.models.base import Base, IdentifierMixin, TimestampMixin, enum_column


class ShareholderType(str, enum.Enum):
    SHAREHOLDER = "Shareholder"
    STOCKHOLDER = "Stockholder"


class Shareholder(IdentifierMixin, TimestampMixin, Base):
    """A shareholder or stockholder, optionally linked to one DMAT account."""

    __tablename__ = "shareholders"
    __table_args__ = (
        Index("ix_shareholders_email", "email"),
        Index("ix_shareholders_pan", "pan"),
        Index("ix_shareholders_type", "type"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    pan: Mapped[str] = mapped_column(String(32), nullable=False)
    type: Mapped[ShareholderType] = mapped_column(
        enum_column(ShareholderType, "shareholder_type"), nullable=False
    )
    linked_dmat_account_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("dmat_accounts.id", ondelete="SET NULL"), nullable=True
    )

    linked_dmat_account = relationship("DmatAccount", back_populates="holders", lazy="joined")


__all__ = ["Shareholder", "ShareholderType"]
