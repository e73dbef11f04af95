"""ORM models package."""
from .base import Base, IdentifierMixin, TimestampMixin
from .client_profile import ClientProfile, ClientProfileStatus
from .dmat_account import DmatAccount, RenewalStatus
from .shareholder import Shareholder, ShareholderType
from .transfer import Transfer, TransferStatus

__all__ = [
    "Base",
    "ClientProfile",
    "ClientProfileStatus",
    "DmatAccount",
    "IdentifierMixin",
    "RenewalStatus",
    "Shareholder",
    "ShareholderType",
    "TimestampMixin",
    "Transfer",
    "TransferStatus",
]
