"""Pydantic schemas package."""

from .client_profile import (
    ClientProfileCreate,
    ClientProfileRead,
    ClientProfileReplace,
    HoldingReview,
    HoldingReviewStatus,
    ShareHolding,
)
from .common import ErrorResponse, Paginated, SuccessResponse
from .dmat_account import DmatAccountCreate, DmatAccountRead, DmatAccountReplace
from .report import ReportRequest, ReportResponse
from .shareholder import ShareholderCreate, ShareholderRead, ShareholderReplace
from .transfer import TransferCreate, TransferRead, TransferReplace

__all__ = [
    "ClientProfileCreate",
    "ClientProfileRead",
    "ClientProfileReplace",
    "DmatAccountCreate",
    "DmatAccountRead",
    "DmatAccountReplace",
    "ErrorResponse",
    "HoldingReview",
    "HoldingReviewStatus",
    "Paginated",
    "ReportRequest",
    "ReportResponse",
    "ShareHolding",
    "ShareholderCreate",
    "ShareholderRead",
    "ShareholderReplace",
    "SuccessResponse",
    "TransferCreate",
    "TransferRead",
    "TransferReplace",
]
