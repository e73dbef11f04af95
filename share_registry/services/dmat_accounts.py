"""DMAT account persistence and renewal-status helpers.

Two renewal-status computations coexist: database rows carry an explicit
``renewal_status`` chosen by the operator, while the demo dataset derives it
from expiry proximity with :func:`derive_renewal_status`. The stored value is
never recomputed.
"""
from __future__ import annotations

import logging
from datetime import date

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from share_registry.models import DmatAccount, RenewalStatus, Shareholder
from share_registry.schemas.dmat_account import DmatAccountBase
from share_registry.services.errors import RecordNotFoundError
from share_registry.services.pagination import Page, PageRequest, paginate

logger = logging.getLogger(__name__)

EXPIRING_WINDOW_DAYS = 10


def derive_renewal_status(expiry_date: date, today: date) -> RenewalStatus:
    """Expired once past, expiring within the window, active otherwise."""

    days_left = (expiry_date - today).days
    if days_left < 0:
        return RenewalStatus.EXPIRED
    if days_left <= EXPIRING_WINDOW_DAYS:
        return RenewalStatus.EXPIRING
    return RenewalStatus.ACTIVE


def list_dmat_accounts(session: Session, request: PageRequest) -> Page:
    statement = select(DmatAccount).order_by(DmatAccount.created_at.desc(), DmatAccount.id.desc())
    return paginate(session, statement, request)


def get_dmat_account(session: Session, account_id: str) -> DmatAccount:
    account = session.get(DmatAccount, account_id)
    if account is None:
        raise RecordNotFoundError()
    return account


def create_dmat_account(session: Session, payload: DmatAccountBase) -> DmatAccount:
    account = DmatAccount(**payload.model_dump())
    session.add(account)
    session.commit()
    session.refresh(account)
    logger.info("Created DMAT account %s (%s)", account.id, account.account_number)
    return account


def replace_dmat_account(session: Session, account_id: str, payload: DmatAccountBase) -> DmatAccount:
    account = get_dmat_account(session, account_id)
    for field_name, value in payload.model_dump().items():
        setattr(account, field_name, value)
    session.commit()
    session.refresh(account)
    return account


def delete_dmat_account(session: Session, account_id: str) -> None:
    account = get_dmat_account(session, account_id)
    # Backends without enforced foreign keys (SQLite) would leave dangling links.
    session.execute(
        update(Shareholder)
        .where(Shareholder.linked_dmat_account_id == account_id)
        .values(linked_dmat_account_id=None)
    )
    session.delete(account)
    session.commit()
    logger.info("Deleted DMAT account %s", account_id)


__all__ = [
    "EXPIRING_WINDOW_DAYS",
    "create_dmat_account",
    "delete_dmat_account",
    "derive_renewal_status",
    "get_dmat_account",
    "list_dmat_accounts",
    "replace_dmat_account",
]
