"""Persistence operations for shareholders and stockholders."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from share_registry.models import DmatAccount, Shareholder, ShareholderType
from share_registry.schemas.shareholder import ShareholderBase
from share_registry.services.errors import InvalidReferenceError, RecordNotFoundError
from share_registry.services.pagination import Page, PageRequest, paginate

logger = logging.getLogger(__name__)


def _apply_payload(session: Session, shareholder: Shareholder, payload: ShareholderBase) -> Shareholder:
    account_id = payload.linked_dmat_account_id
    if account_id is not None and session.get(DmatAccount, account_id) is None:
        raise InvalidReferenceError(f"DMAT account '{account_id}' does not exist")

    for field_name, value in payload.model_dump().items():
        setattr(shareholder, field_name, value)
    return shareholder


def list_shareholders(
    session: Session, request: PageRequest, *, holder_type: ShareholderType | None = None
) -> Page:
    statement = select(Shareholder).order_by(Shareholder.created_at.desc(), Shareholder.id.desc())
    if holder_type is not None:
        statement = statement.where(Shareholder.type == holder_type)
    return paginate(session, statement, request)


def get_shareholder(session: Session, shareholder_id: str) -> Shareholder:
    shareholder = session.get(Shareholder, shareholder_id)
    if shareholder is None:
        raise RecordNotFoundError()
    return shareholder


def create_shareholder(session: Session, payload: ShareholderBase) -> Shareholder:
    shareholder = _apply_payload(session, Shareholder(), payload)
    session.add(shareholder)
    session.commit()
    session.refresh(shareholder)
    logger.info("Created %s %s", shareholder.type.value.lower(), shareholder.id)
    return shareholder


def replace_shareholder(session: Session, shareholder_id: str, payload: ShareholderBase) -> Shareholder:
    shareholder = get_shareholder(session, shareholder_id)
    _apply_payload(session, shareholder, payload)
    session.commit()
    session.refresh(shareholder)
    return shareholder


def delete_shareholder(session: Session, shareholder_id: str) -> None:
    shareholder = get_shareholder(session, shareholder_id)
    session.delete(shareholder)
    session.commit()
    logger.info("Deleted shareholder %s", shareholder_id)


__all__ = [
    "create_shareholder",
    "delete_shareholder",
    "get_shareholder",
    "list_shareholders",
    "replace_shareholder",
]
