"""Persistence operations for share transfers."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from share_registry.models import Transfer
from share_registry.schemas.transfer import TransferBase
from share_registry.services.errors import RecordNotFoundError
from share_registry.services.pagination import Page, PageRequest, paginate

logger = logging.getLogger(__name__)


def list_transfers(session: Session, request: PageRequest) -> Page:
    statement = select(Transfer).order_by(Transfer.created_at.desc(), Transfer.id.desc())
    return paginate(session, statement, request)


def get_transfer(session: Session, transfer_id: str) -> Transfer:
    transfer = session.get(Transfer, transfer_id)
    if transfer is None:
        raise RecordNotFoundError()
    return transfer


def create_transfer(session: Session, payload: TransferBase) -> Transfer:
    transfer = Transfer(**payload.model_dump())
    session.add(transfer)
    session.commit()
    session.refresh(transfer)
    logger.info("Recorded transfer %s for %s (%s)", transfer.id, transfer.person_id, transfer.company)
    return transfer


def replace_transfer(session: Session, transfer_id: str, payload: TransferBase) -> Transfer:
    transfer = get_transfer(session, transfer_id)
    for field_name, value in payload.model_dump().items():
        setattr(transfer, field_name, value)
    session.commit()
    session.refresh(transfer)
    return transfer


def delete_transfer(session: Session, transfer_id: str) -> None:
    transfer = get_transfer(session, transfer_id)
    session.delete(transfer)
    session.commit()


__all__ = [
    "create_transfer",
    "delete_transfer",
    "get_transfer",
    "list_transfers",
    "replace_transfer",
]
