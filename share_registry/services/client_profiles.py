"""Persistence operations for client profiles.

Profiles are written whole: ``replace_client_profile`` overwrites every
field including the holdings list, so holdings absent from the payload are
dropped. There is no version check; the last committed write wins.
"""
from __future__ import annotations

import logging

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from share_registry.models import ClientProfile
from share_registry.models.base import utcnow
from share_registry.obs import record_profile_write, traced_span
from share_registry.schemas.client_profile import ClientProfileBase
from share_registry.services.errors import RecordNotFoundError
from share_registry.services.pagination import Page, PageRequest, paginate

logger = logging.getLogger(__name__)


def _apply_payload(profile: ClientProfile, payload: ClientProfileBase) -> ClientProfile:
    document = payload.model_dump(mode="json", by_alias=True)

    profile.shareholder_name = document["shareholderName"]
    profile.primary_name = payload.shareholder_name.name1
    profile.pan_number = payload.pan_number
    profile.aadhaar_number = payload.aadhaar_number
    profile.address = payload.address
    profile.bank_details = document["bankDetails"]
    profile.demat_account_number = payload.demat_account_number
    profile.demat_created_with = payload.demat_created_with
    profile.demat_created_with_person = payload.demat_created_with_person
    profile.share_holdings = document["shareHoldings"]
    profile.company_names = "\n".join(holding.company_name for holding in payload.share_holdings)
    profile.current_date = payload.current_date or profile.current_date or utcnow()
    profile.status = payload.status
    profile.remarks = payload.remarks
    profile.dividend = document["dividend"]
    return profile


def list_client_profiles(session: Session, request: PageRequest, *, query: str | None = None) -> Page:
    """Newest-first page of profiles, optionally filtered by a case-insensitive substring."""

    statement = select(ClientProfile).order_by(ClientProfile.created_at.desc(), ClientProfile.id.desc())
    term = (query or "").strip()
    if term:
        statement = statement.where(
            or_(
                ClientProfile.primary_name.icontains(term, autoescape=True),
                ClientProfile.pan_number.icontains(term, autoescape=True),
                ClientProfile.company_names.icontains(term, autoescape=True),
            )
        )
    return paginate(session, statement, request)


def get_client_profile(session: Session, profile_id: str) -> ClientProfile:
    profile = session.get(ClientProfile, profile_id)
    if profile is None:
        raise RecordNotFoundError()
    return profile


def create_client_profile(session: Session, payload: ClientProfileBase) -> ClientProfile:
    with traced_span("client_profile.create", holdings=len(payload.share_holdings)):
        profile = _apply_payload(ClientProfile(), payload)
        session.add(profile)
        session.commit()
    record_profile_write("create", len(payload.share_holdings))
    session.refresh(profile)
    logger.info("Created client profile %s with %d holdings", profile.id, len(profile.share_holdings))
    return profile


def replace_client_profile(session: Session, profile_id: str, payload: ClientProfileBase) -> ClientProfile:
    profile = get_client_profile(session, profile_id)
    with traced_span("client_profile.replace", profile_id=profile_id, holdings=len(payload.share_holdings)):
        _apply_payload(profile, payload)
        session.commit()
    record_profile_write("replace", len(payload.share_holdings))
    session.refresh(profile)
    logger.info("Replaced client profile %s with %d holdings", profile.id, len(profile.share_holdings))
    return profile


def delete_client_profile(session: Session, profile_id: str) -> None:
    profile = get_client_profile(session, profile_id)
    session.delete(profile)
    session.commit()
    logger.info("Deleted client profile %s", profile_id)


__all__ = [
    "create_client_profile",
    "delete_client_profile",
    "get_client_profile",
    "list_client_profiles",
    "replace_client_profile",
]
