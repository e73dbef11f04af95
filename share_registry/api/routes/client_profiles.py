"""Client profile CRUD endpoints.

Holdings travel inside the profile document; ``PUT`` replaces the whole
document including the holdings list.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from share_registry.api.deps import get_page_request, require_database
from share_registry.schemas import (
    ClientProfileCreate,
    ClientProfileRead,
    ClientProfileReplace,
    Paginated,
    SuccessResponse,
)
from share_registry.services import client_profiles as service
from share_registry.services.pagination import PageRequest

router = APIRouter()


@router.get("/", response_model=Paginated[ClientProfileRead])
def list_client_profiles(
    q: str | None = Query(default=None, description="Matches name, PAN or company name"),
    page_request: PageRequest = Depends(get_page_request),
    session: Session = Depends(require_database),
) -> Paginated[ClientProfileRead]:
    page = service.list_client_profiles(session, page_request, query=q)
    return Paginated[ClientProfileRead](
        data=[ClientProfileRead.model_validate(item) for item in page.items],
        page=page.page,
        limit=page.limit,
        total=page.total,
    )


@router.get("/{profile_id}", response_model=ClientProfileRead)
def get_client_profile(profile_id: str, session: Session = Depends(require_database)) -> ClientProfileRead:
    return ClientProfileRead.model_validate(service.get_client_profile(session, profile_id))


@router.post("/", response_model=ClientProfileRead, status_code=status.HTTP_201_CREATED)
def create_client_profile(
    payload: ClientProfileCreate, session: Session = Depends(require_database)
) -> ClientProfileRead:
    return ClientProfileRead.model_validate(service.create_client_profile(session, payload))


@router.put("/{profile_id}", response_model=ClientProfileRead)
def replace_client_profile(
    profile_id: str,
    payload: ClientProfileReplace,
    session: Session = Depends(require_database),
) -> ClientProfileRead:
    return ClientProfileRead.model_validate(service.replace_client_profile(session, profile_id, payload))


@router.delete("/{profile_id}", response_model=SuccessResponse)
def delete_client_profile(profile_id: str, session: Session = Depends(require_database)) -> SuccessResponse:
    service.delete_client_profile(session, profile_id)
    return SuccessResponse()


__all__ = [
    "create_client_profile",
    "delete_client_profile",
    "get_client_profile",
    "list_client_profiles",
    "replace_client_profile",
    "router",
]
