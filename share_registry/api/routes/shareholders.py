"""Shareholder CRUD endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from share_registry.api.deps import get_page_request, require_database
from share_registry.models import ShareholderType
from share_registry.schemas import (
    Paginated,
    ShareholderCreate,
    ShareholderRead,
    ShareholderReplace,
    SuccessResponse,
)
from share_registry.services import shareholders as service
from share_registry.services.pagination import PageRequest

router = APIRouter()


@router.get("/", response_model=Paginated[ShareholderRead])
def list_shareholders(
    type: ShareholderType | None = Query(default=None),
    page_request: PageRequest = Depends(get_page_request),
    session: Session = Depends(require_database),
) -> Paginated[ShareholderRead]:
    page = service.list_shareholders(session, page_request, holder_type=type)
    return Paginated[ShareholderRead](
        data=[ShareholderRead.model_validate(item) for item in page.items],
        page=page.page,
        limit=page.limit,
        total=page.total,
    )


@router.get("/{shareholder_id}", response_model=ShareholderRead)
def get_shareholder(shareholder_id: str, session: Session = Depends(require_database)) -> ShareholderRead:
    return ShareholderRead.model_validate(service.get_shareholder(session, shareholder_id))


@router.post("/", response_model=ShareholderRead, status_code=status.HTTP_201_CREATED)
def create_shareholder(
    payload: ShareholderCreate, session: Session = Depends(require_database)
) -> ShareholderRead:
    return ShareholderRead.model_validate(service.create_shareholder(session, payload))


@router.put("/{shareholder_id}", response_model=ShareholderRead)
def replace_shareholder(
    shareholder_id: str,
    payload: ShareholderReplace,
    session: Session = Depends(require_database),
) -> ShareholderRead:
    return ShareholderRead.model_validate(service.replace_shareholder(session, shareholder_id, payload))


@router.delete("/{shareholder_id}", response_model=SuccessResponse)
def delete_shareholder(shareholder_id: str, session: Session = Depends(require_database)) -> SuccessResponse:
    service.delete_shareholder(session, shareholder_id)
    return SuccessResponse()


__all__ = [
    "create_shareholder",
    "delete_shareholder",
    "get_shareholder",
    "list_shareholders",
    "replace_shareholder",
    "router",
]
