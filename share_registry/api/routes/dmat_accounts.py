"""DMAT account CRUD endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from share_registry.api.deps import get_page_request, require_database
from share_registry.schemas import (
    DmatAccountCreate,
    DmatAccountRead,
    DmatAccountReplace,
    Paginated,
    SuccessResponse,
)
from share_registry.services import dmat_accounts as service
from share_registry.services.pagination import PageRequest

router = APIRouter()


@router.get("/", response_model=Paginated[DmatAccountRead])
def list_dmat_accounts(
    page_request: PageRequest = Depends(get_page_request),
    session: Session = Depends(require_database),
) -> Paginated[DmatAccountRead]:
    page = service.list_dmat_accounts(session, page_request)
    return Paginated[DmatAccountRead](
        data=[DmatAccountRead.model_validate(item) for item in page.items],
        page=page.page,
        limit=page.limit,
        total=page.total,
    )


@router.get("/{account_id}", response_model=DmatAccountRead)
def get_dmat_account(account_id: str, session: Session = Depends(require_database)) -> DmatAccountRead:
    return DmatAccountRead.model_validate(service.get_dmat_account(session, account_id))


@router.post("/", response_model=DmatAccountRead, status_code=status.HTTP_201_CREATED)
def create_dmat_account(
    payload: DmatAccountCreate, session: Session = Depends(require_database)
) -> DmatAccountRead:
    return DmatAccountRead.model_validate(service.create_dmat_account(session, payload))


@router.put("/{account_id}", response_model=DmatAccountRead)
def replace_dmat_account(
    account_id: str,
    payload: DmatAccountReplace,
    session: Session = Depends(require_database),
) -> DmatAccountRead:
    return DmatAccountRead.model_validate(service.replace_dmat_account(session, account_id, payload))


@router.delete("/{account_id}", response_model=SuccessResponse)
def delete_dmat_account(account_id: str, session: Session = Depends(require_database)) -> SuccessResponse:
    service.delete_dmat_account(session, account_id)
    return SuccessResponse()


__all__ = [
    "create_dmat_account",
    "delete_dmat_account",
    "get_dmat_account",
    "list_dmat_accounts",
    "replace_dmat_account",
    "router",
]
