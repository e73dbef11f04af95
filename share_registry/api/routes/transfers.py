"""Share transfer CRUD endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from share_registry.api.deps import get_page_request, require_database
from share_registry.schemas import (
    Paginated,
    SuccessResponse,
    TransferCreate,
    TransferRead,
    TransferReplace,
)
from share_registry.services import transfers as service
from share_registry.services.pagination import PageRequest

router = APIRouter()


@router.get("/", response_model=Paginated[TransferRead])
def list_transfers(
    page_request: PageRequest = Depends(get_page_request),
    session: Session = Depends(require_database),
) -> Paginated[TransferRead]:
    page = service.list_transfers(session, page_request)
    return Paginated[TransferRead](
        data=[TransferRead.model_validate(item) for item in page.items],
        page=page.page,
        limit=page.limit,
        total=page.total,
    )


@router.get("/{transfer_id}", response_model=TransferRead)
def get_transfer(transfer_id: str, session: Session = Depends(require_database)) -> TransferRead:
    return TransferRead.model_validate(service.get_transfer(session, transfer_id))


@router.post("/", response_model=TransferRead, status_code=status.HTTP_201_CREATED)
def create_transfer(payload: TransferCreate, session: Session = Depends(require_database)) -> TransferRead:
    return TransferRead.model_validate(service.create_transfer(session, payload))


@router.put("/{transfer_id}", response_model=TransferRead)
def replace_transfer(
    transfer_id: str,
    payload: TransferReplace,
    session: Session = Depends(require_database),
) -> TransferRead:
    return TransferRead.model_validate(service.replace_transfer(session, transfer_id, payload))


@router.delete("/{transfer_id}", response_model=SuccessResponse)
def delete_transfer(transfer_id: str, session: Session = Depends(require_database)) -> SuccessResponse:
    service.delete_transfer(session, transfer_id)
    return SuccessResponse()


__all__ = [
    "create_transfer",
    "delete_transfer",
    "get_transfer",
    "list_transfers",
    "replace_transfer",
    "router",
]
