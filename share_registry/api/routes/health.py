"""Health and readiness endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from share_registry.api.deps import get_db_session
from share_registry.core.config import get_settings
from share_registry.db.session import is_database_ready

router = APIRouter()


@router.get("/healthz", summary="Liveness check")
def health_check() -> dict[str, str]:
    settings = get_settings()
    return {"status": "ok", "service": settings.app_name}


@router.get("/readyz", summary="Readiness check")
def readiness_check(response: Response, session: Session = Depends(get_db_session)) -> dict[str, str]:
    settings = get_settings()
    if not is_database_ready(session):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "unavailable", "service": settings.app_name, "database": "disconnected"}
    return {"status": "ready", "service": settings.app_name, "database": "connected"}
