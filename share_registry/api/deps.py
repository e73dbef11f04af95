"""Common dependencies for API routes."""
from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from share_registry.api.errors import DATABASE_UNAVAILABLE
from share_registry.core.config import get_settings
from share_registry.db.session import SessionLocal, is_database_ready
from share_registry.services.pagination import PageRequest


def get_db_session() -> Iterator[Session]:
    """Yield a database session for FastAPI dependencies."""

    session: Session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def require_database(session: Session = Depends(get_db_session)) -> Session:
    """Gate data routes on a reachable database, answering 503 otherwise."""

    if not is_database_ready(session):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=DATABASE_UNAVAILABLE,
        )
    return session


def get_page_request(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> PageRequest:
    """Parse ``page``/``limit`` leniently; unparsable or non-positive values fall back to defaults."""

    settings = get_settings()
    return PageRequest.build(
        page=page,
        limit=limit,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )


__all__ = ["get_db_session", "get_page_request", "require_database"]
