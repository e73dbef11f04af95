"""Engine and session factories for the registry database."""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from share_registry.core.config import get_settings
from share_registry.obs import instrument_sqlalchemy_engine


def build_engine(database_url: str, *, tracing: bool = False) -> Engine:
    """Create an engine; SQLite URLs get the thread check relaxed for the test client and scripts."""

    options: dict[str, Any] = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    built = create_engine(database_url, **options)
    if tracing:
        instrument_sqlalchemy_engine(built)
    return built


settings = get_settings()
engine = build_engine(settings.database_url, tracing=settings.enable_tracing)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope() -> Iterator[Session]:
    """Commit on success, roll back on error; used by scripts outside a request."""
    session: Session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def is_database_ready(session: Session) -> bool:
    """Return ``True`` when the session's bind answers a trivial query."""
    try:
        session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        session.rollback()
        return False
    return True


__all__ = ["SessionLocal", "build_engine", "engine", "is_database_ready", "session_scope"]
