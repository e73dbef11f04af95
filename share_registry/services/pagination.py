"""Offset pagination shared by the list endpoints."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

# Largest OFFSET both SQLite and Postgres accept (signed 64-bit).
MAX_OFFSET = 2**63 - 1


def _coerce_positive(raw: str | int | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


@dataclass(slots=True, frozen=True)
class PageRequest:
    """A validated page window."""

    page: int
    limit: int

    @classmethod
    def build(
        cls,
        *,
        page: str | int | None,
        limit: str | int | None,
        default_limit: int = 20,
        max_limit: int = 100,
    ) -> "PageRequest":
        resolved_page = _coerce_positive(page) or 1
        resolved_limit = min(_coerce_positive(limit) or default_limit, max_limit)
        resolved_page = min(resolved_page, MAX_OFFSET // resolved_limit + 1)
        return cls(page=resolved_page, limit=resolved_limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(slots=True, frozen=True)
class Page:
    """One page of results plus the unpaginated total."""

    items: list[Any]
    page: int
    limit: int
    total: int


def paginate(session: Session, statement: Select[Any], request: PageRequest) -> Page:
    """Run ``statement`` for one page window and count the full result set."""

    count_statement = select(func.count()).select_from(statement.order_by(None).subquery())
    total = session.scalar(count_statement) or 0
    items = list(session.scalars(statement.offset(request.offset).limit(request.limit)).all())
    return Page(items=items, page=request.page, limit=request.limit, total=total)


__all__ = ["MAX_OFFSET", "Page", "PageRequest", "paginate"]
