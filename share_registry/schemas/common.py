"""Shared schema building blocks."""
from __future__ import annotations

from datetime import date
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class RegistryModel(BaseModel):
    """Base model speaking camelCase on the wire while accepting snake_case input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class Paginated(RegistryModel, Generic[T]):
    """Envelope returned by every list endpoint."""

    data: list[T]
    page: int
    limit: int
    total: int


class ErrorResponse(BaseModel):
    error: str


class SuccessResponse(BaseModel):
    success: bool = True


def coerce_date(value: Any) -> Any:
    """Accept ISO datetimes (``2024-05-01T00:00:00Z``) where a calendar date is expected."""
    if isinstance(value, str) and "T" in value:
        return date.fromisoformat(value[:10])
    return value


__all__ = ["ErrorResponse", "Paginated", "RegistryModel", "SuccessResponse", "coerce_date"]
