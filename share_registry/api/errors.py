"""Exception handlers rendering every API error as ``{"error": message}``."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from share_registry.services.errors import InvalidReferenceError, RecordNotFoundError

logger = logging.getLogger(__name__)

DATABASE_UNAVAILABLE = "Database not connected"


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Flatten pydantic errors into one line: ``panNumber: Field required; ...``."""

    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query"))
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Validation failed: " + "; ".join(parts)


def register_exception_handlers(application: FastAPI) -> None:
    """Register the error handlers shared by every router."""

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, format_validation_errors(exc.errors()))

    @application.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @application.exception_handler(InvalidReferenceError)
    async def invalid_reference_handler(request: Request, exc: InvalidReferenceError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @application.exception_handler(OperationalError)
    async def database_unavailable_handler(request: Request, exc: OperationalError) -> JSONResponse:
        logger.error("database error on %s %s: %s", request.method, request.url.path, exc.orig)
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, DATABASE_UNAVAILABLE)


__all__ = ["DATABASE_UNAVAILABLE", "format_validation_errors", "register_exception_handlers"]
