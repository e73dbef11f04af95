"""Exceptions raised by the registry services."""
from __future__ import annotations


class RegistryError(RuntimeError):
    """Base exception for registry service errors."""


class RecordNotFoundError(RegistryError):
    """Raised when a record identifier does not exist."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class InvalidReferenceError(RegistryError):
    """Raised when a payload points at a related record that does not exist."""


__all__ = ["InvalidReferenceError", "RecordNotFoundError", "RegistryError"]
