"""Observability utilities."""

from .audit import AuditLogRecord, AuditMiddleware, mask_payload, resource_from_path
from .metrics import (
    HOLDINGS_PER_PROFILE,
    PROFILE_WRITE_COUNTER,
    REQUEST_COUNTER,
    REQUEST_ERROR_COUNTER,
    REQUEST_LATENCY_SECONDS,
    PrometheusMiddleware,
    metrics_router,
    record_profile_write,
)
from .tracing import (
    initialise_tracing,
    instrument_fastapi_app,
    instrument_sqlalchemy_engine,
    traced_span,
)

__all__ = [
    "AuditLogRecord",
    "AuditMiddleware",
    "HOLDINGS_PER_PROFILE",
    "PROFILE_WRITE_COUNTER",
    "PrometheusMiddleware",
    "REQUEST_COUNTER",
    "REQUEST_ERROR_COUNTER",
    "REQUEST_LATENCY_SECONDS",
    "initialise_tracing",
    "instrument_fastapi_app",
    "instrument_sqlalchemy_engine",
    "mask_payload",
    "metrics_router",
    "record_profile_write",
    "resource_from_path",
    "traced_span",
]
