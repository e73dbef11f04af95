"""FastAPI application entrypoint."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from share_registry.api.errors import register_exception_handlers
from share_registry.api.routes import register_routes
from share_registry.core.config import Settings, get_settings
from share_registry.core.logging import configure_logging
from share_registry.obs import (
    AuditMiddleware,
    PrometheusMiddleware,
    initialise_tracing,
    instrument_fastapi_app,
    metrics_router,
)

logger = logging.getLogger(__name__)


def create_application(settings: Settings | None = None) -> FastAPI:
    """Build the registry API: logging, tracing, audit and metrics middleware, error handlers, routers."""
    settings = settings or get_settings()
    configure_logging(settings.log_config_path, settings.log_level)

    if settings.enable_tracing:
        initialise_tracing(
            service_name=settings.app_name,
            endpoint=settings.otel_exporter_endpoint,
            service_version=settings.version,
        )

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="Client profiles with share holdings, shareholders, DMAT accounts and transfers.",
        docs_url=settings.docs_url,
        redoc_url=settings.redoc_url,
        openapi_url=settings.openapi_url,
    )
    application.state.settings = settings

    # Starlette runs the last-added middleware first, so metrics time the audit work too.
    application.add_middleware(AuditMiddleware, settings=settings)
    if settings.enable_metrics:
        application.add_middleware(PrometheusMiddleware)
        application.include_router(metrics_router)
    register_exception_handlers(application)
    register_routes(application)

    if settings.enable_tracing:
        instrument_fastapi_app(application)

    logger.info(
        "Registry API configured (metrics=%s, tracing=%s, audit bucket=%s)",
        settings.enable_metrics,
        settings.enable_tracing,
        settings.audit_log_bucket or "-",
    )
    return application


app = create_application()
