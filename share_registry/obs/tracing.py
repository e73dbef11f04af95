"""OpenTelemetry tracing helpers for the registry API."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)
from opentelemetry.trace import Span

_SERVICE_NAME_ATTRIBUTE = "service.name"
_SERVICE_VERSION_ATTRIBUTE = "service.version"
_TRACER_NAME = "share_registry"

# Comma-separated URL patterns the FastAPI instrumentation skips.
UNTRACED_URLS = "api/healthz,api/readyz,metrics"


def _span_processor(endpoint: str | None) -> SpanProcessor:
    if endpoint:
        return BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
    return SimpleSpanProcessor(ConsoleSpanExporter())


def _configured_service(provider: object) -> str | None:
    if not isinstance(provider, TracerProvider):
        return None
    return provider.resource.attributes.get(_SERVICE_NAME_ATTRIBUTE)  # type: ignore[return-value]


def initialise_tracing(
    *,
    service_name: str,
    endpoint: str | None = None,
    service_version: str | None = None,
    instrument_logging: bool = True,
) -> None:
    """Install a global tracer provider unless one for ``service_name`` is already active.

    Spans go to the OTLP collector at ``endpoint`` when given, otherwise to
    the console.
    """

    if _configured_service(trace.get_tracer_provider()) == service_name:
        return

    attributes = {_SERVICE_NAME_ATTRIBUTE: service_name}
    if service_version:
        attributes[_SERVICE_VERSION_ATTRIBUTE] = service_version
    provider = TracerProvider(resource=Resource(attributes=attributes))
    provider.add_span_processor(_span_processor(endpoint))
    trace.set_tracer_provider(provider)
    if instrument_logging:
        LoggingInstrumentor().instrument(set_logging_format=True)


def instrument_fastapi_app(app: FastAPI) -> None:
    """Trace every request except health probes and metric scrapes."""
    FastAPIInstrumentor.instrument_app(app, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy_engine(engine: Any) -> None:
    SQLAlchemyInstrumentor().instrument(engine=engine)


@contextmanager
def traced_span(name: str, **attributes: Any) -> Iterator[Span]:
    """Run a block inside a child span of the current trace, tagged with ``attributes``."""

    tracer = trace.get_tracer(_TRACER_NAME)
    with tracer.start_as_current_span(name) as span:
        for key, value in attributes.items():
            if value is not None:
                span.set_attribute(f"registry.{key}", value)
        yield span


__all__ = [
    "UNTRACED_URLS",
    "initialise_tracing",
    "instrument_fastapi_app",
    "instrument_sqlalchemy_engine",
    "traced_span",
]
