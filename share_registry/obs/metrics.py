"""Prometheus metrics utilities for the API process."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_LATENCY_SECONDS = Histogram(
    "http_request_latency_seconds",
    "Latency of HTTP requests in seconds.",
    labelnames=("method", "path"),
)
REQUEST_COUNTER = Counter(
    "http_requests_total",
    "Total number of HTTP requests processed.",
    labelnames=("method", "path", "status"),
)
REQUEST_ERROR_COUNTER = Counter(
    "http_request_errors_total",
    "Total number of HTTP requests that resulted in server errors.",
    labelnames=("method", "path", "status"),
)
PROFILE_WRITE_COUNTER = Counter(
    "client_profile_writes_total",
    "Client profile documents written, by operation.",
    labelnames=("operation",),
)
HOLDINGS_PER_PROFILE = Histogram(
    "client_profile_holdings",
    "Number of share holdings carried by each written client profile.",
    buckets=(0, 1, 2, 5, 10, 25, 50, 100),
)


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware that records request metrics for Prometheus scraping."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:  # type: ignore[override]
        method = request.method
        start_time = time.perf_counter()
        status = "500"

        try:
            response = await call_next(request)
            status = str(response.status_code)
            if response.status_code >= 500:
                REQUEST_ERROR_COUNTER.labels(method=method, path=_route_path(request), status=status).inc()
            return response
        except Exception:
            REQUEST_ERROR_COUNTER.labels(method=method, path=_route_path(request), status="500").inc()
            raise
        finally:
            path = _route_path(request)
            latency = time.perf_counter() - start_time
            REQUEST_LATENCY_SECONDS.labels(method=method, path=path).observe(latency)
            REQUEST_COUNTER.labels(method=method, path=path, status=status).inc()


metrics_router = APIRouter(tags=["observability"])


@metrics_router.get("/metrics", include_in_schema=False)
def metrics_endpoint() -> Response:
    """Expose Prometheus metrics for scraping."""
    payload = generate_latest()
    return Response(content=payload, media_type=CONTENT_TYPE_LATEST)


def record_profile_write(operation: str, holdings_count: int) -> None:
    """Count a client profile write and the size of its holdings list."""
    PROFILE_WRITE_COUNTER.labels(operation=operation).inc()
    HOLDINGS_PER_PROFILE.observe(holdings_count)


__all__ = [
    "HOLDINGS_PER_PROFILE",
    "PROFILE_WRITE_COUNTER",
    "PrometheusMiddleware",
    "REQUEST_COUNTER",
    "REQUEST_ERROR_COUNTER",
    "REQUEST_LATENCY_SECONDS",
    "metrics_endpoint",
    "metrics_router",
    "record_profile_write",
]
