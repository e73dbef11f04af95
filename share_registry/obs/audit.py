"""Audit logging middleware and utilities."""
from __future__ import annotations

import json
import logging
import random
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable
from uuid import uuid4

import boto3
from botocore.exceptions import ClientError  # type: ignore[import-untyped]
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from share_registry.core.config import Settings

# Compared after lower-casing and dropping underscores, so ``panNumber`` and
# ``pan_number`` both match ``pannumber``.
_SENSITIVE_KEYS = {
    "email",
    "phone",
    "pan",
    "pannumber",
    "aadhaar",
    "aadhaarnumber",
    "banknumber",
    "micrcode",
    "accountnumber",
    "demataccountnumber",
}


def _normalise_key(key: str) -> str:
    return key.lower().replace("_", "")


def _mask_scalar(value: Any) -> Any:
    if isinstance(value, str) and len(value) > 4:
        return f"***{value[-4:]}"
    return "***"


def _mask_value(value: Any) -> Any:
    if isinstance(value, dict):
        return _mask_mapping(value)
    if isinstance(value, list):
        return [_mask_value(item) for item in value]
    if isinstance(value, str):
        if "@" in value:
            name, _, domain = value.partition("@")
            hidden = name[0] + "***" if name else "***"
            return f"{hidden}@{domain}" if domain else "***@***"
        if value.isdigit() and len(value) > 4:
            return f"***{value[-4:]}"
    return value


def resource_from_path(path: str) -> tuple[str | None, str | None]:
    """Split ``/api/client-profiles/<id>`` into ``("client-profiles", "<id>")``."""

    parts = [part for part in path.split("/") if part]
    if parts and parts[0] == "api":
        parts = parts[1:]
    if not parts:
        return None, None
    return parts[0], parts[1] if len(parts) > 1 else None


def _mask_mapping(mapping: dict[str, Any]) -> dict[str, Any]:
    sanitized: dict[str, Any] = {}
    for key, value in mapping.items():
        if _normalise_key(str(key)) in _SENSITIVE_KEYS:
            sanitized[key] = _mask_scalar(value)
        else:
            sanitized[key] = _mask_value(value)
    return sanitized


@dataclass(slots=True)
class AuditLogRecord:
    """Structured log entry emitted by the middleware."""

    timestamp: str
    request_id: str
    method: str
    path: str
    resource: str | None
    resource_id: str | None
    status: int
    duration_ms: float
    ip_address: str | None
    query: dict[str, Any]
    body: Any

    def to_json(self) -> str:
        payload = {
            "timestamp": self.timestamp,
            "request_id": self.request_id,
            "method": self.method,
            "path": self.path,
            "resource": self.resource,
            "resource_id": self.resource_id,
            "status": self.status,
            "duration_ms": round(self.duration_ms, 2),
            "ip_address": self.ip_address,
            "query": self.query,
            "body": self.body,
        }
        return json.dumps(payload, default=str)

    def to_dict(self) -> dict[str, Any]:
        return json.loads(self.to_json())


class AuditMiddleware(BaseHTTPMiddleware):
    """Records one masked audit entry per mutating request.

    Entries always go to the ``audit`` logger; when ``audit_log_bucket`` is
    configured they are also appended to a daily object in S3.
    """

    _AUDITED_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})

    def __init__(
        self,
        app: ASGIApp,
        *,
        settings: Settings,
        logger: logging.Logger | None = None,
        s3_client_factory: Callable[[], Any] | None = None,
    ) -> None:
        super().__init__(app)
        self._settings = settings
        self._logger = logger or logging.getLogger("audit")
        self._s3_client_factory = s3_client_factory or self._default_client_factory
        self._s3_client: Any | None = None
        self._bucket_ready = False

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        request.state.request_id = request_id
        if request.method not in self._AUDITED_METHODS:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response

        start = time.perf_counter()
        body_bytes = await request.body()
        self._set_body(request, body_bytes)

        masked_body = None
        if body_bytes:
            try:
                masked_body = _mask_value(json.loads(body_bytes))
            except json.JSONDecodeError:
                masked_body = "<binary>"

        response = await call_next(request)
        resource, resource_id = resource_from_path(request.url.path)

        record = AuditLogRecord(
            timestamp=datetime.now(timezone.utc).isoformat(),
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            resource=resource,
            resource_id=resource_id,
            status=response.status_code,
            duration_ms=(time.perf_counter() - start) * 1000,
            ip_address=request.client.host if request.client else None,
            query=_mask_mapping(dict(request.query_params.multi_items())),
            body=masked_body,
        )

        self._logger.info(record.to_json())
        self._persist_to_s3(record)

        response.headers["X-Request-ID"] = request_id
        return response

    def _default_client_factory(self) -> Any:
        return boto3.client(
            "s3",
            region_name=self._settings.aws_region,
            endpoint_url=self._settings.s3_endpoint_url,
        )

    def _get_s3_client(self) -> Any:
        if self._s3_client is None:
            self._s3_client = self._s3_client_factory()
        return self._s3_client

    def _ensure_bucket(self, client: Any, bucket: str) -> None:
        if self._bucket_ready:
            return
        try:
            client.head_bucket(Bucket=bucket)
        except ClientError:
            create_params: dict[str, Any] = {"Bucket": bucket}
            if self._settings.aws_region != "us-east-1" and self._settings.s3_endpoint_url is None:
                create_params["CreateBucketConfiguration"] = {"LocationConstraint": self._settings.aws_region}
            try:
                client.create_bucket(**create_params)
            except ClientError as exc:  # pragma: no cover - configuration issues
                self._logger.error("failed to create audit bucket", extra={"error": str(exc)})
                return
        self._bucket_ready = True

    def _persist_to_s3(self, record: AuditLogRecord) -> None:
        bucket = self._settings.audit_log_bucket
        if not bucket or self._settings.audit_log_sample_rate <= 0:
            return
        if self._settings.audit_log_sample_rate < 1 and random.random() > self._settings.audit_log_sample_rate:
            return

        try:
            client = self._get_s3_client()
            self._ensure_bucket(client, bucket)
            key = self._daily_key(record.resource)
            try:
                existing = client.get_object(Bucket=bucket, Key=key)["Body"].read()
            except client.exceptions.NoSuchKey:  # type: ignore[attr-defined]
                existing = b""
            except ClientError as exc:
                error_code = exc.response.get("Error", {}).get("Code")
                if error_code in {"404", "NoSuchKey"}:
                    existing = b""
                else:
                    raise
            client.put_object(
                Bucket=bucket,
                Key=key,
                Body=existing + record.to_json().encode("utf-8") + b"\n",
                ContentType="application/json",
            )
        except Exception as exc:  # pragma: no cover - S3 connectivity issues
            self._logger.error("failed to persist audit record", extra={"error": str(exc)})

    def _daily_key(self, resource: str | None) -> str:
        now = datetime.now(timezone.utc)
        prefix = self._settings.audit_log_prefix.rstrip("/")
        return f"{prefix}/{resource or 'other'}/{now:%Y/%m/%d}/audit.log"

    @staticmethod
    def _set_body(request: Request, body: bytes) -> None:
        async def receive() -> dict[str, Any]:
            nonlocal consumed
            if consumed:
                return {"type": "http.request", "body": b"", "more_body": False}
            consumed = True
            return {"type": "http.request", "body": body, "more_body": False}

        consumed = False
        request._receive = receive  # type: ignore[attr-defined]


def mask_payload(payload: Any) -> Any:
    """Mask identifiers in a decoded JSON payload the way audit entries do."""
    return _mask_value(payload)


__all__ = ["AuditLogRecord", "AuditMiddleware", "mask_payload", "resource_from_path"]
