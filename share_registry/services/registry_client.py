"""HTTP client for the registry API.

Holding changes have no endpoint of their own: each helper fetches the full
profile, transforms its holdings locally and writes the whole profile back.
Local failures (missing holding, blank company name or ISIN, removing the
last holding) raise before any write request is sent. Nothing is retried.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

import httpx

from share_registry.schemas.client_profile import (
    ClientProfileRead,
    HoldingReviewStatus,
    ShareHolding,
)
from share_registry.schemas.common import Paginated
from share_registry.services import holdings as holding_ops
from share_registry.services.errors import RegistryError


class RegistryApiError(RegistryError):
    """Raised when the API answers with an error status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class RegistryApiClient:
    """Synchronous wrapper around the ``/api/client-profiles`` resource."""

    def __init__(self, base_url: str, *, client: httpx.Client | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client()
        self._owns_client = client is None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "RegistryApiClient":  # pragma: no cover - convenience
        return self

    def __exit__(self, *_args: object) -> None:  # pragma: no cover - convenience
        self.close()

    def _url(self, suffix: str = "") -> str:
        return f"{self._base_url}/client-profiles{suffix}"

    def _send(self, method: str, url: str, **kwargs: Any) -> Any:
        response = self._client.request(method, url, **kwargs)
        if response.is_error:
            raise RegistryApiError(response.status_code, _error_message(response))
        return response.json()

    def list_profiles(
        self, *, page: int = 1, limit: int = 20, query: str | None = None
    ) -> Paginated[ClientProfileRead]:
        params: dict[str, Any] = {"page": page, "limit": limit}
        if query:
            params["q"] = query
        data = self._send("GET", self._url("/"), params=params)
        return Paginated[ClientProfileRead].model_validate(data)

    def get_profile(self, profile_id: str) -> ClientProfileRead:
        return ClientProfileRead.model_validate(self._send("GET", self._url(f"/{profile_id}")))

    def create_profile(self, payload: Mapping[str, Any]) -> ClientProfileRead:
        return ClientProfileRead.model_validate(self._send("POST", self._url("/"), json=dict(payload)))

    def replace_profile(self, profile: ClientProfileRead) -> ClientProfileRead:
        body = profile.model_dump(mode="json", by_alias=True, exclude={"id", "created_at", "updated_at"})
        return ClientProfileRead.model_validate(self._send("PUT", self._url(f"/{profile.id}"), json=body))

    def delete_profile(self, profile_id: str) -> None:
        self._send("DELETE", self._url(f"/{profile_id}"))

    def _rewrite_holdings(
        self,
        profile_id: str,
        transform: Callable[[Sequence[ShareHolding]], list[ShareHolding]],
    ) -> ClientProfileRead:
        profile = self.get_profile(profile_id)
        updated = transform(profile.share_holdings)
        return self.replace_profile(profile.model_copy(update={"share_holdings": updated}))

    def add_holding(self, profile_id: str, holding: ShareHolding | Mapping[str, Any]) -> ClientProfileRead:
        return self._rewrite_holdings(profile_id, lambda current: holding_ops.add_holding(current, holding))

    def edit_holding(
        self, profile_id: str, holding_id: str, changes: Mapping[str, Any]
    ) -> ClientProfileRead:
        return self._rewrite_holdings(
            profile_id, lambda current: holding_ops.edit_holding(current, holding_id, changes)
        )

    def remove_holding(
        self, profile_id: str, holding_id: str, *, enforce_minimum: bool = True
    ) -> ClientProfileRead:
        return self._rewrite_holdings(
            profile_id,
            lambda current: holding_ops.remove_holding(
                current, holding_id, enforce_minimum=enforce_minimum
            ),
        )

    def review_holding(
        self,
        profile_id: str,
        holding_id: str,
        status: HoldingReviewStatus | str,
        notes: str | None = None,
        *,
        reviewer: str = holding_ops.DEFAULT_REVIEWER,
    ) -> ClientProfileRead:
        return self._rewrite_holdings(
            profile_id,
            lambda current: holding_ops.review_holding(
                current, holding_id, status, notes, reviewer=reviewer
            ),
        )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "error" in body:
        return str(body["error"])
    return response.text


__all__ = ["RegistryApiClient", "RegistryApiError"]
