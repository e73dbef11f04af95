from __future__ import annotations

import json

import httpx
import pytest

from share_registry.services.errors import RegistryError
from share_registry.services.holdings import HoldingNotFoundError, InvalidHoldingError
from share_registry.services.registry_client import RegistryApiClient, RegistryApiError

PROFILE = {
    "id": "profile-1",
    "shareholderName": {"name1": "Akanksha Deshmukh"},
    "panNumber": "ABCDE1234F",
    "shareHoldings": [
        {"id": "h-1", "companyName": "Infosys Ltd", "isinNumber": "INE009A01021", "quantity": 10},
    ],
    "status": "Active",
    "createdAt": "2025-03-01T09:00:00Z",
    "updatedAt": "2025-03-01T09:00:00Z",
}


def _client(handler) -> tuple[RegistryApiClient, list[httpx.Request]]:  # type: ignore[no-untyped-def]
    seen: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    transport = httpx.MockTransport(recording)
    return RegistryApiClient("http://registry/api", client=httpx.Client(transport=transport)), seen


def _serve_profile(request: httpx.Request) -> httpx.Response:
    if request.method == "GET":
        return httpx.Response(200, json=PROFILE)
    body = json.loads(request.content)
    return httpx.Response(200, json={**PROFILE, **body})


def test_review_holding_puts_whole_profile() -> None:
    client, seen = _client(_serve_profile)

    updated = client.review_holding("profile-1", "h-1", "rejected", "wrong folio")

    assert [request.method for request in seen] == ["GET", "PUT"]
    assert seen[1].url.path == "/api/client-profiles/profile-1"
    sent = json.loads(seen[1].content)
    assert set(sent) >= {"shareholderName", "panNumber", "shareHoldings", "status"}
    assert "id" not in sent
    assert sent["shareHoldings"][0]["id"] == "h-1"
    assert sent["shareHoldings"][0]["review"]["status"] == "rejected"
    assert updated.share_holdings[0].review is not None
    assert updated.share_holdings[0].review.notes == "wrong folio"


def test_local_validation_failure_sends_no_write() -> None:
    client, seen = _client(_serve_profile)

    with pytest.raises(InvalidHoldingError):
        client.add_holding("profile-1", {"companyName": "", "isinNumber": "INE009A01021"})
    with pytest.raises(HoldingNotFoundError):
        client.edit_holding("profile-1", "h-404", {"quantity": 1})

    assert [request.method for request in seen] == ["GET", "GET"]


def test_error_status_raises_with_message() -> None:
    client, _ = _client(lambda request: httpx.Response(503, json={"error": "Database not connected"}))

    with pytest.raises(RegistryApiError) as excinfo:
        client.list_profiles()

    assert excinfo.value.status_code == 503
    assert excinfo.value.message == "Database not connected"


def test_list_profiles_sends_paging_and_query() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": [PROFILE], "page": 2, "limit": 5, "total": 6})

    client, seen = _client(handler)

    page = client.list_profiles(page=2, limit=5, query="infosys")

    assert seen[0].url.params["q"] == "infosys"
    assert seen[0].url.params["page"] == "2"
    assert page.total == 6
    assert page.data[0].share_holdings[0].id == "h-1"


def test_unknown_review_status_is_a_registry_error() -> None:
    client, seen = _client(_serve_profile)

    with pytest.raises(RegistryError):
        client.review_holding("profile-1", "h-1", "maybe")

    assert [request.method for request in seen] == ["GET"]
