from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from share_registry.schemas import HoldingReviewStatus
from share_registry.services.holdings import LastHoldingError
from share_registry.services.registry_client import RegistryApiClient, RegistryApiError


@pytest.fixture()
def registry(client: TestClient) -> RegistryApiClient:
    return RegistryApiClient("/api", client=client)


def test_review_holding_stamps_review_only(
    registry: RegistryApiClient, profile_payload: dict[str, object]
) -> None:
    profile = registry.create_profile(profile_payload)
    holding = profile.share_holdings[0]

    updated = registry.review_holding(profile.id, holding.id, "approved", "ok")

    reviewed = updated.share_holdings[0]
    assert reviewed.review is not None
    assert reviewed.review.status is HoldingReviewStatus.APPROVED
    assert reviewed.review.notes == "ok"
    assert reviewed.review.reviewed_by == "Admin User"
    assert isinstance(reviewed.review.reviewed_at, datetime)
    assert reviewed.model_dump(exclude={"review"}) == holding.model_dump(exclude={"review"})

    persisted = registry.get_profile(profile.id)
    assert persisted.share_holdings[0].review == reviewed.review


def test_add_edit_and_remove_holding(
    registry: RegistryApiClient, profile_payload: dict[str, object], holding_payload: dict[str, object]
) -> None:
    profile = registry.create_profile(profile_payload)
    first_id = profile.share_holdings[0].id

    added = registry.add_holding(profile.id, {**holding_payload, "companyName": "Wipro Ltd"})
    assert [holding.company_name for holding in added.share_holdings] == ["Infosys Ltd", "Wipro Ltd"]
    second_id = added.share_holdings[1].id
    assert second_id != first_id

    edited = registry.edit_holding(profile.id, second_id, {"quantity": 250})
    assert edited.share_holdings[1].quantity == 250
    assert edited.share_holdings[1].company_name == "Wipro Ltd"

    trimmed = registry.remove_holding(profile.id, first_id)
    assert [holding.id for holding in trimmed.share_holdings] == [second_id]

    with pytest.raises(LastHoldingError):
        registry.remove_holding(profile.id, second_id)
    assert len(registry.get_profile(profile.id).share_holdings) == 1


def test_list_profiles_returns_page(registry: RegistryApiClient, profile_payload: dict[str, object]) -> None:
    registry.create_profile(profile_payload)

    page = registry.list_profiles(query="akanksha")

    assert page.total == 1
    assert page.data[0].pan_number == "ABCDE1234F"


def test_api_errors_surface_message(registry: RegistryApiClient) -> None:
    with pytest.raises(RegistryApiError) as excinfo:
        registry.get_profile("missing")

    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Not found"
