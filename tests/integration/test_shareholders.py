from __future__ import annotations

from fastapi.testclient import TestClient


def _create_account(client: TestClient) -> dict[str, object]:
    response = client.post(
        "/api/dmat/",
        json={"accountNumber": "DMAT-009", "holderName": "Rahul K.", "expiryDate": "2026-12-31"},
    )
    assert response.status_code == 201
    return response.json()


def _person(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": "Rahul K.",
        "email": "Rahul@Example.com",
        "phone": "9870012345",
        "pan": "bcdef2345g",
        "type": "Stockholder",
    }
    payload.update(overrides)
    return payload


def test_shareholder_crud_flow(client: TestClient) -> None:
    account = _create_account(client)

    create_response = client.post("/api/shareholders/", json=_person(linkedDmatAccountId=account["id"]))
    assert create_response.status_code == 201
    created = create_response.json()
    assert created["email"] == "rahul@example.com"
    assert created["pan"] == "BCDEF2345G"
    assert created["linkedDmatAccount"]["accountNumber"] == "DMAT-009"

    update_response = client.put(f"/api/shareholders/{created['id']}", json=_person(name="Rahul Kumar"))
    assert update_response.status_code == 200
    assert update_response.json()["name"] == "Rahul Kumar"
    assert update_response.json()["linkedDmatAccount"] is None

    assert client.delete(f"/api/shareholders/{created['id']}").json() == {"success": True}
    missing = client.get(f"/api/shareholders/{created['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Not found"}


def test_list_filters_by_type(client: TestClient) -> None:
    client.post("/api/shareholders/", json=_person(name="Meera S.", type="Shareholder"))
    client.post("/api/shareholders/", json=_person(name="Arjun P.", type="Stockholder"))
    client.post("/api/shareholders/", json=_person(name="Priya N.", type="Shareholder"))

    shareholders = client.get("/api/shareholders/", params={"type": "Shareholder"}).json()
    everyone = client.get("/api/shareholders/").json()

    assert shareholders["total"] == 2
    assert {item["name"] for item in shareholders["data"]} == {"Meera S.", "Priya N."}
    assert everyone["total"] == 3


def test_link_to_missing_dmat_account_is_rejected(client: TestClient) -> None:
    response = client.post("/api/shareholders/", json=_person(linkedDmatAccountId="missing"))

    assert response.status_code == 400
    assert "missing" in response.json()["error"]


def test_deleting_dmat_account_clears_link(client: TestClient) -> None:
    account = _create_account(client)
    person = client.post("/api/shareholders/", json=_person(linkedDmatAccountId=account["id"])).json()

    client.delete(f"/api/dmat/{account['id']}")

    fetched = client.get(f"/api/shareholders/{person['id']}").json()
    assert fetched["linkedDmatAccountId"] is None
    assert fetched["linkedDmatAccount"] is None
