from __future__ import annotations

from decimal import Decimal

from fastapi.testclient import TestClient


def test_calculate_report(client: TestClient) -> None:
    response = client.post(
        "/api/reports/calculate", json={"symbol": "INFY", "quantity": 37, "buyAmount": "1000"}
    )

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["expectedDividends"]) == Decimal("92.50")
    assert body["bonusAllocation"] == 3
    assert Decimal(body["remainingDues"]) == Decimal("907.5")


def test_calculate_report_rejects_negative_quantity(client: TestClient) -> None:
    response = client.post("/api/reports/calculate", json={"quantity": -1, "buyAmount": "10"})

    assert response.status_code == 400
    assert "quantity" in response.json()["error"]
