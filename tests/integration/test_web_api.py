"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from sitecabins.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh application."""
    return TestClient(create_app())


ITEMS = [
    {"type": "office6m", "position": [0, 0, 0]},
    {"type": "office6m", "position": [2.9, 0, 0]},
    {"type": "toilet", "position": [0, 0, 5]},
]


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestCatalogueEndpoint:
    """Tests for GET /api/v1/catalogue."""

    def test_lists_entries(self, client: TestClient) -> None:
        response = client.get("/api/v1/catalogue")
        assert response.status_code == 200
        entries = {entry["type"]: entry for entry in response.json()["entries"]}
        assert len(entries) == 7
        assert entries["cont20"] == {
            "type": "cont20",
            "sku": "CON-20",
            "label": "Container 20ft",
            "len": 6.06,
            "wid": 2.44,
            "ht": 2.59,
            "weekly": 75,
        }


class TestOrderEndpoint:
    """Tests for POST /api/v1/order."""

    def test_generic(self, client: TestClient) -> None:
        response = client.post("/api/v1/order", json={"items": ITEMS})
        assert response.status_code == 200
        payload = response.json()
        assert payload["currency"] == "AUD"
        assert {line["sku"]: line["qty"] for line in payload["lines"]} == {
            "OFF-6": 2,
            "TOI-2": 1,
        }

    def test_stripe(self, client: TestClient) -> None:
        response = client.post("/api/v1/order", json={"items": ITEMS, "platform": "stripe"})
        assert response.status_code == 200
        amounts = {
            li["price_data"]["product_data"]["metadata"]["sku"]: li["price_data"]["unit_amount"]
            for li in response.json()["line_items"]
        }
        assert amounts == {"OFF-6": 21000, "TOI-2": 12000}

    def test_unknown_platform_and_type(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/order",
            json={"items": [{"type": "spaceship"}, {"type": "lunch"}], "platform": "ebay"},
        )
        assert response.status_code == 200
        assert response.json() == {
            "currency": "AUD",
            "lines": [{"sku": "LUN-6", "label": "Lunchroom 6m", "qty": 1, "weekly": 230}],
        }

    def test_malformed_item_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/order", json={"items": [{"position": [0, 0, 0]}]})
        assert response.status_code == 422


class TestLayoutEndpoints:
    """Tests for the /api/v1/layout endpoints."""

    def test_overlaps(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout/overlaps", json={"items": ITEMS})
        assert response.status_code == 200
        assert response.json() == {"overlapping": [0, 1], "pairs": [[0, 1]], "ignored": []}

    def test_overlaps_ignores_unknown_types(self, client: TestClient) -> None:
        items = [{"type": "ghost"}, {"type": "toilet"}, {"type": "toilet", "yaw": 1.5708}]
        response = client.post("/api/v1/layout/overlaps", json={"items": items})
        assert response.status_code == 200
        assert response.json() == {"overlapping": [1, 2], "pairs": [[1, 2]], "ignored": [0]}

    def test_snap(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/snap", json={"position": [1.26, 2, -0.74], "step": 0.5}
        )
        assert response.status_code == 200
        assert response.json() == {"position": [1.5, 2.0, -0.5]}

    def test_snap_rejects_non_positive_step(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout/snap", json={"position": [1, 0, 1], "step": 0})
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "grid_step"
        assert body["details"] == {"step": 0.0}
