from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.main.app import create_app
from src.main.container import get_container
from tests.conftest import FixedRandomSource


@pytest.fixture()
def client():
    app = create_app()
    container = get_container()
    container.random_source.override(providers.Object(FixedRandomSource(0.0)))

    with TestClient(app) as test_client:
        yield test_client

    container.random_source.reset_override()


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "up"


def test_info_endpoint(client):
    response = client.get("/info")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Meu Agito Insights"
    assert body["extras"]["insights"]["high_ticket_threshold"] == 150.0


def test_demand_forecast_endpoint(client):
    response = client.post("/forecasts/demand", json={"series": [10, 20, 30, 40, 50]})

    assert response.status_code == 200
    assert response.json() == {"prediction": 60, "confidence": 53, "trend": "up"}


def test_demand_forecast_rejects_negative_values(client):
    response = client.post("/forecasts/demand", json={"series": [10, -20, 30]})

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == [
        "Series value #1 must not be negative."
    ]


def test_demand_forecast_handles_very_large_values(client):
    response = client.post("/forecasts/demand", json={"series": [0, 0, 1e160]})

    assert response.status_code == 200
    assert response.json()["confidence"] == 0
    assert response.json()["trend"] == "up"


def test_optimizations_endpoint(client):
    orders = [
        {"id": "1", "createdAt": "2026-03-10T19:05:00", "total": 30, "status": "completed"},
        {"id": "2", "createdAt": "2026-03-10T19:40:00", "total": 25, "status": "cancelled"},
    ]

    response = client.post("/insights/optimizations", json={"orders": orders})

    assert response.status_code == 200
    suggestions = response.json()["suggestions"]
    assert len(suggestions) == 3
    assert "19h" in suggestions[0]


def test_optimizations_endpoint_without_orders(client):
    response = client.post("/insights/optimizations", json={"orders": []})

    assert response.json() == {
        "suggestions": ["Comece a vender para receber insights!"]
    }


def test_dashboard_endpoint_uses_demo_series_for_new_partners(client):
    response = client.post("/insights/dashboard", json={"orders": []})

    assert response.status_code == 200
    body = response.json()
    assert body["used_demo_series"] is True
    assert body["prediction"] == {"prediction": 1964, "confidence": 82, "trend": "up"}


def test_campaign_draft_endpoint(client):
    response = client.post(
        "/campaigns/draft",
        json={
            "insight_type": "rainy_day",
            "business_category": "delivery",
            "product_name": "Pizza Calabresa",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Chuva de Sabores! ☔"
    assert "Pizza Calabresa" in body["copy"]
    assert body["tags"] == ["conforto", "delivery"]


def test_campaign_draft_unknown_insight_falls_back(client):
    response = client.post("/campaigns/draft", json={"insight_type": "eclipse"})

    assert response.status_code == 200
    assert response.json()["tags"] == ["institucional"]


def test_campaign_estimate_endpoint(client):
    response = client.post("/campaigns/estimate", json={"radius_km": 2})

    assert response.status_code == 200
    assert response.json() == {
        "radius_km": 2.0,
        "potential_reach": 2000,
        "pricing_model": "fixed",
        "estimated_cost": 9.9,
    }


def test_campaign_estimate_rejects_radius_outside_range(client):
    response = client.post("/campaigns/estimate", json={"radius_km": 12})
    assert response.status_code == 422


def test_insight_types_endpoint(client):
    response = client.get("/campaigns/insight-types")

    assert response.status_code == 200
    values = [option["value"] for option in response.json()]
    assert "rainy_day" in values
    assert len(values) == 10
