"""
Integration tests for the analytics and health endpoints.
"""
from datetime import datetime, timezone

import httpx
import pytest
from fastapi.testclient import TestClient

import app.db.upstream as upstream_module
from app.main import app
from tests.conftest import ANALYTICS_PATH, PERFORMANCE_PATH, make_client


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def use_upstream(monkeypatch):
    """Install a mocked upstream client for the duration of a test."""

    def _install(routes):
        monkeypatch.setattr(upstream_module, "_client", make_client(routes))

    return _install


def test_performance_dashboard(client, use_upstream, ok_routes):
    today = datetime.now(timezone.utc).isoformat()
    ok_routes[PERFORMANCE_PATH][1]["performance"].append(
        {"id": 4, "name": "Blender", "price": 2500, "total_units_sold": 1, "average_rating": 4.76, "latest_rating_date": today}
    )
    use_upstream(ok_routes)

    response = client.get("/analytics/performance")
    assert response.status_code == 200
    data = response.json()

    assert data["state"] == "ready"
    assert [c["id"] for c in data["saleable"]["items"]] == [1]
    assert data["saleable"]["items"][0]["price"] == "₱1,499.00"
    assert [c["id"] for c in data["non_saleable"]["items"]] == [2, 4]
    assert [c["id"] for c in data["rated"]["items"]] == [4]
    assert data["rated"]["items"][0]["rating"] == 4.8
    assert data["saleable_count"] == 1
    assert data["non_saleable_count"] == 2


def test_performance_raw(client, use_upstream, ok_routes):
    use_upstream(ok_routes)

    response = client.get("/analytics/performance/raw")
    assert response.status_code == 200
    data = response.json()

    assert data["saleableCount"] == 1
    assert data["nonSaleableCount"] == 1
    assert data["currentRatedProducts"] == []
    # record returned as received: absent counters stay absent
    assert data["topSaleableProducts"][0]["total_units_sold"] == 42
    low = data["nonSaleableProducts"][0]
    assert low["id"] == 2
    assert "latest_rating_date" not in low


def test_performance_empty(client, use_upstream):
    use_upstream({ANALYTICS_PATH: (200, {}), PERFORMANCE_PATH: (200, {"performance": []})})

    response = client.get("/analytics/performance")
    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "empty"
    assert data["message"] == "No analytics data available yet"


@pytest.mark.parametrize("failing_path", [ANALYTICS_PATH, PERFORMANCE_PATH])
def test_performance_upstream_failure(client, use_upstream, ok_routes, failing_path):
    ok_routes[failing_path] = (500, {"error": "boom"})
    use_upstream(ok_routes)

    response = client.get("/analytics/performance")
    assert response.status_code == 502
    assert response.json() == {"state": "error", "detail": "Failed to fetch analytics data"}


def test_performance_upstream_unreachable(client, use_upstream, ok_routes):
    ok_routes[PERFORMANCE_PATH] = httpx.ConnectError("connection refused")
    use_upstream(ok_routes)

    response = client.get("/analytics/performance")
    assert response.status_code == 502


def test_analytics_health(client):
    response = client.get("/analytics/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_health(client, use_upstream, ok_routes):
    use_upstream(ok_routes)
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["checks"]["upstream_client"] == "ok"


def test_health_without_upstream_client(client, monkeypatch):
    monkeypatch.setattr(upstream_module, "_client", None)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "error"


def test_performance_raw_upstream_failure(client, use_upstream, ok_routes):
    ok_routes[ANALYTICS_PATH] = (500, {"error": "boom"})
    use_upstream(ok_routes)

    response = client.get("/analytics/performance/raw")
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch analytics data"


def test_openapi_documents_both_shapes(client):
    paths = client.get("/openapi.json").json()["paths"]

    dashboard = paths["/analytics/performance"]["get"]["responses"]["200"]
    assert dashboard["content"]["application/json"]["schema"]["$ref"].split("/")[-1].startswith("DashboardOut")

    raw = paths["/analytics/performance/raw"]["get"]["responses"]
    assert raw["200"]["content"]["application/json"]["schema"]["$ref"].split("/")[-1].startswith("ClassificationResult")
    assert "502" in raw
