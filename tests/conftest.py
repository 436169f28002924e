"""
Shared fixtures: an httpx client backed by MockTransport standing in for the
upstream product analytics backend.
"""
import httpx
import pytest

from app.domain.repositories.analytics_source_repo import AnalyticsSourceRepo

ANALYTICS_PATH = "/api/product-analytics"
PERFORMANCE_PATH = "/api/product-performance"


def make_client(routes: dict) -> httpx.AsyncClient:
    """
    routes maps a path to either (status, json_body) or an exception instance
    raised by the transport.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        outcome = routes.get(request.url.path, (404, {"error": "not found"}))
        if isinstance(outcome, Exception):
            raise outcome
        status, body = outcome
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://upstream.test")


def make_repo(routes: dict) -> AnalyticsSourceRepo:
    return AnalyticsSourceRepo(
        make_client(routes),
        analytics_path=ANALYTICS_PATH,
        performance_path=PERFORMANCE_PATH,
    )


@pytest.fixture
def ok_routes():
    """Both sources healthy, three sample products."""
    return {
        ANALYTICS_PATH: (200, {"totalProducts": 3}),
        PERFORMANCE_PATH: (
            200,
            {
                "performance": [
                    {"id": 1, "name": "Rice Cooker", "price": "1499.00", "total_units_sold": 42, "current_stock": 8},
                    {"id": 2, "name": "Kettle", "price": 799.5, "total_units_sold": 2, "current_stock": 0},
                    {"id": 3, "name": "Toaster", "price": 1200, "total_units_sold": 0},
                ]
            },
        ),
    }
