# app/db/upstream.py
import httpx
from app.core.config import get_settings

_client: httpx.AsyncClient | None = None


def get_client() -> httpx.AsyncClient:
    assert _client is not None, "Upstream client not initialized"
    return _client


async def connect():
    """
    Create the shared async HTTP client for the product analytics backend.
    No request is made here: the upstream may come up after us, and a
    failed fetch is reported per request.
    """
    global _client
    settings = get_settings()
    _client = httpx.AsyncClient(
        base_url=settings.UPSTREAM_BASE_URL,
        timeout=settings.upstream_timeout_s,
        headers={"Accept": "application/json"},
    )


async def disconnect():
    """Close the shared client if it exists."""
    global _client
    if _client:
        await _client.aclose()
    _client = None
