"""
Health and root endpoint tests - fast feedback on API availability.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    """GET /health returns 200 and the static healthy payload in the envelope."""
    response = await client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Service is healthy"
    assert body["data"] == {"status": "ok", "service": "product-catalog"}
    assert "timestamp" in body


@pytest.mark.asyncio
async def test_health_does_not_touch_search_index(client: AsyncClient, fake_index):
    fake_index.healthy = False
    response = await client.get("/health")
    assert response.status_code == 200
    assert fake_index.search_calls == []


@pytest.mark.asyncio
async def test_root_describes_endpoints(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "1.0.0"
    assert data["endpoints"]["search"] == "/api/products/search?q=<query>"
    assert data["endpoints"]["stats"] == "/api/products/stats"


@pytest.mark.asyncio
async def test_options_short_circuits_with_cors_headers(client: AsyncClient):
    response = await client.options("/api/products/search", headers={"Origin": "http://shop.example.com"})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_preflight_request_allowed(client: AsyncClient):
    response = await client.options(
        "/api/products/search",
        headers={"Origin": "http://shop.example.com", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert "GET" in response.headers["access-control-allow-methods"]


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient):
    response = await client.get("/api/unknown")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_preflight_with_unlisted_header_still_200(client: AsyncClient):
    response = await client.options(
        "/api/products/search",
        headers={
            "Origin": "http://shop.example.com",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "X-Requested-With",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"


@pytest.mark.asyncio
async def test_preflight_with_unlisted_method_still_200(client: AsyncClient):
    response = await client.options(
        "/api/products/search",
        headers={"Origin": "http://shop.example.com", "Access-Control-Request-Method": "PATCH"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"


@pytest.mark.asyncio
async def test_cors_header_on_regular_request(client: AsyncClient):
    response = await client.get("/health", headers={"Origin": "http://shop.example.com"})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
