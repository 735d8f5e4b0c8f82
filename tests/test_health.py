"""Smoke tests for health and app wiring."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from app.infrastructure.cache.config import CacheConfig
from app.main import app


@pytest.fixture
def app_state():
    """Set app.state cache attributes for one test and restore them afterwards."""
    saved = {name: getattr(app.state, name, None) for name in ("cache", "cache_config")}
    yield app.state
    for name, value in saved.items():
        setattr(app.state, name, value)


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_cache_health_disabled_without_backend(client: AsyncClient, app_state) -> None:
    """No cache backend on app.state -> status disabled."""
    app_state.cache = None
    response = await client.get("/api/v1/health/cache")
    assert response.status_code == 200
    assert response.json()["status"] == "disabled"
    assert response.json()["enabled"] is False


async def test_cache_health_ok(client: AsyncClient, app_state) -> None:
    app_state.cache = AsyncMock()
    app_state.cache.is_healthy = AsyncMock(return_value=True)
    app_state.cache_config = CacheConfig(enabled=True, key_prefix="covoitapi:")
    response = await client.get("/api/v1/health/cache")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "enabled": True, "key_prefix": "covoitapi:"}


async def test_cache_health_unavailable_returns_503(client: AsyncClient, app_state) -> None:
    app_state.cache = AsyncMock()
    app_state.cache.is_healthy = AsyncMock(return_value=False)
    app_state.cache_config = CacheConfig(enabled=True)
    response = await client.get("/api/v1/health/cache")
    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"


async def test_cache_health_disabled_by_config(client: AsyncClient, app_state) -> None:
    """A backend exists but CACHE_ENABLED is false -> disabled, backend not pinged."""
    app_state.cache = AsyncMock()
    app_state.cache_config = CacheConfig(enabled=False)
    response = await client.get("/api/v1/health/cache")
    assert response.json()["status"] == "disabled"
    app_state.cache.is_healthy.assert_not_called()


async def test_unknown_route_uses_error_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "HTTP_ERROR"
