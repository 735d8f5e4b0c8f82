"""Pytest configuration and fixtures for the carpooling API.

Uses app.main:app for HTTP tests. Cache-layer tests use AsyncMock doubles for
the cache backend and inner repositories; no Redis or database is required.
"""

import logging
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.cache.config import CacheConfig
from app.main import app

TEST_PREFIX = "test:"


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def cache() -> AsyncMock:
    """Cache backend double: empty cache, every call succeeds."""
    mock = AsyncMock()
    mock.get = AsyncMock(return_value=None)
    mock.set = AsyncMock(return_value=None)
    mock.delete = AsyncMock(return_value=None)
    mock.delete_by_pattern = AsyncMock(return_value=None)
    mock.is_healthy = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def cache_config() -> CacheConfig:
    """Enabled cache config with the short test prefix."""
    return CacheConfig(enabled=True, key_prefix=TEST_PREFIX)


@pytest.fixture
def disabled_cache_config() -> CacheConfig:
    return CacheConfig(enabled=False, key_prefix=TEST_PREFIX)


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("tests.cache")
