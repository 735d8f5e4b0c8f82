"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the cache backend, cache configuration and
the repository set handed to use cases. The persistence layer registers its
plain repositories on ``app.state.repositories``; here they are wrapped with
the cached decorators when a cache backend is configured.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from app.application.interfaces.repositories import RepositorySet
from app.core.config import get_settings
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.config import CacheConfig, create_cache_config
from app.infrastructure.cache.repositories import decorate_repositories


def get_cache(request: Request) -> CacheProtocol | None:
    """Return the cache backend created at startup, or None when Redis is disabled."""
    return getattr(request.app.state, "cache", None)


def get_cache_config(request: Request) -> CacheConfig:
    """Return the cache config built at startup (built from settings if absent)."""
    config = getattr(request.app.state, "cache_config", None)
    if config is None:
        config = create_cache_config(get_settings())
    return config


def get_repositories(
    request: Request,
    cache: Annotated[CacheProtocol | None, Depends(get_cache)],
    config: Annotated[CacheConfig, Depends(get_cache_config)],
) -> RepositorySet:
    """Return the repository set, cached when a cache backend is available.

    Raises:
        HTTPException: 503 if no persistence layer registered repositories.
    """
    repos: RepositorySet | None = getattr(request.app.state, "repositories", None)
    if repos is None:
        raise HTTPException(status_code=503, detail="Repositories are not configured")
    if cache is None:
        return repos
    decorated = getattr(request.app.state, "cached_repositories", None)
    if decorated is None:
        decorated = decorate_repositories(repos, cache, config)
        request.app.state.cached_repositories = decorated
    return decorated
