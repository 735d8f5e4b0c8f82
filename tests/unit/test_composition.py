"""Composition root: decorating a RepositorySet and the FastAPI repository dependency."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException

from app.api.v1.dependencies import get_cache_config, get_repositories
from app.application.interfaces.repositories import RepositorySet
from app.infrastructure.cache.repositories import (
    CachedAuthRepository,
    CachedInscriptionRepository,
    CachedTravelRepository,
    decorate_repositories,
)
from app.shared.result import ok


def _repository_set() -> RepositorySet:
    return RepositorySet(
        brand=AsyncMock(),
        car=AsyncMock(),
        city=AsyncMock(),
        color=AsyncMock(),
        model=AsyncMock(),
        driver=AsyncMock(),
        user=AsyncMock(),
        auth=AsyncMock(),
        trip=AsyncMock(),
        travel=AsyncMock(),
        inscription=AsyncMock(),
    )


def _request(**state: object) -> SimpleNamespace:
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(**state)))


def test_decorate_wraps_each_repository(cache, cache_config) -> None:
    repos = _repository_set()

    decorated = decorate_repositories(repos, cache, cache_config)

    assert isinstance(decorated.auth, CachedAuthRepository)
    assert isinstance(decorated.travel, CachedTravelRepository)
    assert isinstance(decorated.inscription, CachedInscriptionRepository)
    assert decorated.brand.inner is repos.brand
    assert decorated.inscription.inner is repos.inscription
    assert {getattr(decorated, name).domain for name in vars(decorated)} == {
        "brand",
        "car",
        "city",
        "color",
        "model",
        "driver",
        "user",
        "auth",
        "trip",
        "travel",
        "inscription",
    }


async def test_decorated_set_is_a_drop_in_replacement(cache, cache_config) -> None:
    repos = _repository_set()
    repos.city.find_by_city_name.return_value = ok(None)

    decorated = decorate_repositories(repos, cache, cache_config)

    assert await decorated.city.find_by_city_name("Lyon") == ok(None)
    cache.get.assert_awaited_once_with("test:city:find_by_city_name:Lyon")


def test_get_repositories_without_cache_returns_plain_set(cache_config) -> None:
    repos = _repository_set()
    assert get_repositories(_request(repositories=repos), None, cache_config) is repos


def test_get_repositories_decorates_once(cache, cache_config) -> None:
    request = _request(repositories=_repository_set())

    first = get_repositories(request, cache, cache_config)
    second = get_repositories(request, cache, cache_config)

    assert isinstance(first.travel, CachedTravelRepository)
    assert first is second


def test_get_repositories_unconfigured_is_503(cache, cache_config) -> None:
    with pytest.raises(HTTPException) as exc_info:
        get_repositories(_request(), cache, cache_config)
    assert exc_info.value.status_code == 503


def test_get_cache_config_prefers_app_state(cache_config) -> None:
    assert get_cache_config(_request(cache_config=cache_config)) is cache_config
    assert get_cache_config(_request()).key_prefix
