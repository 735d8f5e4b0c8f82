"""Cached repository decorators and the composition helper that applies them."""

import logging

from app.application.interfaces.repositories import RepositorySet
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.config import CacheConfig
from app.infrastructure.cache.repositories.auth_repo import CachedAuthRepository
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.cache.repositories.brand_repo import CachedBrandRepository
from app.infrastructure.cache.repositories.car_repo import CachedCarRepository
from app.infrastructure.cache.repositories.city_repo import CachedCityRepository
from app.infrastructure.cache.repositories.color_repo import CachedColorRepository
from app.infrastructure.cache.repositories.driver_repo import CachedDriverRepository
from app.infrastructure.cache.repositories.inscription_repo import (
    CachedInscriptionRepository,
)
from app.infrastructure.cache.repositories.model_repo import CachedModelRepository
from app.infrastructure.cache.repositories.travel_repo import CachedTravelRepository
from app.infrastructure.cache.repositories.trip_repo import CachedTripRepository
from app.infrastructure.cache.repositories.user_repo import CachedUserRepository


def decorate_repositories(
    repos: RepositorySet,
    cache: CacheProtocol,
    config: CacheConfig,
    logger: logging.Logger | None = None,
) -> RepositorySet:
    """Wrap every repository of the set with its cached decorator.

    The returned set is a drop-in replacement for ``repos``.
    """

    def wrap[R](cls: type[CachedRepository[R]], inner: R) -> R:
        return cls(inner, cache, config, logger)  # type: ignore[return-value]

    return RepositorySet(
        brand=wrap(CachedBrandRepository, repos.brand),
        car=wrap(CachedCarRepository, repos.car),
        city=wrap(CachedCityRepository, repos.city),
        color=wrap(CachedColorRepository, repos.color),
        model=wrap(CachedModelRepository, repos.model),
        driver=wrap(CachedDriverRepository, repos.driver),
        user=wrap(CachedUserRepository, repos.user),
        auth=wrap(CachedAuthRepository, repos.auth),
        trip=wrap(CachedTripRepository, repos.trip),
        travel=wrap(CachedTravelRepository, repos.travel),
        inscription=wrap(CachedInscriptionRepository, repos.inscription),
    )


__all__ = [
    "CachedAuthRepository",
    "CachedBrandRepository",
    "CachedCarRepository",
    "CachedCityRepository",
    "CachedColorRepository",
    "CachedDriverRepository",
    "CachedInscriptionRepository",
    "CachedModelRepository",
    "CachedRepository",
    "CachedTravelRepository",
    "CachedTripRepository",
    "CachedUserRepository",
    "decorate_repositories",
]
