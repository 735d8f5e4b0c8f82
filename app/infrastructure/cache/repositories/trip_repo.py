"""Cached trip repository.

Deleting a trip cascades to its inscriptions, so delete also invalidates
``inscription:*``.
"""

from app.application.dtos.common import PageResult, SkipTake
from app.application.dtos.trip import TripCreate, TripFilters, TripResult
from app.application.interfaces.repositories import ITripRepository
from app.core.constants import CACHE_DOMAIN_INSCRIPTION, CACHE_DOMAIN_TRIP
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import domain_pattern, serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result


class CachedTripRepository(CachedRepository[ITripRepository]):
    domain = CACHE_DOMAIN_TRIP

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[TripResult], RepositoryError]:
        return await self._read(
            "find_all",
            serialize_args(params),
            lambda: self.inner.find_all(params),
            codecs.page(TripResult),
        )

    async def find_by_id(self, id: str) -> Result[TripResult | None, RepositoryError]:
        return await self._read(
            "find_by_id", id, lambda: self.inner.find_by_id(id), codecs.entity(TripResult)
        )

    async def find_by_filters(self, filters: TripFilters) -> Result[list[TripResult], RepositoryError]:
        return await self._read(
            "find_by_filters",
            serialize_args(filters),
            lambda: self.inner.find_by_filters(filters),
            codecs.entity_list(TripResult),
        )

    async def create(self, data: TripCreate) -> Result[TripResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), self.own_pattern)

    async def delete(self, id: str) -> Result[None, RepositoryError]:
        return await self._after_write(
            await self.inner.delete(id),
            self.own_pattern,
            domain_pattern(CACHE_DOMAIN_INSCRIPTION),
        )
