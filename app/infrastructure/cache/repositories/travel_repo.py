"""Cached travel repository (trips under the legacy route naming)."""

from app.application.dtos.common import PageResult, SkipTake
from app.application.dtos.travel import TravelCreate, TravelFilters, TravelResult
from app.application.interfaces.repositories import ITravelRepository
from app.core.constants import CACHE_DOMAIN_INSCRIPTION, CACHE_DOMAIN_TRAVEL
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import domain_pattern, serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result


class CachedTravelRepository(CachedRepository[ITravelRepository]):
    """Travels behind the cache. delete also invalidates ``inscription:*``."""

    domain = CACHE_DOMAIN_TRAVEL

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[TravelResult], RepositoryError]:
        return await self._read(
            "find_all",
            serialize_args(params),
            lambda: self.inner.find_all(params),
            codecs.page(TravelResult),
        )

    async def find_by_id(self, id: str) -> Result[TravelResult | None, RepositoryError]:
        return await self._read(
            "find_by_id", id, lambda: self.inner.find_by_id(id), codecs.entity(TravelResult)
        )

    async def find_by_filters(
        self, filters: TravelFilters
    ) -> Result[list[TravelResult], RepositoryError]:
        return await self._read(
            "find_by_filters",
            serialize_args(filters),
            lambda: self.inner.find_by_filters(filters),
            codecs.entity_list(TravelResult),
        )

    async def create(self, data: TravelCreate) -> Result[TravelResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), self.own_pattern)

    async def delete(self, id: str) -> Result[None, RepositoryError]:
        return await self._after_write(
            await self.inner.delete(id),
            self.own_pattern,
            domain_pattern(CACHE_DOMAIN_INSCRIPTION),
        )
