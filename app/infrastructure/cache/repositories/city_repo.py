"""Cached city repository."""

from app.application.dtos.city import CityCreate, CityResult
from app.application.dtos.common import PageResult, SkipTake
from app.application.interfaces.repositories import ICityRepository
from app.core.constants import CACHE_DOMAIN_CITY
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result


class CachedCityRepository(CachedRepository[ICityRepository]):
    """City catalog behind the cache. Writes invalidate ``city:*``."""

    domain = CACHE_DOMAIN_CITY

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[CityResult], RepositoryError]:
        return await self._read(
            "find_all",
            serialize_args(params),
            lambda: self.inner.find_all(params),
            codecs.page(CityResult),
        )

    async def find_by_id(self, id: str) -> Result[CityResult | None, RepositoryError]:
        return await self._read(
            "find_by_id", id, lambda: self.inner.find_by_id(id), codecs.entity(CityResult)
        )

    async def find_by_city_name(self, city_name: str) -> Result[CityResult | None, RepositoryError]:
        return await self._read(
            "find_by_city_name",
            city_name,
            lambda: self.inner.find_by_city_name(city_name),
            codecs.entity(CityResult),
        )

    async def create(self, data: CityCreate) -> Result[CityResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), self.own_pattern)

    async def delete(self, id: str) -> Result[None, RepositoryError]:
        return await self._after_write(await self.inner.delete(id), self.own_pattern)
