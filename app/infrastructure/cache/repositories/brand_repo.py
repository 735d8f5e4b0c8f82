"""Cached brand repository."""

from app.application.dtos.brand import BrandCreate, BrandResult
from app.application.dtos.common import PageResult, SkipTake
from app.application.interfaces.repositories import IBrandRepository
from app.core.constants import CACHE_DOMAIN_BRAND
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result


class CachedBrandRepository(CachedRepository[IBrandRepository]):
    """Brand catalog behind the cache. Writes invalidate ``brand:*``."""

    domain = CACHE_DOMAIN_BRAND

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[BrandResult], RepositoryError]:
        return await self._read(
            "find_all",
            serialize_args(params),
            lambda: self.inner.find_all(params),
            codecs.page(BrandResult),
        )

    async def find_by_id(self, id: str) -> Result[BrandResult | None, RepositoryError]:
        return await self._read(
            "find_by_id", id, lambda: self.inner.find_by_id(id), codecs.entity(BrandResult)
        )

    async def create(self, data: BrandCreate) -> Result[BrandResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), self.own_pattern)

    async def delete(self, id: str) -> Result[None, RepositoryError]:
        return await self._after_write(await self.inner.delete(id), self.own_pattern)
