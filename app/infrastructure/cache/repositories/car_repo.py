"""Cached car repository."""

from app.application.dtos.car import CarCreate, CarResult, CarUpdate
from app.application.dtos.common import PageResult, SkipTake
from app.application.interfaces.repositories import ICarRepository
from app.core.constants import CACHE_DOMAIN_CAR
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result


class CachedCarRepository(CachedRepository[ICarRepository]):
    """Cars behind the cache. Writes invalidate ``car:*``."""

    domain = CACHE_DOMAIN_CAR

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[CarResult], RepositoryError]:
        return await self._read(
            "find_all",
            serialize_args(params),
            lambda: self.inner.find_all(params),
            codecs.page(CarResult),
        )

    async def find_by_id(self, id: str) -> Result[CarResult | None, RepositoryError]:
        return await self._read(
            "find_by_id", id, lambda: self.inner.find_by_id(id), codecs.entity(CarResult)
        )

    async def exists_by_immat(self, immat: str) -> Result[bool, RepositoryError]:
        return await self._read(
            "exists_by_immat", immat, lambda: self.inner.exists_by_immat(immat)
        )

    async def create(self, data: CarCreate) -> Result[CarResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), self.own_pattern)

    async def update(self, id: str, data: CarUpdate) -> Result[CarResult, RepositoryError]:
        return await self._after_write(await self.inner.update(id, data), self.own_pattern)

    async def delete(self, id: str) -> Result[None, RepositoryError]:
        return await self._after_write(await self.inner.delete(id), self.own_pattern)
