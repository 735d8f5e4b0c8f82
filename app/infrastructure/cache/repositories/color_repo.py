"""Cached color repository."""

from app.application.dtos.color import ColorCreate, ColorResult, ColorUpdate
from app.application.dtos.common import PageResult, SkipTake
from app.application.interfaces.repositories import IColorRepository
from app.core.constants import CACHE_DOMAIN_COLOR
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result


class CachedColorRepository(CachedRepository[IColorRepository]):
    domain = CACHE_DOMAIN_COLOR

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[ColorResult], RepositoryError]:
        return await self._read(
            "find_all",
            serialize_args(params),
            lambda: self.inner.find_all(params),
            codecs.page(ColorResult),
        )

    async def find_by_id(self, id: str) -> Result[ColorResult | None, RepositoryError]:
        return await self._read(
            "find_by_id", id, lambda: self.inner.find_by_id(id), codecs.entity(ColorResult)
        )

    async def find_by_name(self, name: str) -> Result[ColorResult | None, RepositoryError]:
        return await self._read(
            "find_by_name", name, lambda: self.inner.find_by_name(name), codecs.entity(ColorResult)
        )

    async def create(self, data: ColorCreate) -> Result[ColorResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), self.own_pattern)

    async def update(self, id: str, data: ColorUpdate) -> Result[ColorResult, RepositoryError]:
        return await self._after_write(await self.inner.update(id, data), self.own_pattern)

    async def delete(self, id: str) -> Result[None, RepositoryError]:
        return await self._after_write(await self.inner.delete(id), self.own_pattern)
