"""Cached car model repository."""

from app.application.dtos.model import ModelCreate, ModelResult
from app.application.interfaces.repositories import IModelRepository
from app.core.constants import CACHE_DOMAIN_MODEL
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result


class CachedModelRepository(CachedRepository[IModelRepository]):
    """Car models behind the cache. create invalidates ``model:*``."""

    domain = CACHE_DOMAIN_MODEL

    async def find_all(self) -> Result[list[ModelResult], RepositoryError]:
        return await self._read(
            "find_all",
            serialize_args(None),
            lambda: self.inner.find_all(),
            codecs.entity_list(ModelResult),
        )

    async def find_by_id(self, id: str) -> Result[ModelResult | None, RepositoryError]:
        return await self._read(
            "find_by_id", id, lambda: self.inner.find_by_id(id), codecs.entity(ModelResult)
        )

    async def find_by_name_and_brand(
        self, name: str, brand_ref_id: int
    ) -> Result[ModelResult | None, RepositoryError]:
        return await self._read(
            "find_by_name_and_brand",
            serialize_args({"name": name, "brand_ref_id": brand_ref_id}),
            lambda: self.inner.find_by_name_and_brand(name, brand_ref_id),
            codecs.entity(ModelResult),
        )

    async def create(self, data: ModelCreate) -> Result[ModelResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), self.own_pattern)
