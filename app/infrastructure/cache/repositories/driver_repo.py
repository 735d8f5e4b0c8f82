"""Cached driver repository."""

from app.application.dtos.driver import DriverCreate, DriverResult
from app.application.interfaces.repositories import IDriverRepository
from app.core.constants import CACHE_DOMAIN_DRIVER
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result


class CachedDriverRepository(CachedRepository[IDriverRepository]):
    domain = CACHE_DOMAIN_DRIVER

    async def find_by_user_ref_id(
        self, user_ref_id: int
    ) -> Result[DriverResult | None, RepositoryError]:
        return await self._read(
            "find_by_user_ref_id",
            serialize_args(user_ref_id),
            lambda: self.inner.find_by_user_ref_id(user_ref_id),
            codecs.entity(DriverResult),
        )

    async def create(self, data: DriverCreate) -> Result[DriverResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), self.own_pattern)
