"""Cached user repository.

anonymize scrubs the user together with its credentials, driver profile and
inscriptions, so it invalidates all four namespaces.
"""

from app.application.dtos.user import UserCreate, UserResult, UserUpdate
from app.application.interfaces.repositories import IUserRepository
from app.core.constants import (
    CACHE_DOMAIN_AUTH,
    CACHE_DOMAIN_DRIVER,
    CACHE_DOMAIN_INSCRIPTION,
    CACHE_DOMAIN_USER,
)
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import domain_pattern, serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result

_ANONYMIZE_PATTERNS = (
    domain_pattern(CACHE_DOMAIN_USER),
    domain_pattern(CACHE_DOMAIN_AUTH),
    domain_pattern(CACHE_DOMAIN_DRIVER),
    domain_pattern(CACHE_DOMAIN_INSCRIPTION),
)


class CachedUserRepository(CachedRepository[IUserRepository]):
    """User profiles behind the cache."""

    domain = CACHE_DOMAIN_USER

    async def find_all(self) -> Result[list[UserResult], RepositoryError]:
        return await self._read(
            "find_all",
            serialize_args(None),
            lambda: self.inner.find_all(),
            codecs.entity_list(UserResult),
        )

    async def find_by_id(self, id: str) -> Result[UserResult | None, RepositoryError]:
        return await self._read(
            "find_by_id", id, lambda: self.inner.find_by_id(id), codecs.entity(UserResult)
        )

    async def find_by_auth_ref_id(
        self, auth_ref_id: int
    ) -> Result[UserResult | None, RepositoryError]:
        return await self._read(
            "find_by_auth_ref_id",
            serialize_args(auth_ref_id),
            lambda: self.inner.find_by_auth_ref_id(auth_ref_id),
            codecs.entity(UserResult),
        )

    async def create(self, data: UserCreate) -> Result[UserResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), self.own_pattern)

    async def update(self, id: str, data: UserUpdate) -> Result[UserResult, RepositoryError]:
        return await self._after_write(await self.inner.update(id, data), self.own_pattern)

    async def delete(self, id: str) -> Result[None, RepositoryError]:
        return await self._after_write(await self.inner.delete(id), self.own_pattern)

    async def anonymize(self, id: str) -> Result[None, RepositoryError]:
        return await self._after_write(await self.inner.anonymize(id), *_ANONYMIZE_PATTERNS)
