"""Cached auth repository.

Credential reads (password hashes) always go to the source; only writes
touch the cache, to drop auth and user entries derived from them.
"""

from app.application.dtos.auth import AuthCreate, AuthResult, RegisteredUser
from app.application.dtos.user import UserCreate
from app.application.interfaces.repositories import IAuthRepository
from app.core.constants import CACHE_DOMAIN_AUTH, CACHE_DOMAIN_USER
from app.infrastructure.cache.keys import domain_pattern
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result


class CachedAuthRepository(CachedRepository[IAuthRepository]):
    domain = CACHE_DOMAIN_AUTH

    async def find_by_email(self, email: str) -> Result[AuthResult | None, RepositoryError]:
        return await self.inner.find_by_email(email)

    async def exists_by_email(self, email: str) -> Result[bool, RepositoryError]:
        return await self.inner.exists_by_email(email)

    async def create_with_user(
        self, auth: AuthCreate, user: UserCreate
    ) -> Result[RegisteredUser, RepositoryError]:
        return await self._after_write(
            await self.inner.create_with_user(auth, user),
            self.own_pattern,
            domain_pattern(CACHE_DOMAIN_USER),
        )

    async def update_role(self, ref_id: int, role: str) -> Result[None, RepositoryError]:
        return await self._after_write(await self.inner.update_role(ref_id, role), self.own_pattern)
