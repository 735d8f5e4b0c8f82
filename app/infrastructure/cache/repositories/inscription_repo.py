"""Cached inscription repository.

Inscriptions change trip seat availability and passenger lists, so every
write invalidates both ``inscription:*`` and ``trip:*``.
"""

from app.application.dtos.common import PageResult, SkipTake
from app.application.dtos.inscription import InscriptionCreate, InscriptionResult
from app.application.interfaces.repositories import IInscriptionRepository
from app.core.constants import CACHE_DOMAIN_INSCRIPTION, CACHE_DOMAIN_TRIP
from app.infrastructure.cache import codecs
from app.infrastructure.cache.keys import composite_args, domain_pattern, serialize_args
from app.infrastructure.cache.repositories.base import CachedRepository
from app.infrastructure.exceptions import RepositoryError
from app.shared.result import Result

_WRITE_PATTERNS = (
    domain_pattern(CACHE_DOMAIN_INSCRIPTION),
    domain_pattern(CACHE_DOMAIN_TRIP),
)

_decode_one = codecs.entity(InscriptionResult)
_decode_many = codecs.entity_list(InscriptionResult)


class CachedInscriptionRepository(CachedRepository[IInscriptionRepository]):
    domain = CACHE_DOMAIN_INSCRIPTION

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[InscriptionResult], RepositoryError]:
        return await self._read(
            "find_all",
            serialize_args(params),
            lambda: self.inner.find_all(params),
            codecs.page(InscriptionResult),
        )

    async def find_by_id(self, id: str) -> Result[InscriptionResult | None, RepositoryError]:
        return await self._read("find_by_id", id, lambda: self.inner.find_by_id(id), _decode_one)

    async def find_by_user_ref_id(
        self, user_ref_id: int
    ) -> Result[list[InscriptionResult], RepositoryError]:
        return await self._read(
            "find_by_user_ref_id",
            serialize_args(user_ref_id),
            lambda: self.inner.find_by_user_ref_id(user_ref_id),
            _decode_many,
        )

    async def find_by_trip_ref_id(
        self, trip_ref_id: int
    ) -> Result[list[InscriptionResult], RepositoryError]:
        return await self._read(
            "find_by_trip_ref_id",
            serialize_args(trip_ref_id),
            lambda: self.inner.find_by_trip_ref_id(trip_ref_id),
            _decode_many,
        )

    async def find_by_user_id(
        self, user_id: str
    ) -> Result[list[InscriptionResult], RepositoryError]:
        return await self._read(
            "find_by_user_id", user_id, lambda: self.inner.find_by_user_id(user_id), _decode_many
        )

    async def find_by_trip_id(
        self, trip_id: str
    ) -> Result[list[InscriptionResult], RepositoryError]:
        return await self._read(
            "find_by_trip_id", trip_id, lambda: self.inner.find_by_trip_id(trip_id), _decode_many
        )

    async def find_by_id_and_user_id(
        self, id: str, user_id: str
    ) -> Result[InscriptionResult | None, RepositoryError]:
        return await self._read(
            "find_by_id_and_user_id",
            composite_args(id, user_id),
            lambda: self.inner.find_by_id_and_user_id(id, user_id),
            _decode_one,
        )

    async def exists_by_user_and_trip(
        self, user_ref_id: int, trip_ref_id: int
    ) -> Result[bool, RepositoryError]:
        return await self._read(
            "exists_by_user_and_trip",
            serialize_args({"user_ref_id": user_ref_id, "trip_ref_id": trip_ref_id}),
            lambda: self.inner.exists_by_user_and_trip(user_ref_id, trip_ref_id),
        )

    async def count_by_trip_ref_id(self, trip_ref_id: int) -> Result[int, RepositoryError]:
        return await self._read(
            "count_by_trip_ref_id",
            serialize_args(trip_ref_id),
            lambda: self.inner.count_by_trip_ref_id(trip_ref_id),
        )

    async def create(self, data: InscriptionCreate) -> Result[InscriptionResult, RepositoryError]:
        return await self._after_write(await self.inner.create(data), *_WRITE_PATTERNS)

    async def delete(self, id: str) -> Result[None, RepositoryError]:
        return await self._after_write(await self.inner.delete(id), *_WRITE_PATTERNS)
