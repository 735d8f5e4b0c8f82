"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Every method is async and returns ``Result[T, RepositoryError]``; expected
failures never raise. Plain and cached implementations are interchangeable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.auth import AuthCreate, AuthResult, RegisteredUser
    from app.application.dtos.brand import BrandCreate, BrandResult
    from app.application.dtos.car import CarCreate, CarResult, CarUpdate
    from app.application.dtos.city import CityCreate, CityResult
    from app.application.dtos.color import ColorCreate, ColorResult, ColorUpdate
    from app.application.dtos.common import PageResult, SkipTake
    from app.application.dtos.driver import DriverCreate, DriverResult
    from app.application.dtos.inscription import InscriptionCreate, InscriptionResult
    from app.application.dtos.model import ModelCreate, ModelResult
    from app.application.dtos.travel import TravelCreate, TravelResult
    from app.application.dtos.trip import TripCreate, TripFilters, TripResult
    from app.application.dtos.user import UserCreate, UserResult, UserUpdate
    from app.infrastructure.exceptions import RepositoryError
    from app.shared.result import Result


class IBrandRepository(Protocol):
    """Car brand catalog."""

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[BrandResult], RepositoryError]: ...

    async def find_by_id(self, id: str) -> Result[BrandResult | None, RepositoryError]: ...

    async def create(self, data: BrandCreate) -> Result[BrandResult, RepositoryError]: ...

    async def delete(self, id: str) -> Result[None, RepositoryError]: ...


class ICarRepository(Protocol):
    """Cars registered by drivers."""

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[CarResult], RepositoryError]: ...

    async def find_by_id(self, id: str) -> Result[CarResult | None, RepositoryError]: ...

    async def exists_by_immat(self, immat: str) -> Result[bool, RepositoryError]:
        """Return whether a car with this registration plate exists."""
        ...

    async def create(self, data: CarCreate) -> Result[CarResult, RepositoryError]: ...

    async def update(self, id: str, data: CarUpdate) -> Result[CarResult, RepositoryError]: ...

    async def delete(self, id: str) -> Result[None, RepositoryError]: ...


class ICityRepository(Protocol):
    """City catalog (trip stops)."""

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[CityResult], RepositoryError]: ...

    async def find_by_id(self, id: str) -> Result[CityResult | None, RepositoryError]: ...

    async def find_by_city_name(
        self, city_name: str
    ) -> Result[CityResult | None, RepositoryError]: ...

    async def create(self, data: CityCreate) -> Result[CityResult, RepositoryError]: ...

    async def delete(self, id: str) -> Result[None, RepositoryError]: ...


class IColorRepository(Protocol):
    """Car color catalog."""

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[ColorResult], RepositoryError]: ...

    async def find_by_id(self, id: str) -> Result[ColorResult | None, RepositoryError]: ...

    async def find_by_name(self, name: str) -> Result[ColorResult | None, RepositoryError]: ...

    async def create(self, data: ColorCreate) -> Result[ColorResult, RepositoryError]: ...

    async def update(
        self, id: str, data: ColorUpdate
    ) -> Result[ColorResult, RepositoryError]: ...

    async def delete(self, id: str) -> Result[None, RepositoryError]: ...


class IModelRepository(Protocol):
    """Car model catalog; each model belongs to one brand."""

    async def find_all(self) -> Result[list[ModelResult], RepositoryError]: ...

    async def find_by_id(self, id: str) -> Result[ModelResult | None, RepositoryError]: ...

    async def find_by_name_and_brand(
        self, name: str, brand_ref_id: int
    ) -> Result[ModelResult | None, RepositoryError]: ...

    async def create(self, data: ModelCreate) -> Result[ModelResult, RepositoryError]: ...


class IDriverRepository(Protocol):
    """Driver profiles (one per user at most)."""

    async def find_by_user_ref_id(
        self, user_ref_id: int
    ) -> Result[DriverResult | None, RepositoryError]: ...

    async def create(self, data: DriverCreate) -> Result[DriverResult, RepositoryError]: ...


class IUserRepository(Protocol):
    """Public user profiles."""

    async def find_all(self) -> Result[list[UserResult], RepositoryError]: ...

    async def find_by_id(self, id: str) -> Result[UserResult | None, RepositoryError]: ...

    async def find_by_auth_ref_id(
        self, auth_ref_id: int
    ) -> Result[UserResult | None, RepositoryError]: ...

    async def create(self, data: UserCreate) -> Result[UserResult, RepositoryError]: ...

    async def update(self, id: str, data: UserUpdate) -> Result[UserResult, RepositoryError]: ...

    async def delete(self, id: str) -> Result[None, RepositoryError]: ...

    async def anonymize(self, id: str) -> Result[None, RepositoryError]:
        """Scrub personal data of the user and its credentials, driver profile and inscriptions."""
        ...


class IAuthRepository(Protocol):
    """Credentials. Reads return password hashes and are never cached."""

    async def find_by_email(self, email: str) -> Result[AuthResult | None, RepositoryError]: ...

    async def exists_by_email(self, email: str) -> Result[bool, RepositoryError]: ...

    async def create_with_user(
        self, auth: AuthCreate, user: UserCreate
    ) -> Result[RegisteredUser, RepositoryError]:
        """Create credentials and the linked profile in one transaction."""
        ...

    async def update_role(self, ref_id: int, role: str) -> Result[None, RepositoryError]: ...


class ITripRepository(Protocol):
    """City-to-city trips."""

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[TripResult], RepositoryError]: ...

    async def find_by_id(self, id: str) -> Result[TripResult | None, RepositoryError]: ...

    async def find_by_filters(
        self, filters: TripFilters
    ) -> Result[list[TripResult], RepositoryError]: ...

    async def create(self, data: TripCreate) -> Result[TripResult, RepositoryError]: ...

    async def delete(self, id: str) -> Result[None, RepositoryError]: ...


class ITravelRepository(Protocol):
    """Trips under their legacy "travel" naming."""

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[TravelResult], RepositoryError]: ...

    async def find_by_id(self, id: str) -> Result[TravelResult | None, RepositoryError]: ...

    async def find_by_filters(
        self, filters: TripFilters
    ) -> Result[list[TravelResult], RepositoryError]: ...

    async def create(self, data: TravelCreate) -> Result[TravelResult, RepositoryError]: ...

    async def delete(self, id: str) -> Result[None, RepositoryError]: ...


class IInscriptionRepository(Protocol):
    """Seat bookings on trips."""

    async def find_all(
        self, params: SkipTake | None = None
    ) -> Result[PageResult[InscriptionResult], RepositoryError]: ...

    async def find_by_id(self, id: str) -> Result[InscriptionResult | None, RepositoryError]: ...

    async def find_by_user_ref_id(
        self, user_ref_id: int
    ) -> Result[list[InscriptionResult], RepositoryError]: ...

    async def find_by_trip_ref_id(
        self, trip_ref_id: int
    ) -> Result[list[InscriptionResult], RepositoryError]: ...

    async def find_by_user_id(
        self, user_id: str
    ) -> Result[list[InscriptionResult], RepositoryError]: ...

    async def find_by_trip_id(
        self, trip_id: str
    ) -> Result[list[InscriptionResult], RepositoryError]: ...

    async def find_by_id_and_user_id(
        self, id: str, user_id: str
    ) -> Result[InscriptionResult | None, RepositoryError]:
        """Return the inscription only when it belongs to user_id."""
        ...

    async def exists_by_user_and_trip(
        self, user_ref_id: int, trip_ref_id: int
    ) -> Result[bool, RepositoryError]: ...

    async def count_by_trip_ref_id(self, trip_ref_id: int) -> Result[int, RepositoryError]:
        """Return the number of seats already booked on the trip."""
        ...

    async def create(
        self, data: InscriptionCreate
    ) -> Result[InscriptionResult, RepositoryError]: ...

    async def delete(self, id: str) -> Result[None, RepositoryError]: ...


@dataclass
class RepositorySet:
    """One repository per entity, as handed to use cases by the composition root."""

    brand: IBrandRepository
    car: ICarRepository
    city: ICityRepository
    color: IColorRepository
    model: IModelRepository
    driver: IDriverRepository
    user: IUserRepository
    auth: IAuthRepository
    trip: ITripRepository
    travel: ITravelRepository
    inscription: IInscriptionRepository
