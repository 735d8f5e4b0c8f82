"""DTOs for city-to-city trips (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class TripResult:
    """Trip read-model."""

    id: str
    ref_id: int
    date_trip: datetime
    kms: int
    seats: int
    driver_ref_id: int
    car_ref_id: int


@dataclass(frozen=True)
class TripCreate:
    """New trip; ``city_ref_ids`` lists departure first and arrival last."""

    date_trip: datetime
    kms: int
    seats: int
    driver_ref_id: int
    car_ref_id: int
    city_ref_ids: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class TripFilters:
    """Search filters; None means "any"."""

    departure_city: str | None = None
    arrival_city: str | None = None
    trip_date: date | None = None
