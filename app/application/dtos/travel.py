"""DTOs for travels: the route-era naming of trips still served by the legacy API."""

from dataclasses import dataclass, field
from datetime import datetime

from app.application.dtos.trip import TripFilters

TravelFilters = TripFilters


@dataclass(frozen=True)
class TravelResult:
    id: str
    ref_id: int
    date_route: datetime
    kms: int
    seats: int
    driver_ref_id: int
    car_ref_id: int


@dataclass(frozen=True)
class TravelCreate:
    date_route: datetime
    kms: int
    seats: int
    driver_ref_id: int
    car_ref_id: int
    city_ref_ids: list[int] = field(default_factory=list)
