"""DTOs for cities (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CityResult:
    """City read-model."""

    id: str
    ref_id: int
    city_name: str
    zipcode: str


@dataclass(frozen=True)
class CityCreate:
    city_name: str
    zipcode: str
