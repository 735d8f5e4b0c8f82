"""DTOs for driver profiles (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DriverResult:
    """Driver read-model. ``anonymized_at`` is set once the owning user is anonymized."""

    id: str
    driver_license: str
    user_ref_id: int
    anonymized_at: datetime | None = None


@dataclass(frozen=True)
class DriverCreate:
    driver_license: str
    user_ref_id: int
