"""DTOs for trip inscriptions (seat bookings)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class InscriptionResult:
    """Inscription read-model."""

    id: str
    ref_id: int
    created_at: datetime
    user_ref_id: int
    trip_ref_id: int
    status: str


@dataclass(frozen=True)
class InscriptionCreate:
    user_ref_id: int
    trip_ref_id: int
