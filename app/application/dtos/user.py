"""DTOs for user profiles (no dependency on ORM). Credentials live in auth DTOs."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """Public user read-model (never carries a password)."""

    id: str
    ref_id: int
    first_name: str
    last_name: str
    phone: str
    auth_ref_id: int
    created_at: datetime
    updated_at: datetime
    anonymized_at: datetime | None = None


@dataclass(frozen=True)
class UserCreate:
    first_name: str
    last_name: str
    phone: str
    auth_ref_id: int


@dataclass(frozen=True)
class UserUpdate:
    """Partial profile update; None fields are left unchanged."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
