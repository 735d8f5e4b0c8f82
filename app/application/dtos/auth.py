"""DTOs for credentials (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.application.dtos.user import UserResult


@dataclass(frozen=True)
class AuthResult:
    """Credential record. ``password`` is the stored hash, never plaintext."""

    id: str
    ref_id: int
    email: str
    password: str
    role: str
    created_at: datetime
    updated_at: datetime
    anonymized_at: datetime | None = None


@dataclass(frozen=True)
class AuthCreate:
    email: str
    password: str


@dataclass(frozen=True)
class RegisteredUser:
    """Result of creating credentials and the linked profile in one transaction."""

    auth: AuthResult
    user: UserResult
