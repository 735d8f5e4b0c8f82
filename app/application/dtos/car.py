"""DTOs for cars (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CarResult:
    """Car read-model. ``immat`` is the registration plate."""

    id: str
    immat: str
    model_id: str


@dataclass(frozen=True)
class CarCreate:
    immat: str
    model_id: str


@dataclass(frozen=True)
class CarUpdate:
    """Partial update; None fields are left unchanged."""

    immat: str | None = None
    model_id: str | None = None
