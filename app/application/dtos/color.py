"""DTOs for car colors (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorResult:
    """Color read-model. ``hex`` is ``#RRGGBB``."""

    id: str
    ref_id: int
    name: str
    hex: str


@dataclass(frozen=True)
class ColorCreate:
    name: str
    hex: str


@dataclass(frozen=True)
class ColorUpdate:
    name: str | None = None
    hex: str | None = None
