"""DTOs for car brands (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BrandResult:
    """Brand read-model."""

    id: str
    ref_id: int
    name: str


@dataclass(frozen=True)
class BrandCreate:
    name: str
