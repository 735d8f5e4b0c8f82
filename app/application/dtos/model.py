"""DTOs for car models (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelResult:
    """Car model read-model; belongs to one brand."""

    id: str
    ref_id: int
    name: str
    brand_ref_id: int


@dataclass(frozen=True)
class ModelCreate:
    name: str
    brand_ref_id: int
