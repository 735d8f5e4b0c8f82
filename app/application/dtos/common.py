"""Shared DTOs for list reads: repository page envelope and offset window."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SkipTake:
    """Offset window passed to list reads (skip rows, then take at most ``take``)."""

    skip: int
    take: int


@dataclass(frozen=True)
class PageResult[T]:
    """One page of rows plus the total row count matching the query."""

    data: list[T] = field(default_factory=list)
    total: int = 0
