"""Pagination helpers for list reads: page/limit <-> skip/take and response meta."""

from math import ceil

from pydantic import BaseModel, Field

from app.application.dtos.common import PageResult, SkipTake
from app.core.constants import (
    PAGINATION_DEFAULT_LIMIT,
    PAGINATION_DEFAULT_PAGE,
    PAGINATION_MAX_LIMIT,
)


class PaginationParams(BaseModel):
    """Validated ``page``/``limit`` query parameters (query strings are coerced)."""

    page: int = Field(default=PAGINATION_DEFAULT_PAGE, ge=1)
    limit: int = Field(default=PAGINATION_DEFAULT_LIMIT, ge=1, le=PAGINATION_MAX_LIMIT)


class PaginationMeta(BaseModel):
    """Page meta; serialized as ``{page, limit, total, totalPages}``."""

    page: int
    limit: int
    total: int
    total_pages: int = Field(serialization_alias="totalPages")


class PaginatedResponse[T](BaseModel):
    """List response envelope: one page of items plus pagination meta."""

    data: list[T]
    meta: PaginationMeta


def to_skip_take(params: PaginationParams) -> SkipTake:
    """Convert page/limit to the offset window repositories take.

    Example: page=3, limit=20 -> SkipTake(skip=40, take=20).
    """
    return SkipTake(skip=(params.page - 1) * params.limit, take=params.limit)


def build_pagination_meta(params: PaginationParams, total: int) -> PaginationMeta:
    """Build meta; total_pages is ceil(total / limit), 0 when there are no rows."""
    return PaginationMeta(
        page=params.page,
        limit=params.limit,
        total=total,
        total_pages=ceil(total / params.limit) if total > 0 else 0,
    )


def paginate[T](page: PageResult[T], params: PaginationParams) -> PaginatedResponse[T]:
    """Build the list response for a repository page."""
    return PaginatedResponse(data=page.data, meta=build_pagination_meta(params, page.total))
