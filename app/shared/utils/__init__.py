"""Shared utilities: pagination, Result-to-HTTP mapping."""

from app.shared.utils.pagination import (
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
    build_pagination_meta,
    paginate,
    to_skip_take,
)
from app.shared.utils.result_response import result_to_response

__all__ = [
    "PaginatedResponse",
    "PaginationMeta",
    "PaginationParams",
    "build_pagination_meta",
    "paginate",
    "result_to_response",
    "to_skip_take",
]
