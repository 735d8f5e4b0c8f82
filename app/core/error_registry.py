"""Error code registry: error code -> HTTP status and category.

Single source of truth for error-to-HTTP translation, used by
result_to_response and the exception handlers. Unknown codes resolve to
INTERNAL_ERROR (500) instead of failing the mapping.
"""

from dataclasses import dataclass
from typing import Literal

ErrorCategory = Literal["domain", "application", "infrastructure", "auth", "system"]


@dataclass(frozen=True)
class ErrorDefinition:
    """One registry entry."""

    code: str
    http_status: int
    category: ErrorCategory


def _define(code: str, http_status: int, category: ErrorCategory) -> tuple[str, ErrorDefinition]:
    return code, ErrorDefinition(code, http_status, category)


ERROR_CODES: dict[str, ErrorDefinition] = dict(
    [
        # Domain: business rule violations
        _define("USER_ALREADY_EXISTS", 409, "domain"),
        _define("INVALID_CREDENTIALS", 401, "domain"),
        _define("USER_NOT_FOUND", 404, "domain"),
        _define("BRAND_NOT_FOUND", 404, "domain"),
        _define("CITY_NOT_FOUND", 404, "domain"),
        _define("CAR_NOT_FOUND", 404, "domain"),
        _define("CAR_ALREADY_EXISTS", 409, "domain"),
        _define("DRIVER_NOT_FOUND", 404, "domain"),
        _define("DRIVER_ALREADY_EXISTS", 409, "domain"),
        _define("TRIP_NOT_FOUND", 404, "domain"),
        _define("TRAVEL_NOT_FOUND", 404, "domain"),
        _define("INSCRIPTION_NOT_FOUND", 404, "domain"),
        _define("ALREADY_INSCRIBED", 409, "domain"),
        _define("NO_SEATS_AVAILABLE", 400, "domain"),
        _define("COLOR_NOT_FOUND", 404, "domain"),
        _define("COLOR_ALREADY_EXISTS", 409, "domain"),
        _define("VALIDATION_ERROR", 422, "application"),
        # Infrastructure: external dependency failures
        _define("RELATION_CONSTRAINT", 409, "infrastructure"),
        _define("DATABASE_ERROR", 500, "infrastructure"),
        _define("CONNECTION_ERROR", 500, "infrastructure"),
        _define("CACHE_CONNECTION_ERROR", 502, "infrastructure"),
        _define("CACHE_OPERATION_ERROR", 500, "infrastructure"),
        _define("EXTERNAL_SERVICE_ERROR", 502, "infrastructure"),
        _define("HASHING_FAILED", 500, "infrastructure"),
        _define("TOKEN_SIGNING_FAILED", 500, "infrastructure"),
        # Auth
        _define("UNAUTHORIZED", 401, "auth"),
        _define("FORBIDDEN", 403, "auth"),
        _define("TOKEN_EXPIRED", 401, "auth"),
        _define("TOKEN_INVALID", 401, "auth"),
        _define("TOKEN_MALFORMED", 400, "auth"),
        # System
        _define("INTERNAL_ERROR", 500, "system"),
        _define("SERVICE_UNAVAILABLE", 503, "system"),
    ]
)

_FALLBACK = ERROR_CODES["INTERNAL_ERROR"]


def get_error_definition(code: str) -> ErrorDefinition:
    """Return the registry entry for code, or INTERNAL_ERROR when unknown."""
    return ERROR_CODES.get(code, _FALLBACK)


def get_http_status(code: str) -> int:
    """Return the HTTP status for an error code (500 when unknown)."""
    return get_error_definition(code).http_status


def is_error_code(code: str) -> bool:
    """Return True if code is registered."""
    return code in ERROR_CODES
