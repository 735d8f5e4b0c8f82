"""Infrastructure exceptions for persistence and cache operations.

They extend CovoitException so presentation can map them to HTTP responses
consistently. Repository errors travel inside ``Err(...)``; cache errors are
raised by cache backends and absorbed by the cache-aside layer.
"""

from app.domain.exceptions import CovoitException


class InfrastructureError(CovoitException):
    """Failure of an external dependency (database, cache).

    Attributes:
        cause: The underlying exception, if any.
    """

    def __init__(self, message: str, code: str, cause: BaseException | None = None) -> None:
        super().__init__(message, code)
        self.cause = cause


class RepositoryError(InfrastructureError):
    """Base class for repository-level errors."""


class DatabaseError(RepositoryError):
    """A database query or mutation failed."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message, "DATABASE_ERROR", cause)


class DatabaseConnectionError(RepositoryError):
    """The database connection itself failed."""

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__("Database connection failed", "CONNECTION_ERROR", cause)


class RelationConstraintError(RepositoryError):
    """Delete refused because other records still reference the row."""

    def __init__(self, entity: str, cause: BaseException | None = None) -> None:
        super().__init__(
            f"Cannot delete {entity} because it is still referenced by other records",
            "RELATION_CONSTRAINT",
            cause,
        )


class CacheError(InfrastructureError):
    """Base class for cache backend errors."""


class CacheConnectionError(CacheError):
    """Cache backend unreachable."""

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__("Cache connection failed", "CACHE_CONNECTION_ERROR", cause)


class CacheOperationError(CacheError):
    """A cache get/set/delete failed."""

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        super().__init__(f"Cache operation failed: {operation}", "CACHE_OPERATION_ERROR", cause)
        self.operation = operation
