"""Cache protocol for the repository layer (DIP). Redis implementation in redis_cache.py."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends (e.g. Redis). Injected into cached repositories.

    get/set/delete/delete_by_pattern may raise on backend failure; callers
    decide how to degrade (see app.infrastructure.cache.cache_aside).
    """

    async def get(self, key: str) -> Any | None:
        """Return the stored value or None when absent."""
        ...

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Store value with a TTL in seconds."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key from cache."""
        ...

    async def delete_by_pattern(self, pattern: str) -> None:
        """Remove every key matching a glob pattern (e.g. ``covoitapi:car:*``)."""
        ...

    async def is_healthy(self) -> bool:
        """Return True if the backend answers. Never raises."""
        ...
