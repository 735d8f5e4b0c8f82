"""Base cached repository: cache-aside reads and post-write invalidation.

Subclasses implement one repository protocol by delegating to ``inner``,
routing reads through _read and writes through _after_write. Each subclass
owns one domain label (key namespace and default invalidation pattern).
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from app.infrastructure.cache.cache_aside import cache_aside, invalidate_patterns
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.config import CacheConfig
from app.infrastructure.cache.keys import build_cache_key, domain_pattern
from app.shared.result import Ok, Result


class CachedRepository[RepoType]:
    """Decorator base over an uncached repository.

    LSP: a subclass is substitutable for the inner repository it wraps. With
    ``config.enabled`` False it is a pure passthrough (no cache calls at all).
    """

    domain: str = ""

    def __init__(
        self,
        inner: RepoType,
        cache: CacheProtocol,
        config: CacheConfig,
        logger: logging.Logger | None = None,
    ) -> None:
        if not self.domain:
            raise TypeError(f"{type(self).__name__} must set a cache domain")
        self.inner = inner
        self.cache = cache
        self.config = config
        self.ttl = config.ttl.for_domain(self.domain)
        self.logger = logger or logging.getLogger(f"{__name__}.{type(self).__name__}")

    @property
    def own_pattern(self) -> str:
        """Invalidation pattern covering this repository's keys."""
        return domain_pattern(self.domain)

    def _key(self, method: str, args: str) -> str:
        return build_cache_key(self.config.key_prefix, self.domain, method, args)

    async def _read[T, E](
        self,
        method: str,
        args: str,
        source: Callable[[], Awaitable[Result[T, E]]],
        decode: Callable[[Any], T] | None = None,
    ) -> Result[T, E]:
        """Serve a read through the cache (or straight from source when disabled)."""
        if not self.config.enabled:
            return await source()
        return await cache_aside(
            self.cache, self._key(method, args), self.ttl, source, self.logger, decode=decode
        )

    async def _after_write[T, E](self, result: Result[T, E], *patterns: str) -> Result[T, E]:
        """Invalidate patterns when the write succeeded; return result untouched."""
        if self.config.enabled and isinstance(result, Ok):
            await invalidate_patterns(self.cache, self.config.key_prefix, patterns, self.logger)
        return result
