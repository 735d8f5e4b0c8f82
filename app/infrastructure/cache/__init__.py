"""Cache: Redis service, cache-aside helpers, key format and cached repositories.

Cached repositories wrap the plain ones (same interface); reads go through
cache_aside, writes trigger invalidate_patterns. Key format is in keys.py (DRY).
"""

from app.infrastructure.cache.cache_aside import cache_aside, invalidate_patterns
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.config import CacheConfig, CacheTTLConfig, create_cache_config
from app.infrastructure.cache.keys import (
    build_cache_key,
    composite_args,
    domain_pattern,
    serialize_args,
)
from app.infrastructure.cache.redis_cache import RedisCacheService

__all__ = [
    "CacheConfig",
    "CacheProtocol",
    "CacheTTLConfig",
    "RedisCacheService",
    "build_cache_key",
    "cache_aside",
    "composite_args",
    "create_cache_config",
    "domain_pattern",
    "invalidate_patterns",
    "serialize_args",
]
