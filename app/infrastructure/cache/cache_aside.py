"""Cache-aside read helper and write-side invalidation shared by cached repositories.

Cache failures are logged and absorbed here: a cache outage makes reads
slower and invalidation late, never wrong and never failing. Only successful
source results are cached, wrapped as ``{"__cached": True, "data": value}`` so
a cached None is distinguishable from a miss.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from app.core.constants import CACHE_WRAPPER_DATA, CACHE_WRAPPER_FLAG
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.shared.result import Ok, Result, ok

_MISS = object()


def wrap_cached(value: Any) -> dict[str, Any]:
    """Return the stored form of a successful read."""
    return {CACHE_WRAPPER_FLAG: True, CACHE_WRAPPER_DATA: value}


def is_cache_wrapper(value: Any) -> bool:
    """True only for ``{"__cached": True, "data": ...}``; anything else is a miss."""
    return (
        isinstance(value, dict)
        and value.get(CACHE_WRAPPER_FLAG) is True
        and CACHE_WRAPPER_DATA in value
    )


async def _read_cached[T](
    cache: CacheProtocol,
    key: str,
    logger: logging.Logger,
    decode: Callable[[Any], T] | None,
) -> T | object:
    """Return the cached data for key, or _MISS."""
    try:
        stored = await cache.get(key)
    except Exception as e:
        logger.warning("Cache read failed, falling through to source: %s (%s)", key, e)
        return _MISS
    if not is_cache_wrapper(stored):
        return _MISS
    data = stored[CACHE_WRAPPER_DATA]
    if decode is not None and data is not None:
        try:
            data = decode(data)
        except (TypeError, ValueError, KeyError) as e:
            logger.warning("Cache entry has an unexpected shape, ignoring: %s (%s)", key, e)
            return _MISS
    logger.debug("Cache hit: %s", key)
    return data


async def cache_aside[T, E](
    cache: CacheProtocol,
    key: str,
    ttl: int,
    source: Callable[[], Awaitable[Result[T, E]]],
    logger: logging.Logger,
    *,
    decode: Callable[[Any], T] | None = None,
) -> Result[T, E]:
    """Read through the cache: return a cached value or call source and cache its success.

    Args:
        cache: Cache backend.
        key: Full cache key (see app.infrastructure.cache.keys).
        ttl: Time-to-live in seconds for a freshly cached value.
        source: Fallible read against the source of truth.
        logger: Receives hit (DEBUG) and degradation (WARNING) messages.
        decode: Optional rehydration of cached data (e.g. dict -> DTO);
            failures make the entry count as a miss.

    Returns:
        ``ok(cached)`` on a hit; otherwise the source result unchanged.
    """
    cached = await _read_cached(cache, key, logger, decode)
    if cached is not _MISS:
        return ok(cached)

    result = await source()
    if isinstance(result, Ok):
        try:
            await cache.set(key, wrap_cached(result.value), ttl)
        except Exception as e:
            logger.warning("Cache write failed: %s (%s)", key, e)
    return result


async def invalidate_patterns(
    cache: CacheProtocol,
    prefix: str,
    patterns: Iterable[str],
    logger: logging.Logger,
) -> None:
    """Delete every key matching each ``prefix + pattern``. Never raises.

    Each pattern is attempted even when an earlier one fails.
    """
    for pattern in patterns:
        full_pattern = f"{prefix}{pattern}"
        try:
            await cache.delete_by_pattern(full_pattern)
        except Exception as e:
            logger.warning("Cache invalidation failed: %s (%s)", full_pattern, e)
