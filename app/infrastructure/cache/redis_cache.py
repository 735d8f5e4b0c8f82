"""Redis-based cache service backing the cache-aside repositories.

Provides async Redis caching with TTL support and pattern invalidation.
Unlike a best-effort cache, it raises CacheConnectionError /
CacheOperationError on failure; the cache-aside layer owns the degrade
policy (log and fall through to the source of truth).
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from typing import Any

import redis.asyncio as redis

from app.core.config import Settings, get_settings
from app.infrastructure.exceptions import CacheConnectionError, CacheOperationError

logger = logging.getLogger(__name__)

_UNLINK_CHUNK_SIZE = 500


def _json_default(value: Any) -> Any:
    """Encode DTOs and the types they carry (dataclass, datetime/date, Enum)."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_value(value: Any) -> str:
    """Serialize a cache value to JSON."""
    return json.dumps(value, default=_json_default, separators=(",", ":"))


class RedisCacheService:
    """Async Redis cache service (implements CacheProtocol).

    Uses app.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown. Connecting is serialized by a
    lock so concurrent callers share one client. After a failed connect
    the service is unavailable for ``redis_retry_interval`` seconds: calls
    raise CacheConnectionError without dialing Redis.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize cache service.

        Args:
            redis_client: Optional Redis client for testing or DI.
            settings: Optional settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()
        self._lock = asyncio.Lock()
        self._retry_after = 0.0

    def is_available(self) -> bool:
        """True when connected or when a new connection attempt is allowed."""
        return self.redis is not None or time.monotonic() >= self._retry_after

    async def connect(self) -> None:
        """Establish the Redis connection. Call on app startup.

        Raises:
            CacheConnectionError: If Redis does not answer PING, or a previous
                attempt failed less than ``redis_retry_interval`` seconds ago.
        """
        async with self._lock:
            await self._connect_locked()

    async def _connect_locked(self) -> redis.Redis:
        if self.redis is not None:
            return self.redis
        if not self.is_available():
            raise CacheConnectionError()
        password = self.settings.redis_password
        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=password.get_secret_value() if password else None,
            decode_responses=True,
            socket_connect_timeout=self.settings.redis_socket_timeout,
            socket_timeout=self.settings.redis_socket_timeout,
            socket_keepalive=True,
        )
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            await client.aclose()
            self._retry_after = time.monotonic() + self.settings.redis_retry_interval
            raise CacheConnectionError(e) from e
        self._retry_after = 0.0
        self.redis = client
        logger.info(
            "Redis cache connected: %s:%s", self.settings.redis_host, self.settings.redis_port
        )
        return client

    async def disconnect(self) -> None:
        """Close the Redis connection. Call on app shutdown."""
        async with self._lock:
            if self.redis is not None:
                await self.redis.aclose()
                self.redis = None
                logger.info("Redis cache disconnected")

    async def _reconnect(self, stale: redis.Redis) -> redis.Redis:
        """Replace a client that lost its connection (raises CacheConnectionError).

        If another caller already replaced ``stale``, its client is reused.
        """
        async with self._lock:
            if self.redis is stale:
                self.redis = None
                try:
                    await stale.aclose()
                except redis.RedisError:
                    logger.debug("Ignoring error while closing stale Redis client")
            return await self._connect_locked()

    async def _client(self) -> redis.Redis:
        if self.redis is not None:
            return self.redis
        async with self._lock:
            return await self._connect_locked()

    async def _run(
        self, operation: str, fn: Callable[[redis.Redis], Awaitable[Any]]
    ) -> Any:
        """Run fn(client), retrying once after a reconnect on connection loss."""
        client = await self._client()
        try:
            return await fn(client)
        except (redis.ConnectionError, redis.TimeoutError):
            logger.warning("Redis %s lost connection, reconnecting", operation)
        except redis.RedisError as e:
            raise CacheOperationError(operation, e) from e
        client = await self._reconnect(client)
        try:
            return await fn(client)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise CacheConnectionError(e) from e
        except redis.RedisError as e:
            raise CacheOperationError(operation, e) from e

    async def get(self, key: str) -> Any | None:
        """Return the JSON-decoded value, or None if missing or undecodable."""
        raw = await self._run("get", lambda c: c.get(key))
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Cache entry is not valid JSON, treating as miss: %s", key)
            return None

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Store value (JSON-encoded) with SETEX.

        Raises:
            CacheOperationError: If value cannot be JSON-encoded or SETEX fails.
        """
        try:
            serialized = encode_value(value)
        except (TypeError, ValueError) as e:
            raise CacheOperationError("set", e) from e
        await self._run("set", lambda c: c.setex(key, ttl, serialized))
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    async def delete(self, key: str) -> None:
        await self._run("delete", lambda c: c.delete(key))
        logger.debug("Cache DELETE: %s", key)

    async def delete_by_pattern(self, pattern: str) -> None:
        """Delete all keys matching pattern using SCAN + batched UNLINK (non-blocking).

        Uses scan_iter to avoid KEYS blocking; collects keys in chunks and
        UNLINKs each chunk to minimize round-trips and keep deletion async on server.

        Args:
            pattern: Redis SCAN match pattern (e.g. covoitapi:car:*).
        """
        deleted = await self._run("delete_by_pattern", lambda c: _scan_unlink(c, pattern))
        if deleted > 0:
            logger.info("Cache INVALIDATE: %s (%s keys)", pattern, deleted)

    async def is_healthy(self) -> bool:
        """Return True if Redis answers PING. Never raises."""
        if self.redis is None:
            return False
        try:
            return bool(await self.redis.ping())
        except redis.RedisError:
            return False


async def _scan_unlink(client: redis.Redis, pattern: str) -> int:
    deleted = 0
    chunk: list[str] = []
    async for key in client.scan_iter(match=pattern):
        chunk.append(key)
        if len(chunk) >= _UNLINK_CHUNK_SIZE:
            deleted += await _unlink(client, chunk)
            chunk = []
    if chunk:
        deleted += await _unlink(client, chunk)
    return deleted


async def _unlink(client: redis.Redis, keys: list[str]) -> int:
    async with client.pipeline(transaction=False) as pipe:
        pipe.unlink(*keys)
        results = await pipe.execute()
    return sum(int(r or 0) for r in results)
