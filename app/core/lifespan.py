"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (logging, cache).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.cache.config import create_cache_config
from app.infrastructure.exceptions import CacheConnectionError
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, cache config, Redis cache (if enabled). A Redis outage at
    startup is not fatal: the service stays unconnected, cache calls fail fast
    until the retry interval passes, and the cache-aside layer serves source reads.
    Shutdown: cache disconnect.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.cache_config = create_cache_config(settings)

    if settings.redis_enabled:
        from app.infrastructure.cache.redis_cache import RedisCacheService

        cache = RedisCacheService(settings=settings)
        try:
            await cache.connect()
        except CacheConnectionError as e:
            logger.warning("Redis connection failed: %s. Serving reads from source.", e.cause)
        app.state.cache = cache
    else:
        app.state.cache = None

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        app.state.cache = None
        logger.info("Cache disconnected")
