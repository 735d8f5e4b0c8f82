"""Health check endpoints: liveness and cache backend status."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import get_cache, get_cache_config
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.config import CacheConfig
from app.schemas.health import CacheHealthResponse, HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/cache",
    response_model=CacheHealthResponse,
    responses={503: {"description": "Cache backend unreachable", "model": CacheHealthResponse}},
)
async def cache_health_check(
    cache: Annotated[CacheProtocol | None, Depends(get_cache)],
    config: Annotated[CacheConfig, Depends(get_cache_config)],
) -> CacheHealthResponse | JSONResponse:
    """Report whether the cache backend answers.

    A 503 here never means the API is down: reads fall through to the
    database while the cache is unavailable.
    """
    if cache is None or not config.enabled:
        return CacheHealthResponse(status="disabled", enabled=False, key_prefix=config.key_prefix)
    if await cache.is_healthy():
        return CacheHealthResponse(status="ok", enabled=True, key_prefix=config.key_prefix)
    return JSONResponse(
        status_code=503,
        content=CacheHealthResponse(
            status="unavailable", enabled=True, key_prefix=config.key_prefix
        ).model_dump(),
    )
