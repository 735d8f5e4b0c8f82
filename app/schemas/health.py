"""Health check API schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class CacheHealthResponse(BaseModel):
    """Response for GET /health/cache."""

    status: Literal["ok", "disabled", "unavailable"] = Field(
        ..., description="ok: Redis answers; disabled: caching off; unavailable: Redis down"
    )
    enabled: bool = Field(..., description="Whether cached repositories use the cache")
    key_prefix: str = Field(..., description="Prefix of every cache key")
