"""Pydantic API schemas."""

from app.schemas.health import CacheHealthResponse, HealthResponse

__all__ = ["CacheHealthResponse", "HealthResponse"]
