"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Cache TTLs are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import CACHE_DOMAINS


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every field has a default; cache TTLs (seconds) must be positive.
    """

    # App
    app_name: str = "covoit-api"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Redis
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_socket_timeout: float = 5.0
    # Seconds to wait before dialing again after a failed connect
    redis_retry_interval: float = 5.0

    # Cache-aside layer (keys are "<prefix><domain>:<method>:<args>")
    cache_enabled: bool = True
    cache_key_prefix: str = "covoitapi:"
    cache_ttl_brand: int = 3600
    cache_ttl_color: int = 3600
    cache_ttl_model: int = 1800
    cache_ttl_city: int = 1800
    cache_ttl_car: int = 600
    cache_ttl_driver: int = 600
    cache_ttl_user: int = 300
    cache_ttl_auth: int = 300
    cache_ttl_trip: int = 300
    cache_ttl_travel: int = 300
    cache_ttl_inscription: int = 120

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_cache_ttls(self) -> "Settings":
        """Reject non-positive cache TTLs (Redis SETEX requires ttl >= 1)."""
        for domain in CACHE_DOMAINS:
            ttl = getattr(self, f"cache_ttl_{domain}")
            if ttl <= 0:
                raise ValueError(
                    f"CACHE_TTL_{domain.upper()} must be a positive number of seconds, got {ttl}"
                )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.
    """
    return Settings()
