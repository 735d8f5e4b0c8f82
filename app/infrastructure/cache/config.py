"""Cache-aside configuration: on/off switch, key prefix and per-domain TTLs.

Built once from Settings at startup (or per test) and read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.core.config import Settings


@dataclass(frozen=True)
class CacheTTLConfig:
    """TTL in seconds per cache domain."""

    brand: int = 3600
    color: int = 3600
    model: int = 1800
    city: int = 1800
    car: int = 600
    driver: int = 600
    user: int = 300
    auth: int = 300
    trip: int = 300
    travel: int = 300
    inscription: int = 120

    def for_domain(self, domain: str) -> int:
        """Return the TTL for a domain label.

        Raises:
            KeyError: If the domain has no configured TTL.
        """
        if domain not in {f.name for f in fields(self)}:
            raise KeyError(f"No cache TTL configured for domain {domain!r}")
        return getattr(self, domain)


@dataclass(frozen=True)
class CacheConfig:
    """Cache-aside settings shared by every cached repository.

    When ``enabled`` is False, cached repositories call the inner repository
    directly and never touch the cache backend.
    """

    enabled: bool = True
    key_prefix: str = "covoitapi:"
    ttl: CacheTTLConfig = field(default_factory=CacheTTLConfig)


def create_cache_config(settings: Settings) -> CacheConfig:
    """Build CacheConfig from application settings (CACHE_* env vars)."""
    ttl = CacheTTLConfig(
        **{f.name: getattr(settings, f"cache_ttl_{f.name}") for f in fields(CacheTTLConfig)}
    )
    return CacheConfig(
        enabled=settings.cache_enabled,
        key_prefix=settings.cache_key_prefix,
        ttl=ttl,
    )
