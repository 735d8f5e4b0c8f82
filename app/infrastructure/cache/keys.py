"""Cache key builders. Single place for key format (DRY).

Keys are ``<prefix><domain>:<method>:<args>``. Arguments that affect a read
must all be part of ``<args>`` so distinct queries never share an entry, and
identical arguments must always serialize the same way.
"""

import json
from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from typing import Any

from app.core.constants import CACHE_KEY_SEP

_NO_ARGS = "{}"


def _json_default(value: Any) -> Any:
    """JSON fallback for key arguments: dataclasses, dates, enums."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Cannot use {type(value).__name__} in a cache key")


def serialize_args(value: Any) -> str:
    """Serialize read arguments for the ``<args>`` key segment.

    Primitives are interpolated as-is, None becomes ``{}`` (no params), and
    anything else is compact JSON with sorted keys.
    """
    if value is None:
        return _NO_ARGS
    if isinstance(value, bool):
        return json.dumps(value)
    if isinstance(value, (str, int, float)):
        return str(value)
    return json.dumps(
        value, default=_json_default, sort_keys=True, separators=(",", ":")
    )


def composite_args(*parts: str | int) -> str:
    """Join primitive arguments as ``a:b`` (e.g. inscription id and user id)."""
    return CACHE_KEY_SEP.join(str(p) for p in parts)


def build_cache_key(prefix: str, domain: str, method: str, args: str) -> str:
    """Return ``<prefix><domain>:<method>:<args>``."""
    return f"{prefix}{domain}{CACHE_KEY_SEP}{method}{CACHE_KEY_SEP}{args}"


def domain_pattern(domain: str) -> str:
    """Glob pattern covering every key of a domain (unprefixed)."""
    return f"{domain}{CACHE_KEY_SEP}*"
