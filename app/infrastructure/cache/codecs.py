"""Rehydrate cached DTOs after a JSON round trip through the cache backend.

Cached values come back as plain dicts with ISO-8601 dates; these decoders
rebuild the frozen dataclasses repositories return. A payload that does not
fit the DTO raises TypeError/ValueError, which cache_aside treats as a miss.
"""

from collections.abc import Callable
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from functools import cache
from types import UnionType
from typing import Any, Union, get_args, get_origin, get_type_hints

from app.application.dtos.common import PageResult


def _temporal_type(tp: Any) -> type | None:
    """Return datetime/date if tp is (optionally) one of them."""
    if get_origin(tp) in (Union, UnionType):
        for arg in get_args(tp):
            found = _temporal_type(arg)
            if found is not None:
                return found
        return None
    if tp is datetime or tp is date:
        return tp
    return None


@cache
def _temporal_fields(cls: type) -> dict[str, type]:
    hints = get_type_hints(cls)
    out: dict[str, type] = {}
    for f in fields(cls):
        temporal = _temporal_type(hints.get(f.name))
        if temporal is not None:
            out[f.name] = temporal
    return out


def _build[T](cls: type[T], data: Any) -> T:
    if isinstance(data, cls):
        return data
    if not isinstance(data, dict):
        raise TypeError(f"Expected a mapping for {cls.__name__}, got {type(data).__name__}")
    values = dict(data)
    for name, temporal in _temporal_fields(cls).items():
        raw = values.get(name)
        if isinstance(raw, str):
            values[name] = (
                datetime.fromisoformat(raw) if temporal is datetime else date.fromisoformat(raw)
            )
    return cls(**values)


def entity[T](cls: type[T]) -> Callable[[Any], T]:
    """Decoder for a single DTO (``None`` is never passed to decoders)."""
    if not is_dataclass(cls):
        raise TypeError(f"{cls.__name__} is not a dataclass")
    return lambda data: _build(cls, data)


def entity_list[T](cls: type[T]) -> Callable[[Any], list[T]]:
    """Decoder for ``list[DTO]``."""

    def decode(data: Any) -> list[T]:
        if not isinstance(data, list):
            raise TypeError(f"Expected a list of {cls.__name__}")
        return [_build(cls, item) for item in data]

    return decode


def page[T](cls: type[T]) -> Callable[[Any], PageResult[T]]:
    """Decoder for ``PageResult[DTO]`` (``{"data": [...], "total": n}``)."""
    items = entity_list(cls)

    def decode(data: Any) -> PageResult[T]:
        if isinstance(data, PageResult):
            return data
        if not isinstance(data, dict):
            raise TypeError("Expected a page mapping")
        return PageResult(data=items(data["data"]), total=int(data["total"]))

    return decode
