"""Result type: success/failure container for expected failure modes.

Repositories and use cases return ``Ok(value)`` or ``Err(error)`` instead of
raising. Branch on ``result.success`` (or ``match``) before reading
``value``/``error``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Literal, NoReturn


@dataclass(frozen=True)
class Ok[T]:
    """Success variant."""

    value: T

    @property
    def success(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Err[E]:
    """Failure variant."""

    error: E

    @property
    def success(self) -> Literal[False]:
        return False


type Result[T, E] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    return Ok(value)


def err[E](error: E) -> Err[E]:
    return Err(error)


def is_ok[T, E](result: Result[T, E]) -> bool:
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> bool:
    return isinstance(result, Err)


# Transformers


def map_ok[T, U, E](result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Transform the success value, leaving errors unchanged."""
    return Ok(fn(result.value)) if isinstance(result, Ok) else result


def map_err[T, E, F](result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Transform the error, leaving success values unchanged."""
    return Err(fn(result.error)) if isinstance(result, Err) else result


def flat_map[T, U, E](result: Result[T, E], fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain an operation that itself returns a Result."""
    return fn(result.value) if isinstance(result, Ok) else result


def fold[T, E, U](
    result: Result[T, E], on_success: Callable[[T], U], on_error: Callable[[E], U]
) -> U:
    return on_success(result.value) if isinstance(result, Ok) else on_error(result.error)


async def map_ok_async[T, U, E](
    result: Result[T, E], fn: Callable[[T], Awaitable[U]]
) -> Result[U, E]:
    return Ok(await fn(result.value)) if isinstance(result, Ok) else result


async def flat_map_async[T, U, E](
    result: Result[T, E], fn: Callable[[T], Awaitable[Result[U, E]]]
) -> Result[U, E]:
    return await fn(result.value) if isinstance(result, Ok) else result


# Unwrappers


def unwrap[T, E](result: Result[T, E]) -> T:
    """Return the success value; raise the error (or ValueError wrapping it) otherwise."""
    if isinstance(result, Ok):
        return result.value
    _raise(result.error)


def _raise(error: object) -> NoReturn:
    if isinstance(error, BaseException):
        raise error
    raise ValueError(str(error))


def unwrap_or[T, E](result: Result[T, E], default: T) -> T:
    return result.value if isinstance(result, Ok) else default


def unwrap_or_else[T, E](result: Result[T, E], fn: Callable[[E], T]) -> T:
    return result.value if isinstance(result, Ok) else fn(result.error)


def unwrap_err[T, E](result: Result[T, E]) -> E:
    """Return the error; raise ValueError when called on Ok."""
    if isinstance(result, Err):
        return result.error
    raise ValueError("Called unwrap_err on an Ok value")


# Exception boundaries


def try_catch[T](fn: Callable[[], T]) -> Result[T, Exception]:
    """Run fn and capture any exception as Err."""
    try:
        return Ok(fn())
    except Exception as e:
        return Err(e)


async def try_catch_async[T](fn: Callable[[], Awaitable[T]]) -> Result[T, Exception]:
    try:
        return Ok(await fn())
    except Exception as e:
        return Err(e)


# Combinators


def combine[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect all values; short-circuit on the first Err."""
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def collect_errors[T, E](results: Iterable[Result[T, E]]) -> list[E]:
    return [r.error for r in results if isinstance(r, Err)]


def collect_values[T, E](results: Iterable[Result[T, E]]) -> list[T]:
    return [r.value for r in results if isinstance(r, Ok)]


def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split results into (values, errors), preserving order."""
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if isinstance(result, Ok):
            values.append(result.value)
        else:
            errors.append(result.error)
    return values, errors


# Utilities


def from_nullable[T, E](value: T | None, error: E) -> Result[T, E]:
    return Ok(value) if value is not None else Err(error)


def to_nullable[T, E](result: Result[T, E]) -> T | None:
    return result.value if isinstance(result, Ok) else None


def tap[T, E](result: Result[T, E], fn: Callable[[T], object]) -> Result[T, E]:
    """Run a side effect on success; return result unchanged."""
    if isinstance(result, Ok):
        fn(result.value)
    return result


def tap_err[T, E](result: Result[T, E], fn: Callable[[E], object]) -> Result[T, E]:
    if isinstance(result, Err):
        fn(result.error)
    return result
