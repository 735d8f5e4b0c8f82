"""Result type: constructors, combinators and exception boundaries."""

import pytest

from app.shared import result as r
from app.shared.result import Err, Ok, err, ok


class TestConstructors:
    def test_ok(self) -> None:
        res = ok(1)
        assert res.success is True
        assert res.value == 1
        assert r.is_ok(res) and not r.is_err(res)

    def test_err(self) -> None:
        res = err("boom")
        assert res.success is False
        assert res.error == "boom"
        assert r.is_err(res) and not r.is_ok(res)

    def test_pattern_matching(self) -> None:
        match ok(3):
            case Ok(value=v):
                assert v == 3
            case Err():
                pytest.fail("expected Ok")


class TestTransformers:
    def test_map_ok_and_map_err(self) -> None:
        assert r.map_ok(ok(2), lambda v: v * 2) == ok(4)
        assert r.map_ok(err("e"), lambda v: v * 2) == err("e")
        assert r.map_err(err("e"), str.upper) == err("E")
        assert r.map_err(ok(1), str.upper) == ok(1)

    def test_flat_map_and_fold(self) -> None:
        assert r.flat_map(ok(2), lambda v: err(f"bad {v}")) == err("bad 2")
        assert r.fold(ok(1), lambda v: "yes", lambda e: "no") == "yes"
        assert r.fold(err(1), lambda v: "yes", lambda e: "no") == "no"

    async def test_async_variants(self) -> None:
        async def double(v: int) -> int:
            return v * 2

        async def check(v: int):
            return ok(v) if v > 0 else err("neg")

        assert await r.map_ok_async(ok(2), double) == ok(4)
        assert await r.flat_map_async(ok(-1), check) == err("neg")
        assert await r.flat_map_async(err("x"), check) == err("x")


class TestUnwrappers:
    def test_unwrap(self) -> None:
        assert r.unwrap(ok(5)) == 5

    def test_unwrap_raises_exception_errors(self) -> None:
        with pytest.raises(KeyError):
            r.unwrap(err(KeyError("k")))

    def test_unwrap_wraps_plain_errors(self) -> None:
        with pytest.raises(ValueError, match="boom"):
            r.unwrap(err("boom"))

    def test_unwrap_or_and_else(self) -> None:
        assert r.unwrap_or(err("e"), 0) == 0
        assert r.unwrap_or_else(err("abc"), len) == 3

    def test_unwrap_err(self) -> None:
        assert r.unwrap_err(err("e")) == "e"
        with pytest.raises(ValueError):
            r.unwrap_err(ok(1))


class TestBoundaries:
    def test_try_catch(self) -> None:
        assert r.try_catch(lambda: 1) == ok(1)
        res = r.try_catch(lambda: 1 / 0)
        assert isinstance(res.error, ZeroDivisionError)

    async def test_try_catch_async(self) -> None:
        async def fail() -> int:
            raise RuntimeError("x")

        res = await r.try_catch_async(fail)
        assert isinstance(res.error, RuntimeError)


class TestCombinators:
    def test_combine_short_circuits(self) -> None:
        assert r.combine([ok(1), ok(2)]) == ok([1, 2])
        assert r.combine([ok(1), err("a"), err("b")]) == err("a")

    def test_collect_and_partition(self) -> None:
        results = [ok(1), err("a"), ok(2), err("b")]
        assert r.collect_values(results) == [1, 2]
        assert r.collect_errors(results) == ["a", "b"]
        assert r.partition(results) == ([1, 2], ["a", "b"])

    def test_nullable(self) -> None:
        assert r.from_nullable(None, "missing") == err("missing")
        assert r.from_nullable(0, "missing") == ok(0)
        assert r.to_nullable(err("e")) is None
        assert r.to_nullable(ok("v")) == "v"

    def test_tap(self) -> None:
        seen: list[object] = []
        assert r.tap(ok(1), seen.append) == ok(1)
        assert r.tap_err(err("e"), seen.append) == err("e")
        r.tap(err("skip"), seen.append)
        assert seen == [1, "e"]
