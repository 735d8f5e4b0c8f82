"""RedisCacheService against an in-memory fake Redis client."""

import asyncio
import json
import logging
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from app.application.dtos.trip import TripResult
from app.core.config import Settings
from app.infrastructure.cache.cache_aside import cache_aside
from app.infrastructure.cache.redis_cache import RedisCacheService, encode_value
from app.infrastructure.exceptions import CacheConnectionError, CacheOperationError
from app.shared.result import ok


class _FakePipeline:
    def __init__(self, client: "_FakeRedis") -> None:
        self.client = client
        self.ops: list[tuple[str, ...]] = []

    async def __aenter__(self) -> "_FakePipeline":
        return self

    async def __aexit__(self, *exc: object) -> None:
        return None

    def unlink(self, *keys: str) -> None:
        self.ops.append(keys)

    async def execute(self) -> list[int]:
        self.client.unlink_batches.append(len(self.ops[0]))
        return [await self.client.unlink(*keys) for keys in self.ops]


class _FakeRedis:
    """Subset of redis.asyncio.Redis used by RedisCacheService."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.unlink_batches: list[int] = []
        self.closed = False

    async def get(self, key: str) -> str | None:
        return self.store.get(key)

    async def setex(self, key: str, ttl: int, value: str) -> None:
        self.store[key] = value
        self.ttls[key] = ttl

    async def delete(self, key: str) -> int:
        return 1 if self.store.pop(key, None) is not None else 0

    async def unlink(self, *keys: str) -> int:
        return sum(1 for k in keys if self.store.pop(k, None) is not None)

    async def scan_iter(self, match: str):
        prefix = match.rstrip("*")
        for key in list(self.store):
            if key.startswith(prefix):
                yield key

    def pipeline(self, transaction: bool = True) -> _FakePipeline:
        return _FakePipeline(self)

    async def ping(self) -> bool:
        return True

    async def aclose(self) -> None:
        self.closed = True


class _SlowPingRedis(_FakeRedis):
    async def ping(self) -> bool:
        await asyncio.sleep(0.01)
        return True


class _RefusingRedis(_FakeRedis):
    async def ping(self) -> bool:
        raise redis.ConnectionError("refused")


def _patch_client_factory(
    monkeypatch: pytest.MonkeyPatch, client_cls: type[_FakeRedis]
) -> list[_FakeRedis]:
    """Make redis.Redis(...) build client_cls instances; return the created list."""
    created: list[_FakeRedis] = []

    def factory(**kwargs: object) -> _FakeRedis:
        client = client_cls()
        created.append(client)
        return client

    monkeypatch.setattr(redis, "Redis", factory)
    return created


@pytest.fixture
def fake_redis() -> _FakeRedis:
    return _FakeRedis()


@pytest.fixture
def service(fake_redis: _FakeRedis) -> RedisCacheService:
    return RedisCacheService(redis_client=fake_redis, settings=Settings(_env_file=None))


class TestGetSet:
    async def test_set_then_get_round_trip(self, service, fake_redis) -> None:
        await service.set("k", {"__cached": True, "data": [1, 2]}, 60)

        assert fake_redis.ttls["k"] == 60
        assert await service.get("k") == {"__cached": True, "data": [1, 2]}

    async def test_missing_key_is_none(self, service) -> None:
        assert await service.get("absent") is None

    async def test_invalid_json_is_a_miss(self, service, fake_redis) -> None:
        fake_redis.store["k"] = "not-json{"
        assert await service.get("k") is None

    async def test_dataclass_values_are_json_encoded(self, service, fake_redis) -> None:
        trip = TripResult(
            id="t1",
            ref_id=1,
            date_trip=datetime(2025, 3, 1, 8, 30, tzinfo=UTC),
            kms=120,
            seats=3,
            driver_ref_id=2,
            car_ref_id=4,
        )

        await service.set("k", {"__cached": True, "data": trip}, 300)

        stored = json.loads(fake_redis.store["k"])
        assert stored["data"]["date_trip"] == "2025-03-01T08:30:00+00:00"
        assert stored["data"]["id"] == "t1"

    def test_encode_value_rejects_unknown_types(self) -> None:
        with pytest.raises(TypeError):
            encode_value(object())

    async def test_delete(self, service, fake_redis) -> None:
        fake_redis.store["k"] = "1"
        await service.delete("k")
        assert "k" not in fake_redis.store


class TestDeleteByPattern:
    async def test_deletes_only_matching_keys(self, service, fake_redis) -> None:
        fake_redis.store.update({"p:car:a": "1", "p:car:b": "1", "p:city:a": "1"})

        await service.delete_by_pattern("p:car:*")

        assert set(fake_redis.store) == {"p:city:a"}

    async def test_unlinks_in_chunks(self, service, fake_redis) -> None:
        fake_redis.store.update({f"p:trip:{i}": "1" for i in range(1200)})

        await service.delete_by_pattern("p:trip:*")

        assert fake_redis.store == {}
        assert fake_redis.unlink_batches == [500, 500, 200]


class TestFailures:
    async def test_redis_error_raises_operation_error(self, service, fake_redis) -> None:
        fake_redis.get = AsyncMock(side_effect=redis.ResponseError("WRONGTYPE"))

        with pytest.raises(CacheOperationError) as exc_info:
            await service.get("k")
        assert exc_info.value.operation == "get"

    async def test_reconnects_once_on_connection_loss(
        self, service, fake_redis, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        fake_redis.get = AsyncMock(side_effect=redis.ConnectionError("reset"))
        fresh = _FakeRedis()
        fresh.store["k"] = json.dumps({"__cached": True, "data": 1})
        monkeypatch.setattr(redis, "Redis", lambda **kwargs: fresh)

        assert await service.get("k") == {"__cached": True, "data": 1}
        assert fake_redis.closed is True
        assert service.redis is fresh

    async def test_persistent_connection_loss_raises_connection_error(
        self, service, fake_redis, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        fake_redis.setex = AsyncMock(side_effect=redis.TimeoutError("slow"))
        still_down = _FakeRedis()
        still_down.setex = AsyncMock(side_effect=redis.ConnectionError("refused"))
        monkeypatch.setattr(redis, "Redis", lambda **kwargs: still_down)

        with pytest.raises(CacheConnectionError):
            await service.set("k", 1, 10)

    async def test_unencodable_value_raises_operation_error(self, service, fake_redis) -> None:
        with pytest.raises(CacheOperationError) as exc_info:
            await service.set("k", object(), 10)

        assert exc_info.value.operation == "set"
        assert isinstance(exc_info.value.cause, TypeError)
        assert fake_redis.store == {}


class TestConcurrentConnect:
    async def test_concurrent_first_use_creates_one_client(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        created = _patch_client_factory(monkeypatch, _SlowPingRedis)
        service = RedisCacheService(settings=Settings(_env_file=None))

        results = await asyncio.gather(*(service.get("k") for _ in range(10)))

        assert results == [None] * 10
        assert len(created) == 1
        await service.disconnect()
        assert created[0].closed is True

    async def test_concurrent_connection_loss_reconnects_once(
        self, service, fake_redis, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def dropped(key: str) -> str | None:
            await asyncio.sleep(0)
            raise redis.ConnectionError("reset")

        fake_redis.get = dropped
        created = _patch_client_factory(monkeypatch, _SlowPingRedis)

        results = await asyncio.gather(service.get("a"), service.get("b"))

        assert results == [None, None]
        assert len(created) == 1
        assert service.redis is created[0]
        assert fake_redis.closed is True


class TestOutage:
    async def test_reads_fall_back_without_redialing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        created = _patch_client_factory(monkeypatch, _RefusingRedis)
        service = RedisCacheService(
            settings=Settings(redis_retry_interval=30, _env_file=None)
        )
        source = AsyncMock(return_value=ok(1))

        for _ in range(3):
            result = await cache_aside(service, "k", 60, source, logging.getLogger("test"))
            assert result == ok(1)

        assert source.await_count == 3
        assert len(created) == 1
        assert service.is_available() is False

    async def test_failed_startup_connect_short_circuits_operations(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        created = _patch_client_factory(monkeypatch, _RefusingRedis)
        service = RedisCacheService(
            settings=Settings(redis_retry_interval=30, _env_file=None)
        )

        with pytest.raises(CacheConnectionError):
            await service.connect()
        with pytest.raises(CacheConnectionError) as exc_info:
            await service.delete_by_pattern("p:user:*")

        assert exc_info.value.cause is None
        assert len(created) == 1

    async def test_dials_again_once_retry_window_has_passed(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        clients = iter([_RefusingRedis(), _FakeRedis()])
        monkeypatch.setattr(redis, "Redis", lambda **kwargs: next(clients))
        service = RedisCacheService(
            settings=Settings(redis_retry_interval=0, _env_file=None)
        )

        with pytest.raises(CacheConnectionError):
            await service.connect()

        assert await service.get("k") is None
        assert service.is_available() is True


class TestLifecycle:
    async def test_is_healthy(self, service) -> None:
        assert await service.is_healthy() is True

    async def test_is_healthy_without_client(self) -> None:
        service = RedisCacheService(settings=Settings(_env_file=None))
        assert await service.is_healthy() is False

    async def test_is_healthy_swallows_errors(self, service, fake_redis) -> None:
        fake_redis.ping = AsyncMock(side_effect=redis.ConnectionError("down"))
        assert await service.is_healthy() is False

    async def test_disconnect_closes_client(self, service, fake_redis) -> None:
        await service.disconnect()
        assert fake_redis.closed is True
        assert service.redis is None

    async def test_connect_failure_raises_connection_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        client = _FakeRedis()
        client.ping = AsyncMock(side_effect=redis.ConnectionError("refused"))
        monkeypatch.setattr(redis, "Redis", lambda **kwargs: client)
        service = RedisCacheService(settings=Settings(_env_file=None))

        with pytest.raises(CacheConnectionError):
            await service.connect()
        assert service.redis is None
        assert client.closed is True
