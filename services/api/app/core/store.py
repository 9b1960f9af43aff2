from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol

from redis.asyncio import Redis

from app.core.logging import get_logger
from app.core.redis import get_redis

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def ping(self) -> bool: ...


class InMemoryStore:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self._data: dict[str, tuple[str, float | None]] = {}

    async def get(self, key: str) -> str | None:
        item = self._data.get(key)
        if item is None:
            return None
        value, expires_at = item
        if expires_at is not None and expires_at <= self.clock():
            self._data.pop(key, None)
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        expires_at = self.clock() + ttl_seconds if ttl_seconds else None
        self._data[key] = (value, expires_at)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def ping(self) -> bool:
        return True


class RedisStore:
    def __init__(self, redis: Redis, prefix: str = "texthuman:") -> None:
        self.redis = redis
        self.prefix = prefix

    async def get(self, key: str) -> str | None:
        return await self.redis.get(f"{self.prefix}{key}")

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        await self.redis.set(f"{self.prefix}{key}", value, ex=ttl_seconds)

    async def delete(self, key: str) -> None:
        await self.redis.delete(f"{self.prefix}{key}")

    async def ping(self) -> bool:
        return bool(await self.redis.ping())


_store: KeyValueStore | None = None


async def get_store() -> KeyValueStore:
    global _store
    if _store is None:
        redis = await get_redis()
        if redis is None:
            logger.info("store_selected", backend="memory")
            _store = InMemoryStore()
        else:
            logger.info("store_selected", backend="redis")
            _store = RedisStore(redis)
    return _store


def reset_store() -> None:
    global _store
    _store = None
