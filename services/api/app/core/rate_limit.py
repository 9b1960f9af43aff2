import time
import uuid
from dataclasses import dataclass

from redis.asyncio import Redis


@dataclass
class RateLimitResult:
    allowed: bool
    remaining: int
    reset_seconds: int


async def enforce_sliding_window(
    redis: Redis | None,
    *,
    key: str,
    limit: int,
    window_seconds: int,
) -> RateLimitResult:
    if redis is None or limit <= 0:
        return RateLimitResult(allowed=True, remaining=max(0, limit), reset_seconds=window_seconds)

    now_ms = int(time.time() * 1000)
    cutoff = now_ms - window_seconds * 1000

    pipe = redis.pipeline()
    pipe.zremrangebyscore(key, 0, cutoff)
    pipe.zcard(key)
    # Unique member so two hits in the same millisecond both count.
    pipe.zadd(key, {f"{now_ms}:{uuid.uuid4().hex[:8]}": now_ms})
    pipe.expire(key, window_seconds)
    _, count, _, _ = await pipe.execute()

    used = int(count) + 1
    return RateLimitResult(allowed=used <= limit, remaining=max(0, limit - used), reset_seconds=window_seconds)
