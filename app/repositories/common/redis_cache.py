"""Redis cache store."""

import json
from contextlib import contextmanager

import redis.asyncio as redis
from loguru import logger
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.models.common import CacheEntry
from app.repositories.common.cache import CacheBackendError
from settings import REDIS_CONNECT_ATTEMPTS, REDIS_CONNECT_TIMEOUT, REDIS_URL


class RedisCacheStore:
    """Store backed by Redis; entries also expire server-side via EX."""

    def __init__(self, url: str = REDIS_URL, client: redis.Redis | None = None):
        self._url = url
        self._client = client or redis.from_url(
            url,
            socket_connect_timeout=REDIS_CONNECT_TIMEOUT,
            decode_responses=True,
        )

    @contextmanager
    def _guard(self, action: str, key: str):
        try:
            yield
        except (RedisError, OSError, KeyError, TypeError, ValueError) as e:
            raise CacheBackendError(f"Redis {action} failed for {key}: {e}") from e

    @retry(
        stop=stop_after_attempt(REDIS_CONNECT_ATTEMPTS),
        wait=wait_exponential(multiplier=0.05, max=2),
        retry=retry_if_exception_type((RedisConnectionError, OSError)),
        reraise=True,
    )
    async def _ping(self) -> None:
        await self._client.ping()

    async def connect(self) -> bool:
        """Ping with back-off; False when Redis stays unreachable."""
        try:
            await self._ping()
        except (RedisError, OSError) as e:
            logger.warning("Redis unavailable at {}: {}", self._url, e)
            return False
        logger.info("Redis connected: {}", self._url)
        return True

    async def close(self) -> None:
        await self._client.aclose()

    async def get(self, key: str) -> CacheEntry | None:
        with self._guard("read", key):
            raw = await self._client.get(key)
            if raw is None:
                return None
            payload = json.loads(raw)
            # Keys may hold values written by other clients in another shape
            if not isinstance(payload, dict) or not {"value", "expires_at"} <= payload.keys():
                raise CacheBackendError(f"Redis entry {key} is not a cache entry")
            return CacheEntry(key=key, value=payload["value"], expires_at=payload["expires_at"])

    async def set(self, entry: CacheEntry, ttl: int) -> None:
        with self._guard("write", entry.key):
            payload = json.dumps({"value": entry.value, "expires_at": entry.expires_at})
            await self._client.set(entry.key, payload, ex=ttl)

    async def delete(self, key: str) -> int:
        with self._guard("delete", key):
            return await self._client.delete(key)

    async def delete_pattern(self, pattern: str) -> int:
        with self._guard("delete", pattern):
            keys = [k async for k in self._client.scan_iter(match=pattern)]
            if not keys:
                return 0
            return await self._client.delete(*keys)

    async def clear(self) -> None:
        removed = await self.delete_pattern("*")
        logger.info("Redis cache cleared ({} keys)", removed)
