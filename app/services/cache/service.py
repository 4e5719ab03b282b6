"""Cache service - get-or-set memoization over a pluggable store."""

import asyncio
import time
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from loguru import logger

from app.models.common import CacheEntry
from app.repositories.common import CacheBackendError

GLOB_CHARS = ("*", "?", "[")


class CacheService:
    """Get-or-set cache with TTL and glob-pattern invalidation.

    Store failures never fail a request: reads fall through to the supplier
    and writes are skipped, both logged. Supplier errors always propagate
    and are never cached.

    With ``single_flight`` enabled, concurrent misses on one key await a
    single supplier call instead of each computing the value.
    """

    def __init__(
        self,
        store,
        clock: Callable[[], float] = time.time,
        single_flight: bool = False,
    ):
        self._store = store
        self._clock = clock
        self._single_flight = single_flight
        self._inflight: dict[str, asyncio.Future] = {}
        logger.debug(
            "CacheService initialized: store={}, single_flight={}",
            store.__class__.__name__,
            single_flight,
        )

    async def get_or_set(
        self,
        key: str,
        supplier: Callable[[], Awaitable[Any]],
        ttl: int = 3600,
    ) -> Any:
        """Return the live cached value for key, or compute, store and return it."""
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got {ttl}")

        entry = await self._read(key)
        if entry is not None:
            if entry.is_fresh(self._clock()):
                logger.debug("Cache hit: {}", key)
                return entry.value
            await self._evict(key)

        if not self._single_flight:
            return await self._fill(key, supplier, ttl)

        pending = self._inflight.get(key)
        if pending is not None:
            logger.debug("Cache fill in flight, waiting: {}", key)
            return await asyncio.shield(pending)

        task = asyncio.ensure_future(self._fill(key, supplier, ttl))
        self._inflight[key] = task
        try:
            return await asyncio.shield(task)
        finally:
            if task.done():
                self._inflight.pop(key, None)
            else:
                task.add_done_callback(lambda _: self._inflight.pop(key, None))

    async def _fill(self, key: str, supplier: Callable[[], Awaitable[Any]], ttl: int) -> Any:
        logger.debug("Cache miss: {}", key)
        value = await supplier()
        if value is None:
            return value

        entry = CacheEntry(key=key, value=value, expires_at=self._clock() + ttl)
        try:
            await self._store.set(entry, ttl)
        except CacheBackendError as e:
            logger.warning("Cache write skipped for {}: {}", key, e)
        return value

    async def _read(self, key: str) -> CacheEntry | None:
        try:
            return await self._store.get(key)
        except CacheBackendError as e:
            logger.warning("Cache read failed for {}, computing directly: {}", key, e)
            return None

    async def _evict(self, key: str) -> None:
        try:
            await self._store.delete(key)
        except CacheBackendError as e:
            logger.warning("Expired entry {} not evicted: {}", key, e)

    async def invalidate(self, pattern: str) -> int:
        """Remove the key, or every key matching a glob pattern. Returns count removed."""
        try:
            if any(c in pattern for c in GLOB_CHARS):
                removed = await self._store.delete_pattern(pattern)
            else:
                removed = await self._store.delete(pattern)
        except CacheBackendError as e:
            logger.error("Cache invalidation failed for {}: {}", pattern, e)
            return 0

        if removed:
            logger.info("Cache invalidated: {} ({} keys)", pattern, removed)
        return removed

    async def invalidate_multiple(self, patterns: Iterable[str]) -> int:
        """Invalidate each key or pattern in turn. Returns total removed."""
        removed = 0
        for pattern in patterns:
            removed += await self.invalidate(pattern)
        return removed
