"""Cache stores - backends for the statistics cache."""

import asyncio
import json
from contextlib import contextmanager
from datetime import datetime, timezone
from fnmatch import fnmatchcase

import duckdb
from loguru import logger

from app.models.common import CacheEntry
from app.repositories.base import BaseRepository


class CacheBackendError(Exception):
    """Cache store unreachable or failed to read/write an entry."""

    def __init__(self, message: str = "Cache backend error"):
        self.message = message
        super().__init__(self.message)


class MemoryCacheStore:
    """Process-local store backed by a dict."""

    def __init__(self):
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    async def set(self, entry: CacheEntry, ttl: int) -> None:
        self._entries[entry.key] = entry

    async def delete(self, key: str) -> int:
        return 1 if self._entries.pop(key, None) is not None else 0

    async def delete_pattern(self, pattern: str) -> int:
        keys = [k for k in self._entries if fnmatchcase(k, pattern)]
        for k in keys:
            del self._entries[k]
        return len(keys)

    async def clear(self) -> None:
        self._entries.clear()


class DuckDBCacheStore(BaseRepository):
    """Store persisted in the ``stats_cache`` table."""

    @contextmanager
    def _guard(self, action: str, key: str):
        try:
            yield
        except (duckdb.Error, TypeError, ValueError) as e:
            raise CacheBackendError(f"Cache {action} failed for {key}: {e}") from e

    def _get(self, key: str) -> CacheEntry | None:
        row = self.fetchone("SELECT data, expires_at FROM stats_cache WHERE key = ?", [key])
        if row:
            logger.debug("Cache row found: {}", key)
            return CacheEntry(key=key, value=json.loads(row[0]), expires_at=row[1])
        return None

    def _set(self, entry: CacheEntry) -> None:
        self.execute(
            """
            INSERT OR REPLACE INTO stats_cache (key, data, expires_at, computed_at)
            VALUES (?, ?, ?, ?)
            """,
            [entry.key, json.dumps(entry.value), entry.expires_at, datetime.now(timezone.utc)],
        )
        logger.debug("Cache saved: {}", entry.key)

    def _delete(self, where: str, arg: str) -> int:
        count = self.fetchone(f"SELECT COUNT(*) FROM stats_cache WHERE {where}", [arg])[0]
        if count:
            self.execute(f"DELETE FROM stats_cache WHERE {where}", [arg])
        return count

    async def get(self, key: str) -> CacheEntry | None:
        with self._guard("read", key):
            return await asyncio.to_thread(self._get, key)

    async def set(self, entry: CacheEntry, ttl: int) -> None:
        with self._guard("write", entry.key):
            await asyncio.to_thread(self._set, entry)

    async def delete(self, key: str) -> int:
        with self._guard("delete", key):
            return await asyncio.to_thread(self._delete, "key = ?", key)

    async def delete_pattern(self, pattern: str) -> int:
        with self._guard("delete", pattern):
            return await asyncio.to_thread(self._delete, "key GLOB ?", pattern)

    async def clear(self) -> None:
        with self._guard("clear", "*"):
            await asyncio.to_thread(self.execute, "DELETE FROM stats_cache")
        logger.info("All cache cleared")
