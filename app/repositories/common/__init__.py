"""Common repositories - cache stores."""

from app.repositories.common.cache import CacheBackendError, DuckDBCacheStore, MemoryCacheStore
from app.repositories.common.redis_cache import RedisCacheStore

__all__ = [
    "CacheBackendError",
    "MemoryCacheStore",
    "DuckDBCacheStore",
    "RedisCacheStore",
]
