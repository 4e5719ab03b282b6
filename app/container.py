"""Dependency Injection container - initialized at app startup."""

import duckdb
from loguru import logger

from app.repositories.common import DuckDBCacheStore, MemoryCacheStore, RedisCacheStore
from app.repositories.db import get_db
from app.repositories.hierarchy import HierarchyRepository
from app.repositories.statistics import StatsRepository
from app.services.cache import CacheService
from app.services.statistics import StatisticsService
from settings import CACHE_BACKEND, CACHE_SINGLE_FLIGHT, CACHE_TTL, REDIS_URL


def build_cache_store(backend: str, conn: duckdb.DuckDBPyConnection):
    """Cache store for a CACHE_BACKEND name."""
    if backend == "memory":
        return MemoryCacheStore()
    if backend == "duckdb":
        return DuckDBCacheStore(conn)
    if backend == "redis":
        return RedisCacheStore(REDIS_URL)
    raise ValueError(f"Unknown cache backend: {backend}")


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        conn: duckdb.DuckDBPyConnection | None = None,
        cache_backend: str = CACHE_BACKEND,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # The API only writes when the cache is kept in the database
        conn = conn if conn is not None else get_db(read_only=cache_backend != "duckdb")

        # Repositories (singletons)
        self._stats_repo = StatsRepository(conn)
        self._hierarchy_repo = HierarchyRepository(conn)
        self.cache_store = build_cache_store(cache_backend, conn)

        # Services (with injected repos)
        self.cache = CacheService(
            store=self.cache_store,
            single_flight=CACHE_SINGLE_FLIGHT,
        )

        self.statistics = StatisticsService(
            stats_repo=self._stats_repo,
            hierarchy_repo=self._hierarchy_repo,
            cache=self.cache,
            ttl=CACHE_TTL,
        )

        logger.info("Container initialized (cache backend: {})", cache_backend)
        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so init() can run again."""
        self._initialized = False


# Global container instance
container = Container()
