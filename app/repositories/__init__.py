"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import (
    CacheBackendError,
    DuckDBCacheStore,
    MemoryCacheStore,
    RedisCacheStore,
)
from app.repositories.db import (
    close_db,
    connect,
    get_db,
    get_write_connection,
    init_tables,
)
from app.repositories.hierarchy import HierarchyRepository
from app.repositories.statistics import StatsRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "connect",
    "get_write_connection",
    "init_tables",
    # Base
    "BaseRepository",
    # Cache stores
    "CacheBackendError",
    "MemoryCacheStore",
    "DuckDBCacheStore",
    "RedisCacheStore",
    # Hierarchy
    "HierarchyRepository",
    # Statistics
    "StatsRepository",
]
