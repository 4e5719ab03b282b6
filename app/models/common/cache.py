"""Stats cache table and entry - shared by every statistics endpoint."""

from dataclasses import dataclass
from typing import Any

from app.models.common.base import BaseEntity

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS stats_cache (
    key VARCHAR PRIMARY KEY,
    data JSON NOT NULL,
    expires_at DOUBLE NOT NULL,
    computed_at TIMESTAMP NOT NULL
)
"""


@dataclass
class CacheEntry(BaseEntity):
    """Cached value with its absolute expiry (clock seconds)."""

    key: str
    value: Any
    expires_at: float

    def is_fresh(self, now: float) -> bool:
        return self.expires_at > now
