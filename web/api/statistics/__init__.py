"""Statistics API."""

from web.api.statistics.views import get_entity_stats, get_periods, invalidate_cache

__all__ = [
    "get_entity_stats",
    "get_periods",
    "invalidate_cache",
]
