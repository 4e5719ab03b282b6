"""Services package - service class exports."""

from app.services.cache import CacheService
from app.services.statistics import StatisticsService

__all__ = [
    "CacheService",
    "StatisticsService",
]
