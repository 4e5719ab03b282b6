"""Statistics domain - aggregation formulas and the cached service."""

from app.services.statistics import aggregation
from app.services.statistics.service import (
    EntityNotFoundError,
    StatisticsQueryError,
    StatisticsService,
)

__all__ = [
    "aggregation",
    "StatisticsService",
    "EntityNotFoundError",
    "StatisticsQueryError",
]
