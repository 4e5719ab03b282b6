"""Statistics service - cached enrolment and attendance rollups."""

import asyncio

import duckdb
from loguru import logger

from app.models.statistics import EntityType, StatsFilter
from app.repositories.hierarchy import HierarchyRepository
from app.repositories.statistics import StatsRepository
from app.services.cache import CacheService
from app.services.statistics import aggregation
from settings import CACHE_TTL

# Every key written by entity_stats and periods
STATS_PATTERNS = ("*:stats:*", "periods:*")


class EntityNotFoundError(Exception):
    """Requested school/circuit/district/region does not exist."""

    def __init__(self, entity_type: EntityType, entity_id: int):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.message = f"{entity_type.value.capitalize()} {entity_id} not found"
        super().__init__(self.message)


class StatisticsQueryError(Exception):
    """Database failure while computing statistics."""

    def __init__(self, message: str = "Failed to fetch statistics from database"):
        self.message = message
        super().__init__(self.message)


class StatisticsService:
    """Entity statistics with cache-aside over the stats repositories."""

    def __init__(
        self,
        stats_repo: StatsRepository,
        hierarchy_repo: HierarchyRepository,
        cache: CacheService,
        ttl: int = CACHE_TTL,
    ):
        self._stats = stats_repo
        self._hierarchy = hierarchy_repo
        self._cache = cache
        self._ttl = ttl
        logger.debug("StatisticsService initialized (ttl={}s)", ttl)

    async def entity_stats(self, f: StatsFilter) -> dict:
        """Enrolment, student and teacher attendance for an entity and period."""

        async def compute() -> dict:
            return await asyncio.to_thread(self._compute_stats, f)

        return await self._cache.get_or_set(f.cache_key(), compute, self._ttl)

    def _compute_stats(self, f: StatsFilter) -> dict:
        key = f.cache_key()
        try:
            entity = self._hierarchy.get_entity(f.entity_type, f.entity_id)
            if entity is None:
                raise EntityNotFoundError(f.entity_type, f.entity_id)

            enrolment = self._stats.enrolment_rows(f)
            students = self._stats.student_attendance_rows(f)
            teachers = self._stats.teacher_attendance_rows(f)
            ratings = self._stats.lesson_plan_ratings(f)
            counts = self._hierarchy.count_children(f.entity_type, f.entity_id)
        except duckdb.Error as e:
            logger.error("Database error for {}: {}", key, e)
            raise StatisticsQueryError() from e

        teacher_attendance = aggregation.aggregate_teacher_attendance(teachers)
        teacher_attendance["lessonPlanQuality"] = aggregation.lesson_plan_quality(ratings)

        logger.info(
            "Computed {}: {} enrolment, {} attendance, {} teacher rows",
            key,
            len(enrolment),
            len(students),
            len(teachers),
        )
        return {
            "entity": entity,
            "period": {k: v for k, v in f.to_dict().items() if k in ("year", "term", "week")},
            "enrolment": aggregation.aggregate_enrollment(enrolment),
            "studentAttendance": aggregation.aggregate_student_attendance(students),
            "teacherAttendance": teacher_attendance,
            "counts": counts,
        }

    async def periods(self, entity_type: EntityType | None = None, entity_id: int | None = None) -> list[dict]:
        """Reporting periods with submissions, grouped by year and term."""
        scope = f"{entity_type.value}:{entity_id}" if entity_type and entity_id is not None else "all:all"

        def fetch() -> list[dict]:
            try:
                rows = self._stats.period_rows(entity_type, entity_id)
            except duckdb.Error as e:
                logger.error("Database error listing periods for {}: {}", scope, e)
                raise StatisticsQueryError("Failed to fetch submission periods") from e
            return aggregation.group_periods(rows)

        async def compute() -> list[dict]:
            return await asyncio.to_thread(fetch)

        return await self._cache.get_or_set(f"periods:{scope}", compute, self._ttl)

    async def invalidate_entity(self, entity_type: EntityType, entity_id: int) -> int:
        """Drop every cached statistic for one entity."""
        return await self._cache.invalidate(f"{entity_type.value}:{entity_id}:*")

    async def invalidate_all(self) -> int:
        """Drop all cached statistics and period listings."""
        return await self._cache.invalidate_multiple(STATS_PATTERNS)
