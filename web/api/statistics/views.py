"""Statistics API views - thin layer over services."""

from app.container import container
from app.models.statistics import EntityType, StatsFilter
from app.services.statistics import EntityNotFoundError
from app.services.statistics.aggregation import round_half_up
from web.api.errors import NotFoundError, validate_entity_id, validate_pattern, validate_period

from .schemas import (
    CacheInvalidateResponse,
    Enrolment,
    EntityStatsResponse,
    Period,
    PeriodsResponse,
    StudentAttendance,
    TeacherAttendance,
    YearPeriods,
)

TEACHER_RATES = ("attendanceRate", "punctualityRate", "exerciseCompletionRate")


async def get_entity_stats(
    entity_type: EntityType,
    entity_id: int,
    year: int | None = None,
    term: int | None = None,
    week: int | None = None,
) -> EntityStatsResponse:
    """Get enrolment and attendance statistics for an entity."""
    validate_entity_id(entity_id)
    validate_period(year, term, week)

    f = StatsFilter(entity_type=entity_type, entity_id=entity_id, year=year, term=term, week=week)
    try:
        data = await container.statistics.entity_stats(f)
    except EntityNotFoundError as e:
        raise NotFoundError(e.message) from e

    teacher = dict(data["teacherAttendance"])
    for name in TEACHER_RATES:
        teacher[name] = round_half_up(teacher[name], 1)

    return EntityStatsResponse(
        entity=data["entity"],
        period=Period(**data["period"]),
        enrolment=Enrolment(**data["enrolment"]),
        studentAttendance=StudentAttendance(**data["studentAttendance"]),
        teacherAttendance=TeacherAttendance(**teacher),
        **data["counts"],
    )


async def get_periods(
    school_id: int | None = None,
    circuit_id: int | None = None,
    district_id: int | None = None,
    region_id: int | None = None,
) -> PeriodsResponse:
    """Get reporting periods, scoped to the most specific entity given."""
    scope = (
        (EntityType.SCHOOL, school_id),
        (EntityType.CIRCUIT, circuit_id),
        (EntityType.DISTRICT, district_id),
        (EntityType.REGION, region_id),
    )
    entity_type, entity_id = next(((t, i) for t, i in scope if i is not None), (None, None))
    if entity_id is not None:
        validate_entity_id(entity_id)

    data = await container.statistics.periods(entity_type, entity_id)
    return PeriodsResponse(periods=[YearPeriods(**p) for p in data])


async def invalidate_cache(pattern: str) -> CacheInvalidateResponse:
    """Invalidate cached entries matching a key or glob pattern."""
    validate_pattern(pattern)
    removed = await container.cache.invalidate(pattern)
    return CacheInvalidateResponse(pattern=pattern, removed=removed)
