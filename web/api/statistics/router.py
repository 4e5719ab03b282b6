"""Statistics HTTP routes."""

from fastapi import APIRouter, Query

from app.models.statistics import EntityType
from web.api.statistics import views
from web.api.statistics.schemas import (
    CacheInvalidateResponse,
    EntityStatsResponse,
    ErrorResponse,
    PeriodsResponse,
)

ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter()


def _stats_endpoint(entity_type: EntityType):
    async def endpoint(
        entity_id: int,
        year: int | None = None,
        term: int | None = None,
        week: int | None = None,
    ) -> EntityStatsResponse:
        return await views.get_entity_stats(entity_type, entity_id, year, term, week)

    endpoint.__name__ = f"get_{entity_type.value}_stats"
    return endpoint


for _entity_type in EntityType:
    router.add_api_route(
        f"/{_entity_type.table}/{{entity_id}}/stats",
        _stats_endpoint(_entity_type),
        methods=["GET"],
        response_model=EntityStatsResponse,
        responses=ERRORS,
        summary=f"Get {_entity_type.value} statistics",
    )


@router.get(
    "/statistics/periods",
    response_model=PeriodsResponse,
    responses=ERRORS,
    summary="Get available submission periods",
)
async def get_periods(
    school_id: int | None = Query(None, alias="schoolId"),
    circuit_id: int | None = Query(None, alias="circuitId"),
    district_id: int | None = Query(None, alias="districtId"),
    region_id: int | None = Query(None, alias="regionId"),
) -> PeriodsResponse:
    return await views.get_periods(school_id, circuit_id, district_id, region_id)


@router.delete(
    "/cache",
    response_model=CacheInvalidateResponse,
    responses=ERRORS,
    summary="Invalidate cached statistics",
)
async def invalidate_cache(pattern: str = Query(..., description="Key or glob, e.g. school:12:*")) -> CacheInvalidateResponse:
    return await views.invalidate_cache(pattern)
