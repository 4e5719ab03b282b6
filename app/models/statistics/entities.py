"""Statistics domain entities - hierarchy levels and request filters."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.common import BaseEntity


class EntityType(StrEnum):
    """Administrative level a statistic is reported for."""

    SCHOOL = "school"
    CIRCUIT = "circuit"
    DISTRICT = "district"
    REGION = "region"

    @property
    def column(self) -> str:
        """Foreign key column identifying this level in submission tables."""
        return f"{self.value}_id"

    @property
    def table(self) -> str:
        return f"{self.value}s"

    @property
    def children(self) -> list["EntityType"]:
        """Levels below this one, nearest first."""
        order = list(EntityType)
        return list(reversed(order[: order.index(self)]))


@dataclass
class StatsFilter(BaseEntity):
    """Entity plus optional reporting period."""

    entity_type: EntityType
    entity_id: int
    year: int | None = None
    term: int | None = None
    week: int | None = None

    def cache_key(self) -> str:
        """Colon-delimited key, e.g. ``school:123:stats:2024:1:3``."""
        period = ":".join("all" if v is None else str(v) for v in (self.year, self.term, self.week))
        return f"{self.entity_type.value}:{self.entity_id}:stats:{period}"

    def period_clause(self, alias: str = "") -> tuple[str, list]:
        """SQL fragment and params restricting rows to the filter period."""
        prefix = f"{alias}." if alias else ""
        clauses, params = [], []
        for column, value in (("year", self.year), ("term", self.term), ("week_number", self.week)):
            if value is not None:
                clauses.append(f" AND {prefix}{column} = ?")
                params.append(value)
        return "".join(clauses), params
