"""Hierarchy models - regions, districts, circuits, schools."""

from app.models.hierarchy.circuit import CIRCUIT_DDL, CIRCUIT_INDEXES
from app.models.hierarchy.district import DISTRICT_DDL, DISTRICT_INDEXES
from app.models.hierarchy.region import REGION_DDL
from app.models.hierarchy.school import SCHOOL_DDL, SCHOOL_INDEXES

__all__ = [
    "REGION_DDL",
    "DISTRICT_DDL",
    "DISTRICT_INDEXES",
    "CIRCUIT_DDL",
    "CIRCUIT_INDEXES",
    "SCHOOL_DDL",
    "SCHOOL_INDEXES",
]
