"""Models package - DDL and entities for all domains."""

from app.models.common import CACHE_DDL, BaseEntity, CacheEntry
from app.models.hierarchy import (
    CIRCUIT_DDL,
    CIRCUIT_INDEXES,
    DISTRICT_DDL,
    DISTRICT_INDEXES,
    REGION_DDL,
    SCHOOL_DDL,
    SCHOOL_INDEXES,
)
from app.models.statistics import (
    ATTENDANCE_INDEXES,
    ENROLMENT_DDL,
    ENROLMENT_INDEXES,
    STUDENT_ATTENDANCE_DDL,
    TEACHER_ATTENDANCE_DDL,
    EntityType,
    StatsFilter,
)

ALL_DDL = [
    # Hierarchy
    REGION_DDL,
    DISTRICT_DDL,
    CIRCUIT_DDL,
    SCHOOL_DDL,
    # Statistics
    ENROLMENT_DDL,
    STUDENT_ATTENDANCE_DDL,
    TEACHER_ATTENDANCE_DDL,
    # Common
    CACHE_DDL,
    # Indexes
    *DISTRICT_INDEXES,
    *CIRCUIT_INDEXES,
    *SCHOOL_INDEXES,
    *ENROLMENT_INDEXES,
    *ATTENDANCE_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    "CacheEntry",
    "CACHE_DDL",
    # Hierarchy
    "REGION_DDL",
    "DISTRICT_DDL",
    "CIRCUIT_DDL",
    "SCHOOL_DDL",
    # Statistics
    "ENROLMENT_DDL",
    "STUDENT_ATTENDANCE_DDL",
    "TEACHER_ATTENDANCE_DDL",
    "EntityType",
    "StatsFilter",
    # All DDL
    "ALL_DDL",
]
