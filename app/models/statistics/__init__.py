"""Statistics models - submission tables and filter entities."""

from app.models.statistics.attendance import (
    ATTENDANCE_INDEXES,
    STUDENT_ATTENDANCE_DDL,
    TEACHER_ATTENDANCE_DDL,
)
from app.models.statistics.enrolment import ENROLMENT_DDL, ENROLMENT_INDEXES
from app.models.statistics.entities import EntityType, StatsFilter

__all__ = [
    "ENROLMENT_DDL",
    "ENROLMENT_INDEXES",
    "STUDENT_ATTENDANCE_DDL",
    "TEACHER_ATTENDANCE_DDL",
    "ATTENDANCE_INDEXES",
    "EntityType",
    "StatsFilter",
]
