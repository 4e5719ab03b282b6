"""Statistics API response schemas."""

from pydantic import BaseModel


class GenderDistribution(BaseModel):
    """Boys/girls split."""

    boys: int
    girls: int


class SpecialNeeds(BaseModel):
    """Special-needs learners."""

    boys: int
    girls: int
    total: int


class Enrolment(BaseModel):
    """Enrolment summary."""

    totalStudents: int
    genderDistribution: GenderDistribution
    specialNeeds: SpecialNeeds


class StudentAttendance(BaseModel):
    """Student attendance summary."""

    totalEnrolled: int
    totalPresent: int
    attendanceRate: int


class RatingShare(BaseModel):
    """Count and share of one lesson plan rating."""

    count: int
    percentage: float


class TeacherAttendance(BaseModel):
    """Teacher attendance summary; rates in percent, 1 decimal."""

    totalTeachers: int
    attendanceRate: float
    punctualityRate: float
    exerciseCompletionRate: float
    lessonPlanQuality: dict[str, RatingShare] | None = None


class Period(BaseModel):
    """Requested reporting period."""

    year: int | None = None
    term: int | None = None
    week: int | None = None


class EntityStatsResponse(BaseModel):
    """Statistics for one school, circuit, district or region."""

    success: bool = True
    entity: dict
    period: Period
    enrolment: Enrolment
    studentAttendance: StudentAttendance
    teacherAttendance: TeacherAttendance
    circuitCount: int | None = None
    districtCount: int | None = None
    schoolCount: int | None = None


class TermPeriods(BaseModel):
    """Weeks with submissions in a term."""

    term: int
    weeks: list[int]


class YearPeriods(BaseModel):
    """Terms with submissions in a year."""

    year: int
    terms: list[TermPeriods]


class PeriodsResponse(BaseModel):
    """Available reporting periods."""

    success: bool = True
    periods: list[YearPeriods]


class CacheInvalidateResponse(BaseModel):
    """Cache invalidation result."""

    success: bool = True
    pattern: str
    removed: int


class ErrorResponse(BaseModel):
    """Error payload for every failed request."""

    success: bool = False
    message: str
