"""Pure aggregation formulas - fold per-entity stat rows into summaries.

Rows are plain mappings as produced by the repositories (or decoded from
JSON). Missing or null numbers count as zero and every rate guards its
denominator, so sparse reporting data never raises.
"""
import re
from collections import defaultdict
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal

RATINGS = ("excellent", "good", "fair", "poor", "not_rated")

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def round_half_up(value: float, digits: int = 0) -> float | int:
    """Round like a spreadsheet: 0.5 goes up. Integer result when digits=0."""
    exp = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(exp, rounding=ROUND_HALF_UP)
    return int(rounded) if digits == 0 else float(rounded)


def _num(row: Mapping, field: str) -> float:
    """Numeric field by camelCase or snake_case name, 0 when absent."""
    value = row.get(field)
    if value is None:
        value = row.get(_CAMEL.sub("_", field).lower())
    return value or 0


def _total(rows: Iterable[Mapping], field: str) -> float:
    return sum(_num(r, field) for r in rows)


def rate(part: float, whole: float) -> float:
    """Percentage of part in whole, 0 on a non-positive whole."""
    return part / whole * 100 if whole > 0 else 0


def aggregate_enrollment(rows: list[Mapping] | None) -> dict:
    """Total students and gender split across rows."""
    rows = rows or []
    special_boys = _total(rows, "specialBoys")
    special_girls = _total(rows, "specialGirls")
    return {
        "totalStudents": _total(rows, "totalStudents"),
        "genderDistribution": {
            "boys": _total(rows, "boys"),
            "girls": _total(rows, "girls"),
        },
        "specialNeeds": {
            "boys": special_boys,
            "girls": special_girls,
            "total": special_boys + special_girls,
        },
    }


def aggregate_student_attendance(rows: list[Mapping] | None) -> dict:
    """Enrolled/present totals and whole-percent attendance rate."""
    rows = rows or []
    enrolled = _total(rows, "totalEnrolled")
    present = _total(rows, "totalPresent")
    return {
        "totalEnrolled": enrolled,
        "totalPresent": present,
        "attendanceRate": round_half_up(rate(present, enrolled)) if enrolled > 0 else 0,
    }


def aggregate_teacher_attendance(rows: list[Mapping] | None) -> dict:
    """Teacher totals and attendance/punctuality/exercise rates (2 dp).

    ``totalTeachers`` is the sum of each row's own total, so rows may be
    per-school summaries or single teachers (``totalTeachers: 1``).
    """
    rows = rows or []
    session_days = _total(rows, "sessionDays")
    present = _total(rows, "daysPresent")
    punctual = _total(rows, "daysPunctual")
    given = _total(rows, "exercisesGiven")
    marked = _total(rows, "exercisesMarked")
    return {
        "totalTeachers": _total(rows, "totalTeachers"),
        "attendanceRate": round_half_up(rate(present, session_days), 2),
        "punctualityRate": round_half_up(rate(punctual, present), 2),
        "exerciseCompletionRate": round_half_up(rate(marked, given), 2),
    }


def lesson_plan_quality(ratings: list[str | None] | None) -> dict | None:
    """Count and share of each lesson plan rating."""
    if not ratings:
        return None

    counts = defaultdict(int)
    for r in ratings:
        key = (r or "not_rated").strip().lower()
        counts[key if key in RATINGS else "not_rated"] += 1

    total = len(ratings)
    return {
        name: {"count": counts[name], "percentage": round_half_up(counts[name] / total * 100, 2)}
        for name in RATINGS
    }


def group_periods(rows: list[Mapping] | None) -> list[dict]:
    """Nest (year, term, week) rows: years and terms newest first, weeks ascending."""
    grouped: dict[int, dict[int, set]] = defaultdict(lambda: defaultdict(set))
    for row in rows or []:
        if row.get("year") is None or row.get("term") is None:
            continue
        weeks = grouped[row["year"]][row["term"]]
        week = row.get("week", row.get("week_number"))
        if week is not None:
            weeks.add(week)

    return [
        {
            "year": year,
            "terms": [
                {"term": term, "weeks": sorted(terms[term])}
                for term in sorted(terms, reverse=True)
            ],
        }
        for year, terms in sorted(grouped.items(), reverse=True)
    ]
