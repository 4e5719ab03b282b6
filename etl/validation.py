"""Data validation functions."""

import duckdb


def validate_period(conn: duckdb.DuckDBPyConnection, year: int, term: int) -> dict:
    """Validate submission integrity for a year and term."""
    issues = []
    stats = {}

    enrolment = conn.execute(
        "SELECT COUNT(*), COUNT(DISTINCT school_id) FROM school_enrolment_totals WHERE year = ? AND term = ?",
        [year, term],
    ).fetchone()
    stats["enrolment_rows"] = enrolment[0]
    stats["schools_reporting"] = enrolment[1]
    if enrolment[0] == 0:
        issues.append("No enrolment submissions found")

    attendance_check = conn.execute(
        """
        SELECT
            COUNT(*) as total,
            SUM(CASE WHEN COALESCE(normal_boys_total, 0) + COALESCE(normal_girls_total, 0)
                          + COALESCE(special_boys_total, 0) + COALESCE(special_girls_total, 0)
                          > total_population THEN 1 ELSE 0 END) as over
        FROM school_student_attendance_totals WHERE year = ? AND term = ?
        """,
        [year, term],
    ).fetchone()
    stats["student_attendance_rows"] = attendance_check[0] or 0
    over = attendance_check[1] or 0
    if over > 0:
        issues.append(f"{over} attendance rows report more present than enrolled")

    teacher_check = conn.execute(
        """
        SELECT
            COUNT(*) as total,
            SUM(CASE WHEN days_present > school_session_days THEN 1 ELSE 0 END) as over_present,
            SUM(CASE WHEN days_punctual > days_present THEN 1 ELSE 0 END) as over_punctual,
            SUM(CASE WHEN exercises_marked > exercises_given THEN 1 ELSE 0 END) as over_marked
        FROM teacher_attendances WHERE year = ? AND term = ?
        """,
        [year, term],
    ).fetchone()
    stats["teacher_rows"] = teacher_check[0] or 0
    for count, label in (
        (teacher_check[1], "present more days than the session"),
        (teacher_check[2], "punctual more days than present"),
        (teacher_check[3], "more exercises marked than given"),
    ):
        if count:
            issues.append(f"{count} teacher rows {label}")

    orphans = conn.execute(
        """
        SELECT COUNT(DISTINCT e.school_id) FROM school_enrolment_totals e
        LEFT JOIN schools s ON s.id = e.school_id
        WHERE e.year = ? AND e.term = ? AND s.id IS NULL
        """,
        [year, term],
    ).fetchone()[0]
    stats["unknown_schools"] = orphans
    if orphans > 0:
        issues.append(f"{orphans} reporting schools missing from the hierarchy")

    return {
        "year": year,
        "term": term,
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
