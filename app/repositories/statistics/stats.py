"""Statistics repository - per-school stat rows for a filter."""

from loguru import logger

from app.models.statistics import EntityType, StatsFilter
from app.repositories.base import BaseRepository


class StatsRepository(BaseRepository):
    """Reads submissions and shapes them into per-school stat rows.

    Enrolment is a head count, so each school contributes its latest
    submission inside the period. Attendance figures are summed per school
    over every week in the period.
    """

    def enrolment_rows(self, f: StatsFilter) -> list[dict]:
        """Latest enrolment per school under the entity."""
        period, params = f.period_clause()
        rows = self.fetchdicts(
            f"""
            SELECT school_id AS schoolId, year, term, week_number AS week,
                   total_population AS totalStudents,
                   COALESCE(normal_boys_total, 0) + COALESCE(special_boys_total, 0) AS boys,
                   COALESCE(normal_girls_total, 0) + COALESCE(special_girls_total, 0) AS girls,
                   special_boys_total AS specialBoys,
                   special_girls_total AS specialGirls
            FROM school_enrolment_totals
            WHERE {f.entity_type.column} = ?{period}
            QUALIFY ROW_NUMBER() OVER (
                PARTITION BY school_id
                ORDER BY year DESC, term DESC, week_number DESC, created_at DESC
            ) = 1
            ORDER BY school_id
            """,
            [f.entity_id, *params],
        )
        logger.debug("enrolment_rows({}): {} rows", f.cache_key(), len(rows))
        return rows

    def student_attendance_rows(self, f: StatsFilter) -> list[dict]:
        """Enrolled vs present totals per school over the period."""
        period, params = f.period_clause()
        rows = self.fetchdicts(
            f"""
            SELECT school_id AS schoolId,
                   SUM(total_population) AS totalEnrolled,
                   SUM(COALESCE(normal_boys_total, 0) + COALESCE(normal_girls_total, 0)
                       + COALESCE(special_boys_total, 0) + COALESCE(special_girls_total, 0)) AS totalPresent
            FROM school_student_attendance_totals
            WHERE {f.entity_type.column} = ?{period}
            GROUP BY school_id
            ORDER BY school_id
            """,
            [f.entity_id, *params],
        )
        logger.debug("student_attendance_rows({}): {} rows", f.cache_key(), len(rows))
        return rows

    def teacher_attendance_rows(self, f: StatsFilter) -> list[dict]:
        """Teacher counts and day/exercise sums per school over the period."""
        period, params = f.period_clause()
        rows = self.fetchdicts(
            f"""
            SELECT school_id AS schoolId,
                   COUNT(DISTINCT teacher_id) AS totalTeachers,
                   SUM(school_session_days) AS sessionDays,
                   SUM(days_present) AS daysPresent,
                   SUM(days_punctual) AS daysPunctual,
                   SUM(exercises_given) AS exercisesGiven,
                   SUM(exercises_marked) AS exercisesMarked
            FROM teacher_attendances
            WHERE {f.entity_type.column} = ?{period}
            GROUP BY school_id
            ORDER BY school_id
            """,
            [f.entity_id, *params],
        )
        logger.debug("teacher_attendance_rows({}): {} rows", f.cache_key(), len(rows))
        return rows

    def lesson_plan_ratings(self, f: StatsFilter) -> list[str | None]:
        """Raw lesson plan rating per teacher submission."""
        period, params = f.period_clause()
        rows = self.fetchall(
            f"SELECT lesson_plan_ratings FROM teacher_attendances WHERE {f.entity_type.column} = ?{period}",
            [f.entity_id, *params],
        )
        return [r[0] for r in rows]

    def period_rows(self, entity_type: EntityType | None = None, entity_id: int | None = None) -> list[dict]:
        """Distinct (year, term, week) with enrolment submissions, newest first."""
        where, params = "", []
        if entity_type is not None and entity_id is not None:
            where, params = f"WHERE {entity_type.column} = ?", [entity_id]
        return self.fetchdicts(
            f"""
            SELECT DISTINCT year, term, week_number AS week
            FROM school_enrolment_totals
            {where}
            ORDER BY year DESC, term DESC, week DESC
            """,
            params,
        )
