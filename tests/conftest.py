"""Shared fixtures - in-memory database seeded with a small hierarchy."""

import pytest

from app.repositories.db import connect

REGIONS = [(1, "Greater Accra"), (2, "Ashanti")]
DISTRICTS = [(10, "Accra Metro", 1), (20, "Kumasi Metro", 2)]
CIRCUITS = [(100, "Osu", 10, 1), (101, "Labadi", 10, 1), (200, "Asokwa", 20, 2)]
SCHOOLS = [
    (1000, "Osu Presby Basic", 100, 10, 1),
    (1001, "Christiansborg Basic", 100, 10, 1),
    (1010, "La Wireless Basic", 101, 10, 1),
    (2000, "Asokwa M/A Basic", 200, 20, 2),
]

# school, circuit, district, region, normal boys, normal girls, special boys, special girls, population, y, t, w
ENROLMENT = [
    (1000, 100, 10, 1, 50, 45, 2, 3, 100, 2024, 1, 1),
    (1000, 100, 10, 1, 52, 46, 2, 3, 103, 2024, 1, 2),
    (1000, 100, 10, 1, 40, 40, 0, 0, 80, 2023, 3, 5),
    (1001, 100, 10, 1, 30, 30, 0, 0, 60, 2024, 1, 1),
    (2000, 200, 20, 2, 10, 10, 0, 0, 20, 2024, 1, 1),
]

STUDENT_ATTENDANCE = [
    (1000, 100, 10, 1, 40, 35, 2, 3, 100, 2024, 1, 1),
    (1000, 100, 10, 1, 45, 40, 1, 2, 103, 2024, 1, 2),
    (1001, 100, 10, 1, 25, 25, 0, 0, 60, 2024, 1, 1),
]

# teacher, school, circuit, district, region, session, present, punctual, absent, rating, given, marked, y, t, w
TEACHER_ATTENDANCE = [
    (1, 1000, 100, 10, 1, 5, 5, 4, 0, "good", 10, 8, 2024, 1, 1),
    (2, 1000, 100, 10, 1, 5, 4, 4, 1, "excellent", 10, 10, 2024, 1, 1),
    (3, 1001, 100, 10, 1, 5, 3, 3, 2, None, 0, 0, 2024, 1, 1),
]


def seed(conn) -> None:
    conn.executemany("INSERT INTO regions VALUES (?, ?)", REGIONS)
    conn.executemany("INSERT INTO districts VALUES (?, ?, ?)", DISTRICTS)
    conn.executemany("INSERT INTO circuits VALUES (?, ?, ?, ?)", CIRCUITS)
    conn.executemany("INSERT INTO schools VALUES (?, ?, ?, ?, ?)", SCHOOLS)
    for table, rows in (
        ("school_enrolment_totals", ENROLMENT),
        ("school_student_attendance_totals", STUDENT_ATTENDANCE),
    ):
        conn.executemany(
            f"""
            INSERT INTO {table} (school_id, circuit_id, district_id, region_id,
                normal_boys_total, normal_girls_total, special_boys_total, special_girls_total,
                total_population, year, term, week_number)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            rows,
        )
    conn.executemany(
        """
        INSERT INTO teacher_attendances (teacher_id, school_id, circuit_id, district_id, region_id,
            school_session_days, days_present, days_punctual, days_absent, lesson_plan_ratings,
            exercises_given, exercises_marked, year, term, week_number)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        TEACHER_ATTENDANCE,
    )


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def conn():
    conn = connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def seeded_conn(conn):
    seed(conn)
    return conn


@pytest.fixture
def clock():
    return FakeClock()
