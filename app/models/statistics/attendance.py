"""Student and teacher attendance submissions."""

STUDENT_ATTENDANCE_DDL = """
CREATE TABLE IF NOT EXISTS school_student_attendance_totals (
    school_id INTEGER NOT NULL,
    circuit_id INTEGER,
    district_id INTEGER,
    region_id INTEGER,
    normal_boys_total INTEGER,
    normal_girls_total INTEGER,
    special_boys_total INTEGER,
    special_girls_total INTEGER,
    total_population INTEGER,
    year INTEGER NOT NULL,
    term INTEGER NOT NULL,
    week_number INTEGER NOT NULL,
    created_at TIMESTAMP DEFAULT current_timestamp,
    PRIMARY KEY (school_id, year, term, week_number)
)
"""

# One row per teacher per reporting week
TEACHER_ATTENDANCE_DDL = """
CREATE TABLE IF NOT EXISTS teacher_attendances (
    teacher_id INTEGER NOT NULL,
    school_id INTEGER NOT NULL,
    circuit_id INTEGER,
    district_id INTEGER,
    region_id INTEGER,
    school_session_days INTEGER,
    days_present INTEGER,
    days_punctual INTEGER,
    days_absent INTEGER,
    lesson_plan_ratings VARCHAR,
    exercises_given INTEGER,
    exercises_marked INTEGER,
    year INTEGER NOT NULL,
    term INTEGER NOT NULL,
    week_number INTEGER NOT NULL,
    created_at TIMESTAMP DEFAULT current_timestamp,
    PRIMARY KEY (teacher_id, year, term, week_number)
)
"""

ATTENDANCE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_student_att_period ON school_student_attendance_totals(year, term, week_number)",
    "CREATE INDEX IF NOT EXISTS idx_teacher_att_school ON teacher_attendances(school_id)",
]
