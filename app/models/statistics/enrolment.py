"""Weekly enrolment totals per school."""

ENROLMENT_DDL = """
CREATE TABLE IF NOT EXISTS school_enrolment_totals (
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

ENROLMENT_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_enrolment_period ON school_enrolment_totals(year, term, week_number)",
]
