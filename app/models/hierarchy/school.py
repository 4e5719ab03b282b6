"""School model."""

SCHOOL_DDL = """
CREATE TABLE IF NOT EXISTS schools (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    circuit_id INTEGER,
    district_id INTEGER,
    region_id INTEGER
)
"""

SCHOOL_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_schools_circuit ON schools(circuit_id)",
    "CREATE INDEX IF NOT EXISTS idx_schools_district ON schools(district_id)",
    "CREATE INDEX IF NOT EXISTS idx_schools_region ON schools(region_id)",
]
