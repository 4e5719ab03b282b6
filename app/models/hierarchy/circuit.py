"""Circuit model - group of schools inside a district."""

CIRCUIT_DDL = """
CREATE TABLE IF NOT EXISTS circuits (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    district_id INTEGER,
    region_id INTEGER
)
"""

CIRCUIT_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_circuits_district ON circuits(district_id)",
]
