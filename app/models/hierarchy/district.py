"""District model."""

DISTRICT_DDL = """
CREATE TABLE IF NOT EXISTS districts (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    region_id INTEGER
)
"""

DISTRICT_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_districts_region ON districts(region_id)",
]
