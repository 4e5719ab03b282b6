"""Region model - top of the administrative hierarchy."""

REGION_DDL = """
CREATE TABLE IF NOT EXISTS regions (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL
)
"""
