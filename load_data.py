#!/usr/bin/env python3
"""
Load submission CSVs into the statistics database and refresh the cache.

Usage:
    python load_data.py schools schools.csv            # Load hierarchy
    python load_data.py enrolment wk1.csv wk2.csv      # Load weekly submissions
    python load_data.py --validate 2024 1              # Check data for year/term
    python load_data.py --clear-cache                  # Drop cached statistics

Kinds: regions, districts, circuits, schools, enrolment,
       student_attendance, teacher_attendance

Load the hierarchy top-down (regions, districts, circuits, schools) so
missing parent ids can be filled from the level above.

Loading needs write access to the database file. DuckDB allows one writer
per file, so stop the API before loading; the API reopens the file and
serves fresh statistics on restart. With the memory cache backend,
--clear-cache asks a running API to drop its cache over HTTP.
"""

import asyncio
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import duckdb
import httpx
from loguru import logger

from app.container import container
from app.repositories.db import get_db, get_write_connection
from app.services.statistics.service import STATS_PATTERNS
from etl import DATASETS, load_submissions, validate_period
from settings import API_TIMEOUT, API_URL, CACHE_BACKEND, DB_PATH
from settings.logging import setup_logging


def open_write_connection() -> duckdb.DuckDBPyConnection:
    """Writable connection, or exit with a clear message when the file is locked."""
    try:
        return get_write_connection()
    except duckdb.IOException as e:
        logger.error("Cannot open {} for writing: {}", DB_PATH, e)
        logger.error("Another process (usually the API) holds the database; stop it and retry")
        sys.exit(1)


def run_validation(year: int, term: int) -> bool:
    """Print a validation report for a year and term."""
    result = validate_period(get_db(), year, term)
    status = "OK" if result["valid"] else "ISSUES"

    print("\n" + "=" * 60)
    print(f"DATA VALIDATION REPORT - {year} term {term}: {status}")
    print("=" * 60)
    for name, value in result["stats"].items():
        print(f"  {name}: {value:,}")
    for issue in result["issues"]:
        print(f"  ! {issue}")
    print("=" * 60 + "\n")

    return result["valid"]


def clear_api_cache(client: httpx.Client | None = None) -> int:
    """Drop cached statistics held in a running API process."""
    client = client or httpx.Client(base_url=API_URL, timeout=API_TIMEOUT)
    removed = 0
    with client:
        for pattern in STATS_PATTERNS:
            try:
                resp = client.delete("/api/cache", params={"pattern": pattern})
            except httpx.ConnectError:
                logger.info("API not running at {}; its memory cache is already gone", API_URL)
                return 0
            resp.raise_for_status()
            removed += resp.json()["removed"]
    logger.info("API at {} invalidated {} cached entries", API_URL, removed)
    return removed


def clear_cache(conn: duckdb.DuckDBPyConnection | None = None) -> int:
    """Invalidate cached statistics in the configured backend."""
    if CACHE_BACKEND == "memory":
        return clear_api_cache()

    if conn is None and CACHE_BACKEND == "duckdb":
        conn = open_write_connection()
    container.init(conn=conn, cache_backend=CACHE_BACKEND)
    removed = asyncio.run(container.statistics.invalidate_all())
    logger.info("Invalidated {} cached entries", removed)
    return removed


def main():
    setup_logging(level="INFO", to_file=True)
    args = sys.argv[1:]

    if "--clear-cache" in args:
        clear_cache()
        return

    if args and args[0] == "--validate":
        if len(args) != 3 or not all(a.isdigit() for a in args[1:]):
            print(__doc__)
            sys.exit(1)
        valid = run_validation(int(args[1]), int(args[2]))
        sys.exit(0 if valid else 2)

    if len(args) < 2 or args[0] not in DATASETS:
        print(__doc__)
        sys.exit(1)

    kind, paths = args[0], args[1:]
    conn = open_write_connection()
    total = 0
    for path in paths:
        total += load_submissions(conn, kind, path)
    logger.info("Loaded {} {} rows from {} file(s)", total, kind, len(paths))

    clear_cache(conn)
    conn.close()


if __name__ == "__main__":
    main()
