"""DuckDB connection management.

DuckDB lets one process open a database file for writing, or several
processes open it read-only. The API reads through a read-only connection
unless its cache lives in the database; loaders take a write connection.
"""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_lock = threading.Lock()
_conn: duckdb.DuckDBPyConnection | None = None


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if main tables already exist."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'stats_cache'"
        ).fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def connect(path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open a writable connection with all tables created."""
    if path != ":memory:" and not Path(path).exists():
        logger.warning("DB not found: {}. Creating empty DB.", path)
    conn = duckdb.connect(path)
    init_tables(conn)
    return conn


def _ensure_db_exists(path: str) -> None:
    """Create the DB file with tables so it can be opened read-only."""
    if not Path(path).exists():
        connect(path).close()


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Get the process-wide connection; repositories take a cursor per query.

    The first call decides the access mode for the life of the process.
    """
    global _conn
    with _lock:
        if _conn is None:
            if read_only:
                _ensure_db_exists(DB_PATH)
                _conn = duckdb.connect(DB_PATH, read_only=True)
            else:
                _conn = connect(DB_PATH)
            logger.debug("DB connected: {} (read_only={})", DB_PATH, read_only)
        return _conn


def get_write_connection() -> duckdb.DuckDBPyConnection:
    """Get a separate writable connection (for ETL operations)."""
    return connect(DB_PATH)


def close_db() -> None:
    """Close the process-wide connection."""
    global _conn
    with _lock:
        if _conn is not None:
            _conn.close()
            _conn = None
            logger.debug("DB connection closed")
