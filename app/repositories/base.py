"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality.

    The connection is shared by every repository; each query runs on its own
    cursor so repositories can be used from worker threads.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db()
        logger.debug("{} initialized", self.__class__.__name__)

    def _run(self, query: str, params: list | None, fetch) -> Any:
        cursor = self._db.cursor()
        try:
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            return fetch(cursor)
        finally:
            cursor.close()

    def execute(self, query: str, params: list | None = None) -> None:
        """Execute SQL statement."""
        self._run(query, params, lambda _: None)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self._run(query, params, lambda c: c.fetchall())

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self._run(query, params, lambda c: c.fetchone())

    def fetchdicts(self, query: str, params: list | None = None) -> list[dict]:
        """Execute and fetch all rows as dicts keyed by column alias."""

        def fetch(cursor) -> list[dict]:
            columns = [d[0] for d in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]

        return self._run(query, params, fetch)
