"""ETL helper functions."""

import duckdb
import polars as pl


def conform(df: pl.DataFrame, columns: dict[str, pl.DataType]) -> pl.DataFrame:
    """Select columns in table order, adding missing ones as nulls and casting types."""
    return df.select(
        [
            (pl.col(name) if name in df.columns else pl.lit(None)).cast(dtype, strict=False).alias(name)
            for name, dtype in columns.items()
        ]
    )


def get_known_school_ids(conn: duckdb.DuckDBPyConnection) -> set[int]:
    """IDs of schools registered in the hierarchy."""
    try:
        return {r[0] for r in conn.execute("SELECT id FROM schools").fetchall()}
    except duckdb.Error:
        return set()
