"""CSV loading - hierarchy and weekly submissions into DuckDB."""

from dataclasses import dataclass, field
from pathlib import Path

import duckdb
import polars as pl
from loguru import logger

from etl.helpers import conform, get_known_school_ids

_INT = pl.Int64
_STR = pl.Utf8
_PARENTS = {"circuit_id": _INT, "district_id": _INT, "region_id": _INT}
_PERIOD = {"year": _INT, "term": _INT, "week_number": _INT}
_HEADCOUNTS = {
    "normal_boys_total": _INT,
    "normal_girls_total": _INT,
    "special_boys_total": _INT,
    "special_girls_total": _INT,
    "total_population": _INT,
}


@dataclass
class Dataset:
    """A loadable CSV kind and the table it lands in.

    ``parent`` names the table (and the column joining to its ``id``) whose
    hierarchy ids fill any ``inherits`` column left empty in the file.
    """

    table: str
    required: list[str]
    columns: dict[str, pl.DataType] = field(default_factory=dict)
    per_school: bool = False
    parent: tuple[str, str] | None = None
    inherits: tuple[str, ...] = ()

    @property
    def key(self) -> list[str]:
        """Primary key columns of the target table."""
        if not self.per_school:
            return ["id"]
        owner = "teacher_id" if "teacher_id" in self.columns else "school_id"
        return [owner, *_PERIOD]

    def select_sql(self) -> str:
        """SELECT over ``load_df`` with inherited ids filled from the parent."""
        exprs = [
            f"COALESCE(d.{col}, p.{col}) AS {col}" if col in self.inherits else f"d.{col}"
            for col in self.columns
        ]
        sql = f"SELECT {', '.join(exprs)} FROM load_df d"
        if self.parent:
            table, column = self.parent
            sql += f" LEFT JOIN {table} p ON d.{column} = p.id"
        return sql


_FROM_SCHOOL = {"parent": ("schools", "school_id"), "inherits": tuple(_PARENTS)}

DATASETS = {
    "regions": Dataset("regions", ["id", "name"], {"id": _INT, "name": _STR}),
    "districts": Dataset(
        "districts",
        ["id", "name", "region_id"],
        {"id": _INT, "name": _STR, "region_id": _INT},
    ),
    "circuits": Dataset(
        "circuits",
        ["id", "name", "district_id"],
        {"id": _INT, "name": _STR, "district_id": _INT, "region_id": _INT},
        parent=("districts", "district_id"),
        inherits=("region_id",),
    ),
    "schools": Dataset(
        "schools",
        ["id", "name", "circuit_id"],
        {"id": _INT, "name": _STR, **_PARENTS},
        parent=("circuits", "circuit_id"),
        inherits=("district_id", "region_id"),
    ),
    "enrolment": Dataset(
        "school_enrolment_totals",
        ["school_id", "total_population", *_PERIOD],
        {"school_id": _INT, **_PARENTS, **_HEADCOUNTS, **_PERIOD},
        per_school=True,
        **_FROM_SCHOOL,
    ),
    "student_attendance": Dataset(
        "school_student_attendance_totals",
        ["school_id", "total_population", *_PERIOD],
        {"school_id": _INT, **_PARENTS, **_HEADCOUNTS, **_PERIOD},
        per_school=True,
        **_FROM_SCHOOL,
    ),
    "teacher_attendance": Dataset(
        "teacher_attendances",
        ["teacher_id", "school_id", "school_session_days", "days_present", *_PERIOD],
        {
            "teacher_id": _INT,
            "school_id": _INT,
            **_PARENTS,
            "school_session_days": _INT,
            "days_present": _INT,
            "days_punctual": _INT,
            "days_absent": _INT,
            "lesson_plan_ratings": _STR,
            "exercises_given": _INT,
            "exercises_marked": _INT,
            **_PERIOD,
        },
        per_school=True,
        **_FROM_SCHOOL,
    ),
}


def read_csv(kind: str, path: str | Path) -> pl.DataFrame:
    """Read and conform a CSV for a dataset kind."""
    if kind not in DATASETS:
        raise ValueError(f"Unknown dataset: {kind}. Expected one of {', '.join(DATASETS)}")

    dataset = DATASETS[kind]
    df = pl.read_csv(path)
    missing = [c for c in dataset.required if c not in df.columns]
    if missing:
        raise ValueError(f"{Path(path).name}: missing columns {', '.join(missing)}")

    # Later rows win, as a resubmission replaces the earlier one
    return conform(df, dataset.columns).unique(subset=dataset.key, keep="last", maintain_order=True)


def load_frame(conn: duckdb.DuckDBPyConnection, kind: str, df: pl.DataFrame) -> int:
    """Write a conformed frame; rows with the same key are replaced."""
    dataset = DATASETS[kind]
    cols = ", ".join(dataset.columns)

    if dataset.per_school:
        known = get_known_school_ids(conn)
        unknown = set(df["school_id"].drop_nulls().unique().to_list()) - known
        if unknown:
            logger.warning("{}: {} unknown schools referenced, e.g. {}", kind, len(unknown), sorted(unknown)[:10])

    conn.register("load_df", df)
    try:
        conn.execute("BEGIN TRANSACTION")
        try:
            # Resubmitted keys replace the stored rows
            match = " AND ".join(f"{dataset.table}.{k} = d.{k}" for k in dataset.key)
            conn.execute(f"DELETE FROM {dataset.table} WHERE EXISTS (SELECT 1 FROM load_df d WHERE {match})")
            conn.execute(f"INSERT INTO {dataset.table} ({cols}) {dataset.select_sql()}")
            if dataset.inherits:
                orphans = conn.execute(
                    f"SELECT COUNT(*) FROM ({dataset.select_sql()}) WHERE region_id IS NULL"
                ).fetchone()[0]
                if orphans:
                    logger.warning("{}: {} rows have no region; load parent levels first", kind, orphans)
            conn.execute("COMMIT")
        except Exception:
            conn.execute("ROLLBACK")
            raise
    finally:
        conn.unregister("load_df")

    logger.info("{}: loaded {} rows into {}", kind, df.height, dataset.table)
    return df.height


def load_submissions(conn: duckdb.DuckDBPyConnection, kind: str, path: str | Path) -> int:
    """Load one CSV file. Returns rows loaded."""
    return load_frame(conn, kind, read_csv(kind, path))
