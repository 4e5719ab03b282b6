"""ETL package - CSV submissions into the statistics database."""

from etl.load import DATASETS, load_frame, load_submissions, read_csv
from etl.validation import validate_period

__all__ = [
    "DATASETS",
    "read_csv",
    "load_frame",
    "load_submissions",
    "validate_period",
]
