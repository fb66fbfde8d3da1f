"""Write the ranked people table back out."""

from pathlib import Path

import pandas as pd

from reportlines.org.errors import HierarchyError
from reportlines.org.models import ranked_employee_schema
from reportlines.utils.io import write_output
from reportlines.utils.validators import validate_dataframe

SUFFIXES = {"csv": ".csv", "json": ".json", "parquet": ".parquet", "excel": ".xlsx"}


def infer_format(path: str | Path, default: str | None = "csv") -> str | None:
    """Guess the output format from a file suffix."""
    suffix = Path(path).suffix.lower()
    for fmt, known in SUFFIXES.items():
        if suffix == known:
            return fmt
    return default


def write_people(ranked: pd.DataFrame, path: str | Path, fmt: str = "csv") -> Path:
    """Validate and persist the ranked table."""
    match validate_dataframe(ranked, ranked_employee_schema):
        case {"valid": False, "errors": errs}:
            raise HierarchyError("Ranked output failed validation: " + "; ".join(errs[:5]))

    return write_output(ranked, path, fmt)
