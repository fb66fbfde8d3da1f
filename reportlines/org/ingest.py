"""Ingest the flat people table from a delimited text export."""

import logging
from pathlib import Path

import pandas as pd

from reportlines.org.errors import MalformedInputRecordError
from reportlines.utils.io import read_delimited
from reportlines.utils.transforms import normalize_columns

logger = logging.getLogger(__name__)

# Header aliases seen in HRIS exports, matched after snake_case normalization.
COLUMN_ALIASES = {
    "employee_id": "id",
    "emp_id": "id",
    "employee": "id",
    "manager": "manager_id",
    "mgr_id": "manager_id",
    "manager_employee_id": "manager_id",
    "reports_to": "manager_id",
    "costcenter": "cost_center",
    "cost_centre": "cost_center",
    "title": "job_title",
    "jobtitle": "job_title",
}


def read_people(path: str | Path) -> pd.DataFrame | None:
    """Load the people table, or ``None`` when the file does not exist.

    A present file with no rows yields an empty frame, so callers can tell
    "no input" apart from "empty input" and apply their own policy.
    """
    path = Path(path)
    if not path.exists():
        logger.info("People export not found: %s", path)
        return None

    try:
        df = normalize_columns(read_delimited(path), COLUMN_ALIASES)
    except ValueError as exc:
        raise MalformedInputRecordError([str(exc)]) from exc
    logger.info("Read %d people records from %s", len(df), path.name)
    return df
