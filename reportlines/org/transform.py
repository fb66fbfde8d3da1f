"""Normalize raw people rows into typed employee records."""

import logging

import pandas as pd

from reportlines.org.errors import MalformedInputRecordError
from reportlines.org.models import PEOPLE_COLUMNS, Employee, employee_schema
from reportlines.utils.validators import validate_dataframe, validate_unique

logger = logging.getLogger(__name__)

OPTIONAL_TEXT_COLUMNS = ("cost_center", "job_title")


# Integral text forms accepted for ids: plain digits, optionally with a zero
# fraction as spreadsheets export them ("12" or "12.0").
INTEGER_PATTERN = r"^(?P<sign>[+-]?)(?P<digits>\d+)(?:\.(?P<fraction>\d*))?$"
INT64_MAX = str(2**63 - 1)


def _row_numbers(mask: pd.Series) -> list[int]:
    """1-based data row numbers for the flagged rows."""
    return [int(i) + 1 for i in mask[mask].index]


def _parse_integer_column(raw: pd.Series, name: str, required: bool) -> tuple[pd.Series, list[str]]:
    """Parse a string column into exact nullable integers, collecting row-level problems.

    Values never pass through floating point, so every id that fits in int64
    comes out exactly as written.
    """
    text = raw.astype("string").str.strip().replace("", pd.NA)
    parts = text.str.extract(INTEGER_PATTERN).fillna("")
    matched = (parts["digits"] != "").astype(bool)
    stripped = parts["digits"].str.lstrip("0")
    # "000" keeps a single zero; unmatched rows stay empty.
    digits = stripped.where(~matched | (stripped != ""), "0")
    errors = []

    missing = text.isna().astype(bool)
    if required and missing.any():
        errors.append(f"'{name}' is blank in rows {_row_numbers(missing)}")

    not_numeric = ~missing & ~matched
    if not_numeric.any():
        errors.append(f"'{name}' is not a number in rows {_row_numbers(not_numeric)}")

    fractional = matched & (parts["fraction"].str.strip("0") != "").astype(bool)
    if fractional.any():
        errors.append(f"'{name}' is not an integer in rows {_row_numbers(fractional)}")

    negative = matched & (parts["sign"] == "-").astype(bool) & (digits != "0").astype(bool)
    if negative.any():
        errors.append(f"'{name}' is negative in rows {_row_numbers(negative)}")

    lengths = digits.str.len()
    too_large = matched & (
        (lengths > len(INT64_MAX)) | ((lengths == len(INT64_MAX)) & (digits > INT64_MAX))
    ).astype(bool)
    if too_large.any():
        errors.append(f"'{name}' exceeds {INT64_MAX} in rows {_row_numbers(too_large)}")

    if errors:
        return raw, errors
    values = [int(d) if d else None for d in digits]
    return pd.Series(values, index=raw.index, dtype="Int64"), []


def normalize_people(raw_df: pd.DataFrame) -> pd.DataFrame:
    """Apply type coercion and defaults to the aliased people table."""
    if len(raw_df.columns) == 0:
        return pd.DataFrame({
            "id": pd.Series(dtype="int64"),
            "manager_id": pd.Series(dtype="Int64"),
            "cost_center": pd.Series(dtype=str),
            "job_title": pd.Series(dtype=str),
        })
    if "id" not in raw_df.columns:
        raise MalformedInputRecordError([f"missing required column 'id' (found {list(raw_df.columns)})"])

    df = raw_df.reset_index(drop=True).copy()
    errors = []

    df["id"], id_errors = _parse_integer_column(df["id"], "id", required=True)
    errors.extend(id_errors)

    if "manager_id" in df.columns:
        df["manager_id"], mgr_errors = _parse_integer_column(df["manager_id"], "manager_id", required=False)
        errors.extend(mgr_errors)
    else:
        df["manager_id"] = pd.Series(pd.NA, index=df.index, dtype="Int64")

    if errors:
        raise MalformedInputRecordError(errors)

    df["id"] = df["id"].astype("int64")
    for col in OPTIONAL_TEXT_COLUMNS:
        if col not in df.columns:
            df[col] = ""
        df[col] = df[col].fillna("").astype(str).str.strip()

    match validate_unique(df, ["id"]):
        case {"valid": False, "errors": errs}:
            raise MalformedInputRecordError(errs)

    match validate_dataframe(df, employee_schema):
        case {"valid": False, "errors": errs}:
            raise MalformedInputRecordError(errs)

    logger.info("Normalized %d employee records", len(df))
    return df[PEOPLE_COLUMNS]


def to_employees(df: pd.DataFrame) -> list[Employee]:
    """Materialize normalized rows as Employee records, in ingestion order."""
    employees = []
    for row in df[PEOPLE_COLUMNS].itertuples(index=False):
        employees.append(Employee(
            id=int(row.id),
            manager_id=None if pd.isna(row.manager_id) else int(row.manager_id),
            cost_center=row.cost_center,
            job_title=row.job_title,
        ))
    return employees
