"""File I/O utilities for reading and writing pipeline data."""

import logging
from pathlib import Path

import pandas as pd

type FilePath = str | Path

logger = logging.getLogger(__name__)

ENCODINGS = ("utf-8", "latin-1", "cp1252")


def read_delimited(path: FilePath, sep: str = ",") -> pd.DataFrame:
    """Read a delimited text file as strings, handling encoding quirks.

    Every column is read as ``str`` so that type coercion stays with the
    caller; blank cells come back as NA.
    """
    path = Path(path)
    for encoding in ENCODINGS:
        try:
            return pd.read_csv(path, sep=sep, dtype=str, encoding=encoding, skipinitialspace=True)
        except UnicodeDecodeError:
            continue
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
    raise ValueError(f"Could not decode {path}")


def write_output(df: pd.DataFrame, path: FilePath, fmt: str = "csv") -> Path:
    """Write a DataFrame to the specified format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    match fmt:
        case "csv":
            df.to_csv(path, index=False)
        case "parquet":
            df.to_parquet(path, index=False)
        case "excel":
            df.to_excel(path, index=False, engine="openpyxl")
        case "json":
            df.to_json(path, orient="records", indent=2)
        case other:
            raise ValueError(f"Unsupported output format: {other}")

    logger.info("Wrote %d rows to %s", len(df), path)
    return path
