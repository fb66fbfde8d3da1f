"""Shared utilities for the reporting-lines pipeline."""

from reportlines.utils.io import read_delimited, write_output
from reportlines.utils.transforms import normalize_columns
from reportlines.utils.validators import validate_dataframe, validate_unique
from reportlines.utils.types import RunStatus, RunSummary, ValidationOutcome
