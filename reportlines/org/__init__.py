"""Org hierarchy pipeline.

Reads the flat people table, rebuilds the reporting forest, counts everyone
reporting (directly or not) to each employee and writes the table back out
ranked by that count.
"""

import logging
from collections.abc import Iterable

from reportlines.config import PipelineConfig
from reportlines.org.counting import count_recursive_reports
from reportlines.org.errors import (
    CycleDetectedError,
    HierarchyError,
    InputAbsentError,
    MalformedInputRecordError,
    UnresolvedManagerReference,
)
from reportlines.org.export import write_people
from reportlines.org.hierarchy import OrgForest, build_forest
from reportlines.org.ingest import read_people
from reportlines.org.models import Employee
from reportlines.org.ranking import employees_to_frame, rank_employees
from reportlines.org.report import render_ranking
from reportlines.org.transform import normalize_people, to_employees
from reportlines.utils.types import RunStatus, RunSummary, StatusResult

logger = logging.getLogger(__name__)


def resolve_hierarchy(employees: Iterable[Employee]) -> tuple[OrgForest, list[Employee]]:
    """Build, check and count the forest, returning it with the ranked employees."""
    forest = build_forest(employees)
    count_recursive_reports(forest)
    return forest, rank_employees(forest)


def _load_employees(config: PipelineConfig) -> list[Employee] | None:
    raw = read_people(config.input_path)
    if raw is None:
        match config.missing_input:
            case "error":
                raise InputAbsentError(f"People export not found: {config.input_path}")
            case "empty":
                logger.warning("People export %s not found; continuing with no employees", config.input_path)
                return None
    return to_employees(normalize_people(raw))


def validate(config: PipelineConfig) -> StatusResult:
    """Check that the people export is present and well-formed."""
    try:
        employees = _load_employees(config)
    except InputAbsentError as exc:
        return {"status": "error", "message": str(exc)}
    except MalformedInputRecordError as exc:
        return {"status": "error", "message": "; ".join(exc.errors[:3])}

    if employees is None:
        return {"status": "skipped", "reason": f"{config.input_path} not found"}
    return {"status": "ok", "row_count": len(employees)}


def run(config: PipelineConfig, show_report: bool = True) -> RunSummary:
    """Execute the full pipeline: ingest, resolve, count, rank, export."""
    employees = _load_employees(config) or []
    forest, ranked = resolve_hierarchy(employees)

    if show_report:
        render_ranking(forest, ranked, limit=config.report_limit)

    written = write_people(employees_to_frame(ranked), config.output_path, config.output_format)

    return RunSummary(
        status=RunStatus.SUCCESS,
        employees=len(forest),
        roots=len(forest.roots),
        repaired_roots=len(forest.unresolved),
        output_path=str(written),
    )


__all__ = [
    "CycleDetectedError",
    "Employee",
    "HierarchyError",
    "InputAbsentError",
    "MalformedInputRecordError",
    "OrgForest",
    "UnresolvedManagerReference",
    "resolve_hierarchy",
    "run",
    "validate",
]
