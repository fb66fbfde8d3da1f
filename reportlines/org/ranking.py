"""Rank employees by recursive report count."""

import pandas as pd

from reportlines.org.hierarchy import OrgForest
from reportlines.org.models import RANKED_COLUMNS, Employee


def rank_employees(forest: OrgForest) -> list[Employee]:
    """Employees sorted by ``recursive_reports``, highest first.

    The sort is stable, so employees with equal counts keep their ingestion
    order. No other tie-break is applied.
    """
    return sorted(forest.employees, key=lambda e: e.recursive_reports, reverse=True)


def employees_to_frame(employees: list[Employee]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "id": e.id,
                "manager_id": e.manager_id,
                "cost_center": e.cost_center,
                "job_title": e.job_title,
                "recursive_reports": e.recursive_reports,
            }
            for e in employees
        ],
        columns=RANKED_COLUMNS,
    )
    return df.astype({
        "id": "int64",
        "manager_id": "Int64",
        "cost_center": str,
        "job_title": str,
        "recursive_reports": "int64",
    })
