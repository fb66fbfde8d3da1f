"""Employee records and pandera schemas for the people table."""

from dataclasses import dataclass, field

import pandera as pa
from pandera import Column, Check

type EmployeeID = int

PEOPLE_COLUMNS = ["id", "manager_id", "cost_center", "job_title"]
RANKED_COLUMNS = PEOPLE_COLUMNS + ["recursive_reports"]


@dataclass
class Employee:
    id: EmployeeID
    manager_id: EmployeeID | None = None
    cost_center: str = ""
    job_title: str = ""
    recursive_reports: int = 0


@dataclass
class Node:
    """One employee plus the ids attached beneath it while linking the forest."""

    employee: Employee
    direct_reports: list[EmployeeID] = field(default_factory=list)

    @property
    def id(self) -> EmployeeID:
        return self.employee.id

    @property
    def manager_id(self) -> EmployeeID | None:
        return self.employee.manager_id


employee_schema = pa.DataFrameSchema(
    {
        "id": Column("int64", Check.greater_than_or_equal_to(0), unique=True),
        "manager_id": Column("Int64", Check.greater_than_or_equal_to(0), nullable=True),
        "cost_center": Column(str, nullable=False),
        "job_title": Column(str, nullable=False),
    },
    strict=False,
    coerce=True,
)


ranked_employee_schema = pa.DataFrameSchema(
    {
        "id": Column("int64", Check.greater_than_or_equal_to(0), unique=True),
        "manager_id": Column("Int64", nullable=True),
        "cost_center": Column(str),
        "job_title": Column(str),
        "recursive_reports": Column(
            "int64",
            Check.greater_than_or_equal_to(0),
            # Ranked output must already be in descending order.
            Check(
                lambda s: bool((s.diff().dropna() <= 0).all()),
                element_wise=False,
                error="recursive_reports not in descending order",
            ),
        ),
    },
    strict=True,
    ordered=True,
    coerce=True,
)
