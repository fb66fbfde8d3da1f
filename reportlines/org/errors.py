"""Error types raised while resolving the reporting hierarchy."""

from dataclasses import dataclass


class HierarchyError(ValueError):
    """Base class for fatal hierarchy problems."""


class CycleDetectedError(HierarchyError):
    def __init__(self, chain: list[int]):
        self.chain = list(chain)
        super().__init__(f"Detected a cycle between employees: {self.chain}")


class MalformedInputRecordError(HierarchyError):
    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        detail = "; ".join(self.errors[:5])
        if len(self.errors) > 5:
            detail += f" (+{len(self.errors) - 5} more)"
        super().__init__(f"Malformed employee records: {detail}")


class InputAbsentError(FileNotFoundError):
    """Raised by the run layer when a missing input file is not allowed."""


@dataclass(frozen=True)
class UnresolvedManagerReference:
    """A manager id that matched nobody; the employee was promoted to root."""

    employee_id: int
    manager_id: int

    def describe(self) -> str:
        return (
            f"Employee {self.employee_id} has manager {self.manager_id} that cannot "
            "be found in the list. Proceeding as if this employee had no manager."
        )
