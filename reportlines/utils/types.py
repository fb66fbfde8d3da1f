"""Shared type definitions for the pipeline."""

from dataclasses import dataclass
from enum import StrEnum

type ValidationOutcome = dict[str, bool | str | list[str]]
type StatusResult = dict[str, str | int]


class RunStatus(StrEnum):
    SUCCESS = "success"


@dataclass(frozen=True)
class RunSummary:
    status: RunStatus
    employees: int
    roots: int
    repaired_roots: int
    output_path: str | None = None
