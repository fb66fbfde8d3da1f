# tests/conftest.py
"""Shared fixtures for the reporting-lines tests."""

import os
from pathlib import Path

import pytest
from hypothesis import settings

from reportlines.org.models import Employee

settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("nightly", max_examples=1000, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "ci"))


def make_employees(pairs: list[tuple[int, int | None]]) -> list[Employee]:
    """Employees from (id, manager_id) pairs, in the given order."""
    return [Employee(id=i, manager_id=m, job_title=f"title-{i}") for i, m in pairs]


@pytest.fixture
def scenario_a() -> list[Employee]:
    return make_employees([(1, None), (2, 1), (3, 1), (4, 2)])


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write CSV text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "people.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write
