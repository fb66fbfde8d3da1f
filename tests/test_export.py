# tests/test_export.py
"""Writing the ranked table."""

import json

import pandas as pd
import pytest

from conftest import make_employees
from reportlines.org import resolve_hierarchy
from reportlines.org.errors import HierarchyError
from reportlines.org.export import infer_format, write_people
from reportlines.org.ranking import employees_to_frame


@pytest.fixture
def ranked_frame(scenario_a) -> pd.DataFrame:
    _, ranked = resolve_hierarchy(scenario_a)
    return employees_to_frame(ranked)


def test_csv_round_shape(tmp_path, ranked_frame):
    path = write_people(ranked_frame, tmp_path / "out" / "sorted.csv", "csv")
    lines = path.read_text().splitlines()

    assert lines[0] == "id,manager_id,cost_center,job_title,recursive_reports"
    assert lines[1] == "1,,,title-1,3"
    assert lines[2] == "2,1,,title-2,1"


def test_json_records(tmp_path, ranked_frame):
    path = write_people(ranked_frame, tmp_path / "sorted.json", "json")
    records = json.loads(path.read_text())

    assert [r["id"] for r in records][:2] == [1, 2]
    assert records[0]["manager_id"] is None


def test_parquet(tmp_path, ranked_frame):
    pytest.importorskip("pyarrow")
    path = write_people(ranked_frame, tmp_path / "sorted.parquet", "parquet")

    assert pd.read_parquet(path)["recursive_reports"].tolist() == [3, 1, 0, 0]


def test_unknown_format(tmp_path, ranked_frame):
    with pytest.raises(ValueError, match="Unsupported output format"):
        write_people(ranked_frame, tmp_path / "sorted.xml", "xml")


def test_unsorted_output_rejected(tmp_path):
    _, ranked = resolve_hierarchy(make_employees([(1, None), (2, 1)]))
    frame = employees_to_frame(list(reversed(ranked)))

    with pytest.raises(HierarchyError, match="failed validation"):
        write_people(frame, tmp_path / "sorted.csv")
    assert not (tmp_path / "sorted.csv").exists()


@pytest.mark.parametrize(
    ("name", "expected"),
    [("a.csv", "csv"), ("a.JSON", "json"), ("a.parquet", "parquet"), ("a.xlsx", "excel"), ("a.txt", "csv")],
)
def test_infer_format(name, expected):
    assert infer_format(name) == expected
