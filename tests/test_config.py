# tests/test_config.py
"""Layered pipeline configuration."""

from pathlib import Path

import pytest

from reportlines.config import PipelineConfig, load_pipeline_config


@pytest.fixture
def no_pyproject(tmp_path) -> Path:
    return tmp_path / "missing-pyproject.toml"


def test_defaults(tmp_path, no_pyproject):
    config = load_pipeline_config(pyproject=no_pyproject, config_dir=tmp_path)

    assert config == PipelineConfig()
    assert config.input_path == Path("people.csv")
    assert config.output_path == Path("sorted.csv")
    assert config.missing_input == "error"


def test_pyproject_table(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[tool.reportlines]\ninput_path = "in.csv"\nreport_limit = 5\n')

    config = load_pipeline_config(pyproject=pyproject, config_dir=tmp_path)

    assert config.input_path == Path("in.csv")
    assert config.report_limit == 5


def test_yaml_overrides_pyproject(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[tool.reportlines]\ninput_path = "in.csv"\noutput_format = "csv"\n')
    (tmp_path / "reportlines.yaml").write_text("reportlines:\n  output_format: JSON\n  missing_input: empty\n")

    config = load_pipeline_config(pyproject=pyproject, config_dir=tmp_path)

    assert config.input_path == Path("in.csv")
    assert config.output_format == "json"
    assert config.missing_input == "empty"


def test_flat_yaml_mapping(tmp_path, no_pyproject):
    (tmp_path / "reportlines.yaml").write_text("log_level: debug\n")

    config = load_pipeline_config(pyproject=no_pyproject, config_dir=tmp_path)

    assert config.log_level == "DEBUG"


def test_overrides_win_and_none_is_ignored(tmp_path, no_pyproject):
    (tmp_path / "reportlines.yaml").write_text("output_path: from-yaml.csv\n")

    config = load_pipeline_config(
        {"output_path": "cli.csv", "input_path": None},
        pyproject=no_pyproject,
        config_dir=tmp_path,
    )

    assert config.output_path == Path("cli.csv")
    assert config.input_path == Path("people.csv")


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"output_format": "xml"}, "Unknown output format"),
        ({"missing_input": "ignore"}, "Unknown missing-input policy"),
        ({"report_limit": -1}, "non-negative"),
        ({"log_level": "chatty"}, "Unknown log level"),
        ({"colour": "blue"}, "Unknown config keys"),
    ],
)
def test_invalid_values(tmp_path, no_pyproject, overrides, message):
    with pytest.raises(ValueError, match=message):
        load_pipeline_config(overrides, pyproject=no_pyproject, config_dir=tmp_path)


def test_yaml_must_be_mapping(tmp_path, no_pyproject):
    (tmp_path / "reportlines.yaml").write_text("- just\n- a list\n")

    with pytest.raises(ValueError, match="must contain a mapping"):
        load_pipeline_config(pyproject=no_pyproject, config_dir=tmp_path)
