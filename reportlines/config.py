"""Pipeline configuration and environment setup."""

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

type ConfigDict = dict[str, str | int | None]

OUTPUT_FORMATS = ("csv", "json", "parquet", "excel")
MISSING_INPUT_POLICIES = ("empty", "error")

PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"
YAML_CONFIG_NAME = "reportlines.yaml"


@dataclass(frozen=True)
class PipelineConfig:
    input_path: Path = Path("people.csv")
    output_path: Path = Path("sorted.csv")
    output_format: str = "csv"
    missing_input: str = "error"
    report_limit: int | None = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {self.output_format}")
        if self.missing_input not in MISSING_INPUT_POLICIES:
            raise ValueError(f"Unknown missing-input policy: {self.missing_input}")
        if self.report_limit is not None and self.report_limit < 0:
            raise ValueError(f"report_limit must be non-negative, got {self.report_limit}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")


def get_pyproject_config(pyproject: Path = PYPROJECT_PATH) -> ConfigDict:
    """Read pipeline config from the ``[tool.reportlines]`` table of pyproject.toml."""
    if not pyproject.exists():
        return {}
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("reportlines", {})


def get_yaml_config(directory: Path | None = None) -> ConfigDict:
    config_path = (directory or Path.cwd()) / YAML_CONFIG_NAME
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    match data:
        case {"reportlines": dict(section)}:
            return section
        case dict():
            return data
        case other:
            raise ValueError(f"{config_path} must contain a mapping, got {type(other).__name__}")


def _coerce(values: ConfigDict) -> dict:
    known = {f.name for f in fields(PipelineConfig)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    coerced = {}
    for key, value in values.items():
        match key:
            case "input_path" | "output_path":
                coerced[key] = Path(value)
            case "report_limit":
                coerced[key] = None if value is None else int(value)
            case "output_format" | "missing_input":
                coerced[key] = str(value).lower()
            case "log_level":
                coerced[key] = str(value).upper()
    return coerced


def load_pipeline_config(
    overrides: ConfigDict | None = None,
    pyproject: Path = PYPROJECT_PATH,
    config_dir: Path | None = None,
) -> PipelineConfig:
    """Layer defaults, pyproject.toml, reportlines.yaml and explicit overrides."""
    config = PipelineConfig()
    for layer in (
        get_pyproject_config(pyproject),
        get_yaml_config(config_dir),
        {k: v for k, v in (overrides or {}).items() if v is not None},
    ):
        if layer:
            config = replace(config, **_coerce(layer))
    return config
