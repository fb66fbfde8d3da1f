"""Column name normalization shared by ingestion steps."""

import pandas as pd

type ColumnMapping = dict[str, str]


def normalize_column_name(name: str) -> str:
    return "_".join(str(name).strip().lower().replace("-", " ").split())


def normalize_columns(df: pd.DataFrame, mapping: ColumnMapping | None = None) -> pd.DataFrame:
    """Normalize column names to snake_case and apply optional alias mapping.

    Matching is case and spacing insensitive, so ``"Manager ID"``,
    ``"manager id"`` and ``"manager_id"`` all end up as ``manager_id``.
    """
    df = df.copy()
    df.columns = [normalize_column_name(col) for col in df.columns]

    if mapping:
        aliases = {normalize_column_name(k): v for k, v in mapping.items()}
        df = df.rename(columns={c: aliases[c] for c in df.columns if c in aliases})

    duplicated = df.columns[df.columns.duplicated()].tolist()
    if duplicated:
        raise ValueError(f"Columns collide after normalization: {sorted(set(duplicated))}")

    return df
