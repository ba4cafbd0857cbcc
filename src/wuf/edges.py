"""Loading and validating tables of node id pairs."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np
import pandas as pd

Pair = Tuple[int, int]

_EXCEL_SUFFIXES = {".xls", ".xlsx"}


def load_table(path: str | Path) -> pd.DataFrame:
    """Read a CSV or Excel table from `path`."""

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix in _EXCEL_SUFFIXES:
        return pd.read_excel(path)
    raise ValueError(f"Unsupported file format: '{suffix}'")


def save_table(frame: pd.DataFrame, path: str | Path) -> None:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        frame.to_csv(path, index=False)
        return
    if suffix in _EXCEL_SUFFIXES:
        frame.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")


def extract_pairs(frame: pd.DataFrame, source_column: str, target_column: str) -> List[Pair]:
    """Return the `(source, target)` node ids of every row in `frame`."""

    for column in (source_column, target_column):
        if column not in frame.columns:
            raise KeyError(f"Column '{column}' not found in dataframe")

    sources = _column_ids(frame[source_column], source_column)
    targets = _column_ids(frame[target_column], target_column)
    return [(int(a), int(b)) for a, b in zip(sources, targets)]


def infer_node_count(*pair_lists: Iterable[Pair]) -> int:
    """Return the smallest node count covering every id in `pair_lists`."""

    highest = -1
    for pairs in pair_lists:
        for a, b in pairs:
            low = min(a, b)
            if low < 0:
                raise IndexError(f"node index {low} out of bounds: ids must be non-negative")
            highest = max(highest, a, b)
    return highest + 1


def _column_ids(series: pd.Series, column: str) -> np.ndarray:
    if series.isna().any():
        raise ValueError(f"Column '{column}' contains blank node ids")
    try:
        values = pd.to_numeric(series, errors="raise")
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Column '{column}' contains non-numeric node ids") from exc
    values = values.to_numpy()
    if not np.all(np.mod(values, 1) == 0):
        raise ValueError(f"Column '{column}' contains non-integral node ids")
    return values.astype(np.int64)
