"""Convenience helpers for running connectivity end-to-end on files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .edges import load_table
from .pipeline import ConnectivityConfig, ConnectivityProcessor, ConnectivityResult


def connect_file(
    edges_path: str | Path,
    output_path: str | Path,
    config: Optional[ConnectivityConfig] = None,
    queries_path: str | Path | None = None,
) -> ConnectivityResult | None:
    """Connect the edges in `edges_path`, answer the queries and write the annotated results.

    The edges double as queries when `queries_path` is not given.
    """

    edges_path = Path(edges_path)
    output_path = Path(output_path)
    config = config or ConnectivityConfig()

    tables = []
    for path in [edges_path] if queries_path is None else [edges_path, Path(queries_path)]:
        try:
            tables.append(load_table(path))
        except FileNotFoundError:
            print(f"ERROR: Input file not found at '{path}'.")
            return None
        except ImportError as exc:
            print(f"ERROR: Cannot read '{path}': {exc}. Install the 'excel' extra (pip install wuf[excel]).")
            return None
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
            print(f"ERROR: Cannot parse '{path}': {exc}")
            return None
        except ValueError:
            print(f"ERROR: Unsupported file format for '{path}'. Please provide a CSV or Excel file.")
            return None

    for path, table in zip([edges_path, queries_path], tables):
        for column in (config.source_column, config.target_column):
            if column not in table.columns:
                print(f"ERROR: Column '{column}' not found in '{path}'.")
                return None

    edges = tables[0]
    queries = tables[1] if len(tables) > 1 else None
    processor = ConnectivityProcessor(config)
    try:
        return processor.process(edges, queries, output_path)
    except (IndexError, TypeError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return None
    except MemoryError:
        print(f"ERROR: Not enough memory for a graph of that size; check the node ids in '{edges_path}'.")
        return None
