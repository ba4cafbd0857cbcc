"""Command line entry point for wuf."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .pipeline import ConnectivityConfig
from .runner import connect_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Connect node pairs and answer connectivity queries.")
    parser.add_argument("edges", type=Path, help="CSV or Excel file with one edge per row")
    parser.add_argument("output", type=Path, help="Path where the annotated queries will be written")
    parser.add_argument(
        "--queries",
        type=Path,
        default=None,
        help="CSV or Excel file with node pairs to check (default: the edges themselves)",
    )
    parser.add_argument(
        "--nodes",
        type=int,
        default=None,
        help="Number of nodes in the graph (default: highest id + 1)",
    )
    parser.add_argument("--source-column", default="source", help="Column holding the first node id (default: source)")
    parser.add_argument("--target-column", default="target", help="Column holding the second node id (default: target)")
    parser.add_argument(
        "--result-column",
        default="connected",
        help="Column written with the query answers (default: connected)",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = ConnectivityConfig(
        source_column=args.source_column,
        target_column=args.target_column,
        node_count=args.nodes,
        result_column=args.result_column,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    result = connect_file(args.edges, args.output, config, queries_path=args.queries)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
