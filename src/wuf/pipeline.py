"""Batch connectivity processing on top of :class:`Graph`."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence

import pandas as pd
from tqdm import tqdm

from .edges import Pair, extract_pairs, infer_node_count, save_table
from .structures import Graph


@dataclass
class ConnectivityStats:
    """Summary metrics for a connectivity run."""

    node_count: int
    edge_count: int
    merged_edges: int
    redundant_edges: int
    component_count: int
    query_count: int
    connected_queries: int
    runtime_seconds: float


@dataclass
class ConnectivityResult:
    """Result bundle returned by :class:ConnectivityProcessor."""

    graph: Graph
    dataframe: pd.DataFrame
    stats: ConnectivityStats


@dataclass
class ConnectivityConfig:
    """Configuration parameters for :class:ConnectivityProcessor."""

    source_column: str = "source"
    target_column: str = "target"
    node_count: int | None = None
    max_inferred_nodes: int = 10_000_000
    result_column: str = "connected"
    use_tqdm: bool = True
    verbose: bool = True


class ConnectivityProcessor:
    """Build a graph from an edge table and answer connectivity queries."""

    def __init__(self, config: ConnectivityConfig | None = None) -> None:
        self.config = config or ConnectivityConfig()

    def process(
        self,
        edges: pd.DataFrame,
        queries: pd.DataFrame | None = None,
        output_path: str | Path | None = None,
    ) -> ConnectivityResult:
        """Apply every edge, answer every query and optionally save the annotated queries."""

        config = self.config
        verbose = config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Connectivity Process Started ---")
            print("\n1. Reading edge and query pairs...")

        t0 = time.time()
        if queries is None:
            queries = edges
        edge_pairs = extract_pairs(edges, config.source_column, config.target_column)
        query_pairs = extract_pairs(queries, config.source_column, config.target_column)
        node_count = config.node_count
        if node_count is None:
            node_count = infer_node_count(edge_pairs, query_pairs)
            if node_count > config.max_inferred_nodes:
                raise ValueError(
                    f"Highest node id implies {node_count} nodes, above the limit of "
                    f"{config.max_inferred_nodes}; set the node count explicitly"
                )
        if verbose:
            print(f"   Loaded {len(edge_pairs)} edges and {len(query_pairs)} queries over {node_count} nodes.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Connecting edges...")
        graph = Graph(node_count)
        merged = self._apply_edges(graph, edge_pairs)
        redundant = len(edge_pairs) - merged
        if verbose:
            print(f"   Merged {merged} edges, {redundant} were already connected.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Answering connectivity queries...")
        answers = self._answer_queries(graph, query_pairs)
        df = queries.copy()
        df[config.result_column] = answers
        if verbose:
            print(f"   {sum(answers)} of {len(answers)} queries are connected.")
            print(f"   Done in {time.time() - t0:.2f}s")

        if output_path is not None:
            output_str = str(output_path)
            save_table(df, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        elapsed = time.time() - overall_start_time
        stats = ConnectivityStats(
            node_count=node_count,
            edge_count=len(edge_pairs),
            merged_edges=merged,
            redundant_edges=redundant,
            component_count=node_count - merged,
            query_count=len(query_pairs),
            connected_queries=sum(answers),
            runtime_seconds=elapsed,
        )

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Nodes: {stats.node_count}")
            print(f"   - Components: {stats.component_count}")
            print(f"\n--- Connectivity Process Finished in {elapsed:.2f} seconds ---")

        return ConnectivityResult(graph=graph, dataframe=df, stats=stats)

    def _apply_edges(self, graph: Graph, pairs: Sequence[Pair]) -> int:
        iterator: Iterable[Pair] = pairs
        if pairs and self.config.use_tqdm:
            iterator = tqdm(pairs, desc="   Connecting", unit="edge")

        merged = 0
        for a, b in iterator:
            if graph.connected(a, b):
                continue
            graph.connect(a, b)
            merged += 1
        return merged

    def _answer_queries(self, graph: Graph, pairs: Sequence[Pair]) -> List[bool]:
        iterator: Iterable[Pair] = pairs
        if pairs and self.config.use_tqdm:
            iterator = tqdm(pairs, desc="   Querying", unit="pair")
        return [graph.connected(a, b) for a, b in iterator]


__all__ = [
    "ConnectivityConfig",
    "ConnectivityProcessor",
    "ConnectivityResult",
    "ConnectivityStats",
]
