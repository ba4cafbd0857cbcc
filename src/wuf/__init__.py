"""A fast weighted union-find with path compression."""

from .structures import Graph
from .edges import extract_pairs, infer_node_count, load_table
from .pipeline import ConnectivityConfig, ConnectivityProcessor, ConnectivityResult, ConnectivityStats
from .runner import connect_file

__all__ = [
    "Graph",
    "ConnectivityConfig",
    "ConnectivityProcessor",
    "ConnectivityResult",
    "ConnectivityStats",
    "extract_pairs",
    "infer_node_count",
    "load_table",
    "connect_file",
]
