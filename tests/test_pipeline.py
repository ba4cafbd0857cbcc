import pandas as pd
import pytest

from wuf.pipeline import ConnectivityConfig, ConnectivityProcessor


def _processor(**kwargs):
    return ConnectivityProcessor(ConnectivityConfig(use_tqdm=False, verbose=False, **kwargs))


def test_process_counts_merges_and_components():
    edges = pd.DataFrame({"source": [0, 1, 1, 2, 5], "target": [1, 2, 0, 3, 6]})
    queries = pd.DataFrame({"source": [0, 0, 4, 5], "target": [3, 4, 4, 6]})
    result = _processor(node_count=10).process(edges, queries)

    assert result.dataframe["connected"].tolist() == [True, False, True, True]
    stats = result.stats
    assert stats.node_count == 10
    assert stats.edge_count == 5
    assert stats.merged_edges == 4
    assert stats.redundant_edges == 1
    assert stats.component_count == 6
    assert stats.query_count == 4
    assert stats.connected_queries == 3
    assert result.graph.connected(0, 3)


def test_process_infers_node_count_and_uses_edges_as_queries():
    edges = pd.DataFrame({"source": [0, 3], "target": [1, 4]})
    result = _processor().process(edges)
    assert result.stats.node_count == 5
    assert result.dataframe["connected"].tolist() == [True, True]
    assert "connected" not in edges.columns


def test_process_custom_columns(tmp_path):
    edges = pd.DataFrame({"u": [0], "v": [2]})
    queries = pd.DataFrame({"u": [2, 1], "v": [0, 0]})
    output = tmp_path / "out.csv"
    _processor(source_column="u", target_column="v", result_column="same").process(edges, queries, output)
    saved = pd.read_csv(output)
    assert saved.columns.tolist() == ["u", "v", "same"]
    assert saved["same"].tolist() == [True, False]


def test_process_rejects_ids_beyond_node_count():
    edges = pd.DataFrame({"source": [0, 3], "target": [1, 4]})
    with pytest.raises(IndexError):
        _processor(node_count=4).process(edges)


def test_process_reports_progress(capsys):
    edges = pd.DataFrame({"source": [0], "target": [1]})
    ConnectivityProcessor(ConnectivityConfig(use_tqdm=False)).process(edges)
    out = capsys.readouterr().out
    assert "Connectivity Process Started" in out
    assert "Components: 1" in out


def test_process_rejects_huge_inferred_node_count():
    edges = pd.DataFrame({"source": [0], "target": [50]})
    with pytest.raises(ValueError, match="node count"):
        _processor(max_inferred_nodes=10).process(edges)
    result = _processor(max_inferred_nodes=10, node_count=51).process(edges)
    assert result.stats.node_count == 51
