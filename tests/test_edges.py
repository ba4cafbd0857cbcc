import pandas as pd
import pytest

from wuf.edges import extract_pairs, infer_node_count, load_table, save_table


def test_extract_pairs_returns_int_tuples():
    frame = pd.DataFrame({"source": [0, 3, 2], "target": [1.0, 4.0, 2.0]})
    pairs = extract_pairs(frame, "source", "target")
    assert pairs == [(0, 1), (3, 4), (2, 2)]
    assert all(type(x) is int for pair in pairs for x in pair)


def test_extract_pairs_parses_numeric_strings():
    frame = pd.DataFrame({"a": ["5", "6"], "b": ["7", "0"]})
    assert extract_pairs(frame, "a", "b") == [(5, 7), (6, 0)]


def test_extract_pairs_missing_column():
    frame = pd.DataFrame({"source": [0]})
    with pytest.raises(KeyError):
        extract_pairs(frame, "source", "target")


@pytest.mark.parametrize("bad", [None, "x", 1.5])
def test_extract_pairs_rejects_bad_cells(bad):
    frame = pd.DataFrame({"source": [0, bad], "target": [1, 2]})
    with pytest.raises(ValueError, match="source"):
        extract_pairs(frame, "source", "target")


def test_infer_node_count():
    assert infer_node_count([(0, 4), (2, 1)], [(7, 0)]) == 8
    assert infer_node_count([]) == 0
    with pytest.raises(IndexError):
        infer_node_count([(0, -2)])


def test_table_round_trip(tmp_path):
    path = tmp_path / "edges.csv"
    save_table(pd.DataFrame({"source": [0, 1], "target": [1, 2]}), path)
    assert extract_pairs(load_table(path), "source", "target") == [(0, 1), (1, 2)]


def test_unsupported_formats(tmp_path):
    with pytest.raises(ValueError):
        load_table(tmp_path / "edges.json")
    with pytest.raises(ValueError):
        save_table(pd.DataFrame(), tmp_path / "out.txt")
