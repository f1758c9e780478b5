import pytest

from dsalgo.matrix_bfs import LabelledGraph


def _graph(labels, edges):
    g = LabelledGraph(labels)
    for a, b in edges:
        g.add_edge(a, b)
    return g


def test_format_matrix_layout():
    g = _graph("ab", [(0, 1)])
    assert g.format_matrix() == "0\t1\t\n1\t0\t\n"


def test_matrix_is_symmetric():
    g = _graph("pqrs", [(0, 2), (3, 1), (2, 3)])
    size = len(g.labels)
    assert all(g.matrix[i][j] == g.matrix[j][i] for i in range(size) for j in range(size))


def test_repeated_edge_has_no_effect():
    once = _graph("xyz", [(0, 1)])
    twice = _graph("xyz", [(0, 1), (1, 0)])
    assert once.format_matrix() == twice.format_matrix()


def test_bfs_on_chain():
    g = _graph("abc", [(0, 1), (1, 2)])
    assert g.bfs("a") == ["a", "b", "c"]
    assert g.bfs("c") == ["c", "b", "a"]


def test_bfs_visits_neighbours_in_index_order():
    g = _graph("abcd", [(0, 3), (0, 1), (0, 2)])
    assert g.bfs("a") == ["a", "b", "c", "d"]


def test_bfs_skips_unreachable():
    g = _graph("abc", [(0, 1)])
    assert set(g.bfs("a")) == {"a", "b"}


def test_bfs_unknown_label_raises():
    g = _graph("ab", [(0, 1)])
    with pytest.raises(ValueError):
        g.bfs("z")


def test_edge_out_of_range_raises():
    g = LabelledGraph("ab")
    with pytest.raises(ValueError):
        g.add_edge(0, 5)