import pytest

from contestkit.mst import spanning_tree_weight


def test_star_example():
    assert spanning_tree_weight(4, [(0, 1, 2), (0, 3, 4), (0, 2, 3)]) == 9


def test_triangle_drops_heaviest_edge():
    assert spanning_tree_weight(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)]) == 3


def test_single_vertex_has_zero_weight():
    assert spanning_tree_weight(1, []) == 0


def test_heavier_parallel_edge_changes_nothing():
    edges = [(0, 1, 2), (0, 3, 4), (0, 2, 3)]
    base = spanning_tree_weight(4, edges)
    assert spanning_tree_weight(4, edges + [(0, 1, 50), (2, 3, 40)]) == base


def test_unreachable_vertex_is_ignored():
    edges = [(0, 1, 7), (1, 2, 1)]
    assert spanning_tree_weight(4, edges) == spanning_tree_weight(3, edges)


def test_edge_order_does_not_matter():
    edges = [(0, 1, 4), (1, 2, 6), (2, 3, 1), (0, 3, 9), (1, 3, 2)]
    assert spanning_tree_weight(4, edges) == spanning_tree_weight(4, list(reversed(edges)))


def test_rejects_bad_graphs():
    with pytest.raises(ValueError):
        spanning_tree_weight(0, [])
    with pytest.raises(ValueError):
        spanning_tree_weight(2, [(0, 2, 1)])