import logging
from dataclasses import FrozenInstanceError

import pytest

from topograph.algorithms.dag_paths import reconstruct_path, shortest_paths
from topograph.graph import Graph


def test_weighted_triangle_from_source(weighted_triangle):
    result = shortest_paths(weighted_triangle, source=0)

    assert result.distances == (0, 2, 5)
    assert result.predecessors == (None, 0, 1)
    assert result.source == 0
    # The direct 0 -> 2 edge dominates the two-hop path
    assert result.critical_path_length == 10
    assert result.critical_path == (0, 2)
    # 3 attempted shortest-path relaxations + 3 longest-path relaxations
    assert result.metrics.relaxations == 6


def test_without_source_only_critical_path(weighted_triangle):
    result = shortest_paths(weighted_triangle)

    assert result.source is None
    assert result.distances == (None, None, None)
    assert result.predecessors == (None, None, None)
    assert result.critical_path_length == 10
    assert result.critical_path == (0, 2)
    # Every edge is still attempted in the shortest pass
    assert result.metrics.relaxations == 6


def test_diamond(diamond):
    result = shortest_paths(diamond, source=0)

    assert result.distances == (0, 1, 4, 3)
    assert result.predecessors == (None, 0, 0, 1)
    assert result.critical_path_length == 5
    assert result.critical_path == (0, 2, 3)
    assert reconstruct_path(result, 3) == [0, 1, 3]


def test_source_in_middle_leaves_upstream_unreached(diamond):
    result = shortest_paths(diamond, source=1)
    assert result.distances == (None, 0, None, 2)
    assert result.predecessors == (None, None, None, 1)
    # Only edges out of reached nodes are attempted: 1->3, then 4 longest-path edges
    assert result.metrics.relaxations == 1 + 4


def test_parallel_edges_relaxed_independently():
    g = Graph.from_edge_list(2, [(0, 1, 5), (0, 1, 2)])
    result = shortest_paths(g, source=0)
    assert result.distances == (0, 2)
    assert result.critical_path_length == 5
    assert result.metrics.relaxations == 4


def test_unreachable_target_gives_empty_path():
    g = Graph.from_edge_list(3, [(1, 2, 5)])
    result = shortest_paths(g, source=0)

    assert result.distances == (0, None, None)
    assert reconstruct_path(result, 2) == []
    assert result.path_to(2) == []
    assert result.critical_path_length == 5
    assert result.critical_path == (1, 2)


def test_reconstruct_path(weighted_triangle):
    result = shortest_paths(weighted_triangle, source=0)
    assert reconstruct_path(result, 2) == [0, 1, 2]
    assert reconstruct_path(result, 1) == [0, 1]
    assert reconstruct_path(result, 0) == [0]


def test_reconstruct_path_requires_source(weighted_triangle):
    result = shortest_paths(weighted_triangle)
    with pytest.raises(ValueError, match="No source specified"):
        reconstruct_path(result, 2)


def test_reconstruct_path_rejects_unknown_target(weighted_triangle):
    result = shortest_paths(weighted_triangle, source=0)
    with pytest.raises(ValueError, match="outside"):
        reconstruct_path(result, 3)


def test_source_out_of_range(weighted_triangle):
    with pytest.raises(ValueError, match="Source node 5"):
        shortest_paths(weighted_triangle, source=5)


def test_edgeless_graph_has_zero_length_critical_path():
    result = shortest_paths(Graph(3), source=2)
    assert result.distances == (None, None, 0)
    assert result.critical_path_length == 0
    # Lowest id holds the (tied) maximum
    assert result.critical_path == (0,)
    assert result.metrics.relaxations == 0


def test_empty_graph():
    result = shortest_paths(Graph(0))
    assert result.distances == ()
    assert result.critical_path_length == 0
    assert result.critical_path == ()


def test_critical_path_tie_prefers_lowest_end_node():
    g = Graph.from_edge_list(4, [(0, 1, 3), (2, 3, 3)])
    result = shortest_paths(g)
    assert result.critical_path_length == 3
    assert result.critical_path == (0, 1)


def test_zero_weight_edges_do_not_extend_critical_path():
    g = Graph.from_edge_list(3, [(0, 1, 0), (1, 2, 4)])
    result = shortest_paths(g)
    assert result.critical_path_length == 4
    # 0 -> 1 never improves longest[1] above its initial 0
    assert result.critical_path == (1, 2)


def test_cyclic_input_is_best_effort(caplog):
    g = Graph.from_edge_list(4, [(0, 1, 1), (1, 2, 1), (2, 1, 1), (2, 3, 1)])
    with caplog.at_level(logging.WARNING, logger="topograph"):
        result = shortest_paths(g, source=0)

    assert result.distances == (0, 1, None, None)
    assert result.critical_path_length == 1
    assert result.critical_path == (0, 1)
    assert any("partial order" in rec.message for rec in caplog.records)


def test_result_is_immutable(weighted_triangle):
    result = shortest_paths(weighted_triangle, source=0)
    with pytest.raises(FrozenInstanceError):
        result.source = 1  # type: ignore[misc]


def test_summary_and_dict():
    g = Graph.from_edge_list(3, [(0, 1, 2)])
    result = shortest_paths(g, source=0)
    text = result.summary()

    assert "Source: 0" in text
    assert "Distance to 1: 2" in text
    assert "Distance to 2: INFINITY" in text
    assert "Critical Path Length: 2" in text
    assert "Critical Path: [0, 1]" in text
    assert "Relaxations: 2" in text

    data = result.to_dict()
    assert data["distances"] == [0, 2, None]
    assert data["predecessors"] == [None, 0, None]
    assert data["critical_path"] == [0, 1]


def test_summary_without_source(weighted_triangle):
    text = shortest_paths(weighted_triangle).summary()
    assert "Source: none" in text
    assert "Distance to" not in text
