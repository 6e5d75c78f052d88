from dataclasses import FrozenInstanceError

import pytest

from topograph.graph import Edge, Graph


def test_adjacency_views_follow_edge_order():
    g = Graph.from_edge_list(3, [(0, 2, 5), (0, 1, 1), (1, 2, 2), (0, 2, 7)])

    assert g.n == 3
    assert len(g) == 3
    assert g.num_edges == 4
    assert g.adjacency == ((2, 1, 2), (2,), ())
    assert g.reverse_adjacency == ((), (0,), (0, 1, 0))
    assert g.out_edges[0] == (Edge(0, 2, 5), Edge(0, 1, 1), Edge(0, 2, 7))
    assert g.successors(1) == (2,)
    assert g.predecessors(2) == (0, 1, 0)
    assert g.in_degrees() == [0, 1, 3]
    assert list(g.nodes()) == [0, 1, 2]


def test_pairs_get_unit_weight():
    g = Graph.from_edge_list(2, [(0, 1)])
    assert g.edges == (Edge(0, 1, 1),)


def test_edge_unpacks_as_triple():
    u, v, w = Edge(3, 4, 9)
    assert (u, v, w) == (3, 4, 9)


def test_edges_list_is_stored_as_tuple():
    g = Graph(2, [Edge(0, 1)])  # type: ignore[arg-type]
    assert isinstance(g.edges, tuple)


def test_isolated_nodes_have_empty_views():
    g = Graph(3)
    assert g.adjacency == ((), (), ())
    assert g.reverse_adjacency == ((), (), ())


def test_graph_is_immutable():
    g = Graph.from_edge_list(2, [(0, 1)])
    with pytest.raises(FrozenInstanceError):
        g.n = 5  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        g.edges[0].weight = 3  # type: ignore[misc]


def test_equality_ignores_derived_views():
    a = Graph.from_edge_list(2, [(0, 1, 3)])
    b = Graph(2, (Edge(0, 1, 3),))
    assert a == b
    assert hash(a) == hash(b)


@pytest.mark.parametrize(
    "n,edges,match",
    [
        (-1, [], "node count"),
        (2.0, [], "node count"),
        (2, [(0, 2)], "endpoint v=2"),
        (2, [(-1, 0)], "endpoint u=-1"),
        (2, [(True, 1)], "endpoint u=True"),
        (2, [(0, 1, 1.5)], "weight 1.5"),
        (2, [(0, 1, 2, 3)], "2 or 3 items"),
    ],
)
def test_malformed_graphs_are_rejected(n, edges, match):
    with pytest.raises(ValueError, match=match):
        Graph.from_edge_list(n, edges)


def test_non_edge_items_are_rejected():
    with pytest.raises(ValueError, match="expected Edge"):
        Graph(2, ((0, 1),))  # type: ignore[arg-type]


def test_source_must_be_in_range():
    assert Graph(3, source=2).source == 2
    with pytest.raises(ValueError, match="source 3"):
        Graph(3, source=3)


def test_weight_model_label():
    assert Graph(1).weight_model == "weighted"
    assert Graph(1, weight_model="unweighted").weight_model == "unweighted"
