import networkx as nx
import pytest

from topograph.algorithms import kosaraju_scc
from topograph.graph import Edge, Graph
from topograph.nx import NodeMap, from_networkx, to_networkx


def test_to_networkx_keeps_parallel_edges():
    g = Graph.from_edge_list(3, [(0, 1, 2), (0, 1, 5), (1, 2, 1)])
    G = to_networkx(g)

    assert isinstance(G, nx.MultiDiGraph)
    assert sorted(G.nodes()) == [0, 1, 2]
    assert G.number_of_edges() == 3
    assert sorted(d["weight"] for _, _, d in G.edges(0, data=True)) == [2, 5]


def test_to_networkx_with_node_map():
    g = Graph.from_edge_list(2, [(0, 1, 3)])
    G = to_networkx(g, NodeMap.from_names(["a", "b"]), weight_attr="cost")
    assert list(G.edges(data="cost")) == [("a", "b", 3)]


def test_from_networkx_digraph():
    G = nx.DiGraph()
    G.add_edge("x", "y", weight=4)
    G.add_edge("y", "z")
    G.add_edge("z", "x", weight=2.0)

    graph, node_map = from_networkx(G)
    assert graph.n == 3
    assert node_map.to_index == {"x": 0, "y": 1, "z": 2}
    assert graph.edges == (Edge(0, 1, 4), Edge(1, 2, 1), Edge(2, 0, 2))

    result = kosaraju_scc(graph)
    assert node_map.names(sorted(result.components[0])) == ["x", "y", "z"]
    assert len(node_map) == 3


def test_roundtrip_preserves_structure():
    g = Graph.from_edge_list(4, [(0, 1, 1), (1, 2, 2), (2, 0, 3), (3, 3, 4)])
    back, _ = from_networkx(to_networkx(g))
    assert back == g


def test_undirected_rejected():
    with pytest.raises(ValueError, match="Undirected"):
        from_networkx(nx.Graph([(0, 1)]))


def test_non_graph_rejected():
    with pytest.raises(TypeError):
        from_networkx({"a": ["b"]})  # type: ignore[arg-type]


def test_non_integer_weight_rejected():
    G = nx.DiGraph()
    G.add_edge(0, 1, weight=0.5)
    with pytest.raises(ValueError, match="non-integer weight"):
        from_networkx(G)
