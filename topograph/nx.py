"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from topograph.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=3)
    >>> G.add_edge("B", "C", weight=4)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["B"]
    1
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from topograph.graph import Edge, Graph

NxDiGraph = Union[nx.DiGraph, nx.MultiDiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between NetworkX node names and integer ids.

    Attributes:
        to_index: Original node name -> node id.
        to_name: Node id -> original node name.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in id order."""
        return cls(
            to_index={name: i for i, name in enumerate(names)},
            to_name=dict(enumerate(names)),
        )

    def names(self, ids: Any) -> List[Hashable]:
        """Translate an iterable of node ids back to original names."""
        return [self.to_name[i] for i in ids]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxDiGraph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
) -> Tuple[Graph, NodeMap]:
    """Convert a directed NetworkX graph into a :class:`Graph`.

    Node ids follow ``G``'s node iteration order. Parallel edges of a
    MultiDiGraph are kept.

    Args:
        G: ``nx.DiGraph`` or ``nx.MultiDiGraph``.
        weight_attr: Edge attribute holding the integer weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
        ValueError: If ``G`` is undirected or a weight is not integral.
    """
    if not isinstance(G, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}")
    if not G.is_directed():
        raise ValueError("Undirected graphs are not supported; convert with G.to_directed()")

    node_map = NodeMap.from_names(list(G.nodes()))
    edges: List[Edge] = []
    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        if isinstance(weight, float) and weight.is_integer():
            weight = int(weight)
        if not isinstance(weight, int) or isinstance(weight, bool):
            raise ValueError(f"Edge {u!r}->{v!r} has non-integer weight {weight!r}")
        edges.append(Edge(node_map.to_index[u], node_map.to_index[v], weight))

    return Graph(len(node_map), tuple(edges)), node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> nx.MultiDiGraph:
    """Convert a :class:`Graph` to ``nx.MultiDiGraph``.

    Args:
        graph: Graph to convert.
        node_map: Optional mapping restoring original node names; nodes are
            labeled ``0..n-1`` otherwise.
        weight_attr: Edge attribute name for weights.

    Returns:
        nx.MultiDiGraph with one edge per graph edge.
    """
    G = nx.MultiDiGraph()

    def name(idx: int) -> Hashable:
        if node_map is None:
            return idx
        return node_map.to_name.get(idx, idx)

    G.add_nodes_from(name(i) for i in range(graph.n))
    for edge in graph.edges:
        G.add_edge(name(edge.u), name(edge.v), **{weight_attr: edge.weight})
    return G
