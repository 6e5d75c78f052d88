"""Immutable directed graph with integer node ids.

`Graph` stores a node count and an ordered edge list and derives forward and
reverse adjacency views once at construction. Nodes are ``0..n-1``. Parallel
and duplicate edges are kept; each one is relaxed independently by the path
algorithms. Construction validates every endpoint so that malformed input is
rejected with ``ValueError`` instead of corrupting the adjacency views.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple

NodeID = int
Weight = int


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Edge:
    """Directed weighted edge ``u -> v``.

    Attributes:
        u: Source node id.
        v: Target node id.
        weight: Integer edge weight.
    """

    u: NodeID
    v: NodeID
    weight: Weight = 1

    def __iter__(self) -> Iterator[int]:
        return iter((self.u, self.v, self.weight))


@dataclass(frozen=True)
class Graph:
    """Read-only directed multigraph over nodes ``0..n-1``.

    Attributes:
        n: Number of nodes.
        edges: Edges in insertion order.
        source: Optional default source node carried with the dataset.
        weight_model: Label describing how weights should be read.
        adjacency: Successor ids per node, in edge-list order.
        reverse_adjacency: Predecessor ids per node, in edge-list order.
        out_edges: Outgoing ``Edge`` objects per node, in edge-list order.

    Raises:
        ValueError: If ``n`` is negative, an endpoint lies outside ``[0, n)``,
            or a weight is not an integer.
    """

    n: int
    edges: Tuple[Edge, ...] = ()
    source: Optional[NodeID] = None
    weight_model: str = "weighted"
    adjacency: Tuple[Tuple[NodeID, ...], ...] = field(
        init=False, repr=False, compare=False
    )
    reverse_adjacency: Tuple[Tuple[NodeID, ...], ...] = field(
        init=False, repr=False, compare=False
    )
    out_edges: Tuple[Tuple[Edge, ...], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not _is_int(self.n) or self.n < 0:
            raise ValueError(
                f"Malformed graph: node count must be a non-negative int, got {self.n!r}."
            )
        edges = tuple(self.edges)
        for idx, edge in enumerate(edges):
            if not isinstance(edge, Edge):
                raise ValueError(
                    f"Malformed graph: edge #{idx} is {type(edge).__name__}, expected Edge."
                )
            for end_name, end in (("u", edge.u), ("v", edge.v)):
                if not _is_int(end) or not 0 <= end < self.n:
                    raise ValueError(
                        f"Malformed graph: edge #{idx} endpoint {end_name}={end!r} "
                        f"is outside [0, {self.n})."
                    )
            if not _is_int(edge.weight):
                raise ValueError(
                    f"Malformed graph: edge #{idx} weight {edge.weight!r} is not an int."
                )
        if self.source is not None and (
            not _is_int(self.source) or not 0 <= self.source < self.n
        ):
            raise ValueError(
                f"Malformed graph: source {self.source!r} is outside [0, {self.n})."
            )

        succ: list[list[NodeID]] = [[] for _ in range(self.n)]
        pred: list[list[NodeID]] = [[] for _ in range(self.n)]
        out: list[list[Edge]] = [[] for _ in range(self.n)]
        for edge in edges:
            succ[edge.u].append(edge.v)
            pred[edge.v].append(edge.u)
            out[edge.u].append(edge)

        # Frozen dataclass: derived views are assigned once here
        object.__setattr__(self, "edges", edges)
        object.__setattr__(self, "adjacency", tuple(tuple(s) for s in succ))
        object.__setattr__(self, "reverse_adjacency", tuple(tuple(p) for p in pred))
        object.__setattr__(self, "out_edges", tuple(tuple(o) for o in out))

    @classmethod
    def from_edge_list(
        cls,
        n: int,
        edges: Iterable[Sequence[int]],
        source: Optional[NodeID] = None,
        weight_model: str = "weighted",
    ) -> Graph:
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` sequences.

        Pairs get weight 1.

        Args:
            n: Number of nodes.
            edges: Iterable of 2- or 3-item sequences.
            source: Optional default source node.
            weight_model: Weighting label.

        Returns:
            Graph: The validated graph.
        """
        built = []
        for idx, item in enumerate(edges):
            if len(item) == 2:
                built.append(Edge(item[0], item[1]))
            elif len(item) == 3:
                built.append(Edge(item[0], item[1], item[2]))
            else:
                raise ValueError(
                    f"Malformed graph: edge #{idx} must have 2 or 3 items, got {len(item)}."
                )
        return cls(n, tuple(built), source=source, weight_model=weight_model)

    def __len__(self) -> int:
        return self.n

    @property
    def num_edges(self) -> int:
        """Number of edges, counting parallel edges separately."""
        return len(self.edges)

    def nodes(self) -> range:
        """Return the node id range ``0..n-1``."""
        return range(self.n)

    def successors(self, node: NodeID) -> Tuple[NodeID, ...]:
        return self.adjacency[node]

    def predecessors(self, node: NodeID) -> Tuple[NodeID, ...]:
        return self.reverse_adjacency[node]

    def in_degrees(self) -> list[int]:
        """Return the in-degree of every node."""
        return [len(p) for p in self.reverse_adjacency]
