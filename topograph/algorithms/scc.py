"""Strongly connected components via Kosaraju's two-pass DFS.

Pass 1 runs DFS over forward adjacency from every unvisited node (ascending
ids) and records finish order. Pass 2 pops that order (latest finish first)
and runs DFS over reverse adjacency; each pop that reaches an unvisited node
starts a new component. Components are listed in discovery order and each
component lists its nodes in DFS preorder.

The condensation graph has one node per component and one unit-weight edge
per distinct ordered pair of components joined by an original edge. It is
always acyclic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Set, Tuple

from topograph.algorithms.traversal import depth_first
from topograph.graph import Edge, Graph, NodeID
from topograph.logging import get_logger
from topograph.metrics import Metrics, MetricsSnapshot

logger = get_logger(__name__)

Component = Tuple[NodeID, ...]


@dataclass(frozen=True)
class SCCResult:
    """Components, their sizes and the condensation graph.

    Attributes:
        components: Components in discovery order.
        component_sizes: Size of each component, parallel to ``components``.
        condensation: DAG with one node per component.
        metrics: Counters and timing for the call.
        component_of: Component index of every original node.
    """

    components: Tuple[Component, ...]
    component_sizes: Tuple[int, ...]
    condensation: Graph
    metrics: MetricsSnapshot
    component_of: Tuple[int, ...] = field(default=(), repr=False)

    @property
    def num_components(self) -> int:
        return len(self.components)

    def summary(self) -> str:
        lines = ["Strongly Connected Components (Kosaraju's Algorithm):"]
        for idx, (comp, size) in enumerate(zip(self.components, self.component_sizes)):
            lines.append(f"  Component {idx + 1} (size: {size}): {list(comp)}")
        lines.extend(
            [
                "",
                "Condensation Graph:",
                f"  Nodes: {self.condensation.n}",
                f"  Edges: {self.condensation.num_edges}",
                self.metrics.summary(),
            ]
        )
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "components": [list(c) for c in self.components],
            "component_sizes": list(self.component_sizes),
            "condensation": {
                "nodes": self.condensation.n,
                "edges": [[e.u, e.v] for e in self.condensation.edges],
            },
            "metrics": self.metrics.to_dict(),
        }


def _component_index(n: int, components: Sequence[Sequence[NodeID]]) -> List[int]:
    index = [-1] * n
    for comp_id, comp in enumerate(components):
        for node in comp:
            index[node] = comp_id
    return index


def build_condensation(
    graph: Graph, components: Sequence[Sequence[NodeID]]
) -> Graph:
    """Collapse each component of ``graph`` into a single node.

    Args:
        graph: Original graph.
        components: Partition of ``graph``'s nodes.

    Returns:
        Graph: Unweighted graph over component indices. Edges appear in the
        order their first crossing original edge appears.
    """
    index = _component_index(graph.n, components)
    seen: Set[Tuple[int, int]] = set()
    edges: List[Edge] = []
    for edge in graph.edges:
        key = (index[edge.u], index[edge.v])
        if key[0] != key[1] and key not in seen:
            seen.add(key)
            edges.append(Edge(key[0], key[1], 1))
    return Graph(len(components), tuple(edges), weight_model="unweighted")


def kosaraju_scc(graph: Graph) -> SCCResult:
    """Decompose ``graph`` into strongly connected components.

    Args:
        graph: Graph to decompose.

    Returns:
        SCCResult: Components partitioning ``0..n-1``, their sizes, the
        condensation graph and metrics.
    """
    metrics = Metrics()
    metrics.start()

    visited = [False] * graph.n
    finish_stack: List[NodeID] = []
    for root in range(graph.n):
        if not visited[root]:
            depth_first(graph.adjacency, root, visited, metrics, finished=finish_stack)

    visited = [False] * graph.n
    components: List[Component] = []
    while finish_stack:
        node = finish_stack.pop()
        metrics.stack_pops += 1
        if not visited[node]:
            members: List[NodeID] = []
            depth_first(
                graph.reverse_adjacency, node, visited, metrics, entered=members
            )
            components.append(tuple(members))

    condensation = build_condensation(graph, components)
    metrics.stop()

    logger.debug(
        f"kosaraju_scc: {graph.n} nodes -> {len(components)} components, "
        f"{condensation.num_edges} condensation edges"
    )
    return SCCResult(
        components=tuple(components),
        component_sizes=tuple(len(c) for c in components),
        condensation=condensation,
        metrics=metrics.snapshot(),
        component_of=tuple(_component_index(graph.n, components)),
    )
