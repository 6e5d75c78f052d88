"""Topological ordering with cycle detection.

Two strategies are provided:

* ``kahn_sort``: in-degree driven FIFO processing. On a cyclic graph the
  returned order is partial and covers only nodes outside (and not
  downstream of) any cycle.
* ``dfs_sort``: reversed DFS finish order. On a cyclic graph the full
  reversed finish order is still returned; only ``is_dag`` marks it invalid.

Neither strategy raises on cycles. A warning is logged and callers are
expected to check ``TopoSortResult.is_dag``.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Tuple

from topograph.algorithms.traversal import depth_first
from topograph.graph import Graph, NodeID
from topograph.logging import get_logger
from topograph.metrics import Metrics, MetricsSnapshot

logger = get_logger(__name__)

Strategy = Literal["kahn", "dfs"]


@dataclass(frozen=True)
class TopoSortResult:
    """Outcome of a topological sort.

    Attributes:
        order: Node ids in topological order (partial or unverified when
            ``is_dag`` is False).
        is_dag: Whether the graph was found to be acyclic.
        metrics: Counters and timing for the call.
        strategy: Name of the strategy that produced the order.
    """

    order: Tuple[NodeID, ...]
    is_dag: bool
    metrics: MetricsSnapshot
    strategy: str = "kahn"

    def position(self) -> Dict[NodeID, int]:
        """Map each ordered node to its index in ``order``."""
        return {node: idx for idx, node in enumerate(self.order)}

    def summary(self) -> str:
        return "\n".join(
            [
                f"Topological Sort Result ({self.strategy}):",
                f"  Is DAG: {self.is_dag}",
                f"  Ordered Nodes: {len(self.order)}",
                f"  Order: {list(self.order)}",
                self.metrics.summary(),
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "is_dag": self.is_dag,
            "order": list(self.order),
            "metrics": self.metrics.to_dict(),
        }


def kahn_order(graph: Graph, metrics: Metrics) -> List[NodeID]:
    """Compute Kahn's order, recording counters into ``metrics``.

    Zero in-degree nodes are seeded in ascending id order; later ties follow
    queue order. The result is shorter than ``graph.n`` iff a cycle exists.
    """
    indegree = [0] * graph.n
    for edge in graph.edges:
        indegree[edge.v] += 1
        metrics.edges_explored += 1

    queue: deque[NodeID] = deque()
    for node in range(graph.n):
        if indegree[node] == 0:
            queue.append(node)
            metrics.stack_pushes += 1

    order: List[NodeID] = []
    while queue:
        node = queue.popleft()
        metrics.stack_pops += 1
        order.append(node)
        for nxt in graph.adjacency[node]:
            indegree[nxt] -= 1
            metrics.edges_explored += 1
            if indegree[nxt] == 0:
                queue.append(nxt)
                metrics.stack_pushes += 1
    return order


def kahn_sort(graph: Graph) -> TopoSortResult:
    """Topologically sort ``graph`` with Kahn's algorithm.

    Args:
        graph: Graph to order.

    Returns:
        TopoSortResult: Order, DAG flag and metrics. When a cycle exists the
        order only contains the acyclic prefix.
    """
    metrics = Metrics()
    metrics.start()
    order = kahn_order(graph, metrics)
    metrics.stop()

    is_dag = len(order) == graph.n
    if not is_dag:
        logger.warning(
            f"Graph contains a cycle: Kahn order is incomplete "
            f"({len(order)} of {graph.n} nodes)"
        )
    logger.debug(
        f"kahn_sort: {graph.n} nodes, {graph.num_edges} edges, "
        f"{metrics.elapsed_seconds * 1000.0:.3f} ms"
    )
    return TopoSortResult(tuple(order), is_dag, metrics.snapshot(), "kahn")


def dfs_sort(graph: Graph) -> TopoSortResult:
    """Topologically sort ``graph`` by reversing the DFS finish order.

    Roots are tried in ascending node id order. A back edge to a node on the
    current DFS path marks the graph cyclic, but the complete reversed finish
    order is still returned.

    Args:
        graph: Graph to order.

    Returns:
        TopoSortResult: Order, DAG flag and metrics.
    """
    metrics = Metrics()
    metrics.start()

    visited = [False] * graph.n
    on_path = [False] * graph.n
    finished: List[NodeID] = []
    has_cycle = False
    for root in range(graph.n):
        if not visited[root]:
            if depth_first(
                graph.adjacency,
                root,
                visited,
                metrics,
                finished=finished,
                on_path=on_path,
            ):
                has_cycle = True

    metrics.stop()

    if has_cycle:
        logger.warning("Cycle detected during DFS: graph is not a DAG")
    logger.debug(
        f"dfs_sort: {graph.n} nodes, {graph.num_edges} edges, "
        f"{metrics.elapsed_seconds * 1000.0:.3f} ms"
    )
    return TopoSortResult(
        tuple(reversed(finished)), not has_cycle, metrics.snapshot(), "dfs"
    )


def topological_sort(graph: Graph, strategy: Strategy = "kahn") -> TopoSortResult:
    """Dispatch to :func:`kahn_sort` or :func:`dfs_sort` by name.

    Raises:
        ValueError: If ``strategy`` is not ``"kahn"`` or ``"dfs"``.
    """
    if strategy == "kahn":
        return kahn_sort(graph)
    if strategy == "dfs":
        return dfs_sort(graph)
    raise ValueError(f"Unknown topological sort strategy: {strategy!r}")
