"""Shortest and critical (longest) paths over DAGs.

Both passes walk nodes in Kahn topological order and relax each outgoing
edge once, which is optimal for acyclic inputs. Cyclic inputs are not
rejected: relaxation runs best-effort over the partial Kahn order, so nodes
on or downstream of a cycle are never relaxed from.

Distances and predecessors use ``None`` for "unreached" and "no
predecessor" rather than sentinel magnitudes.

The critical path is source independent: every node starts with a longest
value of 0, so the reported length is never negative and an edgeless graph
has length 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from topograph.algorithms.topological import kahn_order
from topograph.graph import Graph, NodeID
from topograph.logging import get_logger
from topograph.metrics import Metrics, MetricsSnapshot

logger = get_logger(__name__)

Distance = Optional[int]


@dataclass(frozen=True)
class ShortestPathResult:
    """Distances from an optional source plus the graph's critical path.

    Attributes:
        distances: Per-node shortest distance from ``source``; None if
            unreached (all None when no source was given).
        predecessors: Per-node predecessor on a shortest path; None if the
            node was never improved by a relaxation.
        source: Source node, or None.
        critical_path_length: Maximum path weight over the whole graph,
            floored at 0.
        critical_path: Nodes of one maximum-weight path, in order.
        metrics: Counters and timing for the call.
    """

    distances: Tuple[Distance, ...]
    predecessors: Tuple[Optional[NodeID], ...]
    source: Optional[NodeID]
    critical_path_length: int
    critical_path: Tuple[NodeID, ...]
    metrics: MetricsSnapshot

    def path_to(self, target: NodeID) -> List[NodeID]:
        """Shortcut for :func:`reconstruct_path` on this result."""
        return reconstruct_path(self, target)

    def summary(self) -> str:
        lines = ["Shortest Path Results:"]
        if self.source is not None:
            lines.append(f"Source: {self.source}")
            for node, dist in enumerate(self.distances):
                shown = "INFINITY" if dist is None else str(dist)
                lines.append(f"  Distance to {node}: {shown}")
        else:
            lines.append("Source: none")
        lines.extend(
            [
                "",
                "Critical Path Analysis:",
                f"  Critical Path Length: {self.critical_path_length}",
                f"  Critical Path: {list(self.critical_path)}",
                self.metrics.summary(),
            ]
        )
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "distances": list(self.distances),
            "predecessors": list(self.predecessors),
            "critical_path_length": self.critical_path_length,
            "critical_path": list(self.critical_path),
            "metrics": self.metrics.to_dict(),
        }


def _relax_shortest(
    graph: Graph,
    order: Sequence[NodeID],
    source: Optional[NodeID],
    metrics: Metrics,
) -> Tuple[List[Distance], List[Optional[NodeID]]]:
    dist: List[Distance] = [None] * graph.n
    pred: List[Optional[NodeID]] = [None] * graph.n
    if source is not None:
        dist[source] = 0

    for u in order:
        du = dist[u]
        # Without a source every edge is still attempted (and counted), but
        # an unreached origin can never improve a target.
        if source is not None and du is None:
            continue
        for edge in graph.out_edges[u]:
            metrics.relaxations += 1
            if du is None:
                continue
            candidate = du + edge.weight
            dv = dist[edge.v]
            if dv is None or candidate < dv:
                dist[edge.v] = candidate
                pred[edge.v] = u
    return dist, pred


def _relax_longest(
    graph: Graph,
    order: Sequence[NodeID],
    metrics: Metrics,
) -> Tuple[List[int], List[Optional[NodeID]]]:
    longest = [0] * graph.n
    pred: List[Optional[NodeID]] = [None] * graph.n
    for u in order:
        for edge in graph.out_edges[u]:
            metrics.relaxations += 1
            candidate = longest[u] + edge.weight
            if candidate > longest[edge.v]:
                longest[edge.v] = candidate
                pred[edge.v] = u
    return longest, pred


def _critical_path(
    longest: Sequence[int], pred: Sequence[Optional[NodeID]]
) -> List[NodeID]:
    end: Optional[NodeID] = None
    for node, value in enumerate(longest):
        # Strict comparison: lowest id wins ties
        if end is None or value > longest[end]:
            end = node

    path: List[NodeID] = []
    current = end
    while current is not None:
        path.append(current)
        current = pred[current]
    path.reverse()
    return path


def shortest_paths(graph: Graph, source: Optional[NodeID] = None) -> ShortestPathResult:
    """Compute single-source shortest distances and the critical path.

    Args:
        graph: Graph to analyze. Expected to be acyclic.
        source: Optional source node. Without it, distances stay None and
            only the critical path is meaningful.

    Returns:
        ShortestPathResult: Distances, predecessors, critical path and
        metrics. ``metrics.relaxations`` counts attempted relaxations of both
        passes.

    Raises:
        ValueError: If ``source`` is outside ``[0, n)``.
    """
    if source is not None and not 0 <= source < graph.n:
        raise ValueError(f"Source node {source} is outside [0, {graph.n}).")

    metrics = Metrics()
    metrics.start()

    # The internal ordering is not part of this call's counters
    order = kahn_order(graph, Metrics())
    if len(order) < graph.n:
        logger.warning(
            f"Graph contains a cycle: relaxing over a partial order "
            f"({len(order)} of {graph.n} nodes)"
        )

    dist, pred = _relax_shortest(graph, order, source, metrics)
    longest, longest_pred = _relax_longest(graph, order, metrics)
    critical_length = max([0, *longest])
    critical_path = _critical_path(longest, longest_pred)

    metrics.stop()
    logger.debug(
        f"shortest_paths: source={source}, critical length={critical_length}, "
        f"{metrics.relaxations} relaxations"
    )
    return ShortestPathResult(
        distances=tuple(dist),
        predecessors=tuple(pred),
        source=source,
        critical_path_length=critical_length,
        critical_path=tuple(critical_path),
        metrics=metrics.snapshot(),
    )


def reconstruct_path(result: ShortestPathResult, target: NodeID) -> List[NodeID]:
    """Walk predecessors from ``target`` back to the result's source.

    Args:
        result: Result of :func:`shortest_paths` computed with a source.
        target: Destination node.

    Returns:
        List[NodeID]: Nodes from source to target, or an empty list when the
        target is unreachable.

    Raises:
        ValueError: If the result has no source (invalid state) or the target
            is outside the graph.
    """
    if result.source is None:
        raise ValueError("No source specified for path reconstruction")
    if not 0 <= target < len(result.distances):
        raise ValueError(
            f"Target node {target} is outside [0, {len(result.distances)})."
        )
    if result.distances[target] is None:
        return []

    path: List[NodeID] = []
    current: Optional[NodeID] = target
    while current is not None:
        path.append(current)
        current = result.predecessors[current]
    path.reverse()
    return path
