"""Iterative depth-first search shared by the ordering and SCC algorithms.

The traversal keeps an explicit stack of ``(node, successor_iterator)``
frames, so node entry order and finish order are identical to the classic
recursive formulation while avoiding Python's recursion limit.
"""

from __future__ import annotations

from typing import Iterator, List, MutableSequence, Optional, Sequence, Tuple

from topograph.graph import NodeID
from topograph.metrics import Metrics


def depth_first(
    adjacency: Sequence[Sequence[NodeID]],
    root: NodeID,
    visited: MutableSequence[bool],
    metrics: Metrics,
    *,
    entered: Optional[List[NodeID]] = None,
    finished: Optional[List[NodeID]] = None,
    on_path: Optional[MutableSequence[bool]] = None,
) -> bool:
    """Run one DFS tree from ``root`` over ``adjacency``.

    Counters: ``dfs_visits`` per node entered, ``edges_explored`` per
    successor examined, ``stack_pushes`` per node appended to ``finished``.

    Args:
        adjacency: Successor lists indexed by node id.
        root: Start node. Must not be visited yet.
        visited: Shared visited flags; updated in place.
        metrics: Accumulator for the current algorithm call.
        entered: If given, nodes are appended on entry (preorder).
        finished: If given, nodes are appended when all successors are done.
        on_path: If given, tracks nodes on the current DFS path and enables
            back-edge detection.

    Returns:
        bool: True if a back edge to a node on the current path was seen.
            Always False when ``on_path`` is None.
    """
    found_back_edge = False

    def enter(node: NodeID) -> None:
        visited[node] = True
        if on_path is not None:
            on_path[node] = True
        if entered is not None:
            entered.append(node)
        metrics.dfs_visits += 1

    enter(root)
    stack: List[Tuple[NodeID, Iterator[NodeID]]] = [(root, iter(adjacency[root]))]
    while stack:
        node, successors = stack[-1]
        for nxt in successors:
            metrics.edges_explored += 1
            if not visited[nxt]:
                enter(nxt)
                stack.append((nxt, iter(adjacency[nxt])))
                break
            if on_path is not None and on_path[nxt]:
                found_back_edge = True
        else:
            stack.pop()
            if on_path is not None:
                on_path[node] = False
            if finished is not None:
                finished.append(node)
                metrics.stack_pushes += 1
    return found_back_edge
