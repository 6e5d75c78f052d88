"""Operation counters and timing for algorithm runs.

Each algorithm call creates its own `Metrics` accumulator, increments
counters while it runs, and attaches an immutable `MetricsSnapshot` to its
result. Nothing is shared between calls.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from topograph.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MetricsSnapshot:
    """Frozen view of the counters collected during one algorithm call.

    Attributes:
        relaxations: Attempted edge relaxations (successful or not).
        dfs_visits: Nodes entered by depth-first search.
        edges_explored: Edges examined during traversal or degree scans.
        stack_pushes: Pushes onto a DFS finish stack or BFS queue.
        stack_pops: Pops from a stack or queue.
        elapsed_seconds: Wall-clock duration of the call.
    """

    relaxations: int = 0
    dfs_visits: int = 0
    edges_explored: int = 0
    stack_pushes: int = 0
    stack_pops: int = 0
    elapsed_seconds: float = 0.0

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_seconds * 1000.0

    def summary(self) -> str:
        """Return the labeled multi-line metrics report."""
        return "\n".join(
            [
                "Performance Metrics:",
                f"  Execution Time: {self.elapsed_ms:.3f} ms",
                f"  Relaxations: {self.relaxations}",
                f"  DFS Visits: {self.dfs_visits}",
                f"  Edges Explored: {self.edges_explored}",
                f"  Stack Pushes: {self.stack_pushes}",
                f"  Stack Pops: {self.stack_pops}",
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Metrics:
    """Mutable counter set owned by a single algorithm call."""

    def __init__(self) -> None:
        self.relaxations = 0
        self.dfs_visits = 0
        self.edges_explored = 0
        self.stack_pushes = 0
        self.stack_pops = 0
        self._start: Optional[float] = None
        self._elapsed = 0.0

    def reset(self) -> None:
        """Zero all counters and the timer."""
        self.relaxations = 0
        self.dfs_visits = 0
        self.edges_explored = 0
        self.stack_pushes = 0
        self.stack_pops = 0
        self._start = None
        self._elapsed = 0.0

    def start(self) -> None:
        self._start = time.perf_counter()

    def stop(self) -> None:
        """Stop the timer started by :meth:`start`."""
        if self._start is None:
            logger.warning("Metrics stopped without start - elapsed time is zero")
            return
        self._elapsed = time.perf_counter() - self._start
        self._start = None

    @property
    def elapsed_seconds(self) -> float:
        return self._elapsed

    def snapshot(self) -> MetricsSnapshot:
        """Return the current counters as an immutable snapshot."""
        return MetricsSnapshot(
            relaxations=self.relaxations,
            dfs_visits=self.dfs_visits,
            edges_explored=self.edges_explored,
            stack_pushes=self.stack_pushes,
            stack_pops=self.stack_pops,
            elapsed_seconds=self._elapsed,
        )
