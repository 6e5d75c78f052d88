"""TopoGraph: directed graph analysis library.

TopoGraph computes topological orderings, shortest and critical paths over
DAGs, and strongly connected components with their condensation graph. Every
algorithm returns an immutable result carrying per-call operation counters.

Primary API:
    Graph, Edge - immutable directed graph over nodes 0..n-1
    kahn_sort(), dfs_sort() - topological ordering with cycle detection
    shortest_paths(), reconstruct_path() - DAG shortest and critical paths
    kosaraju_scc() - strongly connected components and condensation

Example:
    from topograph import Graph, shortest_paths

    graph = Graph.from_edge_list(3, [(0, 1, 2), (1, 2, 3), (0, 2, 10)])
    result = shortest_paths(graph, source=0)
    result.distances            # (0, 2, 5)
    result.critical_path        # (0, 2)
"""

from __future__ import annotations

from topograph import logging
from topograph.algorithms import (
    SCCResult,
    ShortestPathResult,
    TopoSortResult,
    build_condensation,
    dfs_sort,
    kahn_sort,
    kosaraju_scc,
    reconstruct_path,
    shortest_paths,
    topological_sort,
)
from topograph.graph import Edge, Graph
from topograph.io import graph_from_dict, graph_to_dict, load_graph, save_graph
from topograph.metrics import Metrics, MetricsSnapshot
from topograph.nx import NodeMap, from_networkx, to_networkx

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Graph",
    "Edge",
    "Metrics",
    "MetricsSnapshot",
    # Algorithms
    "kahn_sort",
    "dfs_sort",
    "topological_sort",
    "TopoSortResult",
    "shortest_paths",
    "reconstruct_path",
    "ShortestPathResult",
    "kosaraju_scc",
    "build_condensation",
    "SCCResult",
    # IO
    "graph_to_dict",
    "graph_from_dict",
    "load_graph",
    "save_graph",
    # NetworkX
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
