"""Graph algorithms: topological ordering, DAG paths and SCCs."""

from topograph.algorithms.dag_paths import (
    ShortestPathResult,
    reconstruct_path,
    shortest_paths,
)
from topograph.algorithms.scc import SCCResult, build_condensation, kosaraju_scc
from topograph.algorithms.topological import (
    TopoSortResult,
    dfs_sort,
    kahn_sort,
    topological_sort,
)

__all__ = [
    "TopoSortResult",
    "kahn_sort",
    "dfs_sort",
    "topological_sort",
    "ShortestPathResult",
    "shortest_paths",
    "reconstruct_path",
    "SCCResult",
    "kosaraju_scc",
    "build_condensation",
]
