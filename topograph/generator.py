"""Seeded synthetic graph datasets for exercising the algorithms.

`DatasetGenerator` builds DAGs, layered DAGs, cyclic graphs, graphs with a
chosen number of planted SCCs, and mixed structures. Each dataset in
:meth:`DatasetGenerator.generate_all` draws from its own ``random.Random``
whose seed is derived from the master seed and the dataset name, so output
does not depend on generation order.
"""

from __future__ import annotations

import hashlib
import random
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from topograph.algorithms.scc import kosaraju_scc
from topograph.algorithms.topological import kahn_order
from topograph.config import GENERATOR_CONFIG, GeneratorConfig
from topograph.graph import Edge, Graph
from topograph.io import save_graph
from topograph.logging import get_logger
from topograph.metrics import Metrics

logger = get_logger(__name__)

REPORT_FILENAME = "DATASET_REPORT.md"


def derive_seed(master_seed: int, *components: Any) -> int:
    """Derive a positive 31-bit seed from a master seed and identifiers."""
    seed_input = f"{master_seed}:" + ":".join(str(c) for c in components)
    digest = hashlib.sha256(seed_input.encode()).digest()
    return int.from_bytes(digest[:4], byteorder="big") & 0x7FFFFFFF


@dataclass(frozen=True)
class GraphMetadata:
    """Summary row describing one generated dataset."""

    name: str
    nodes: int
    edges: int
    is_cyclic: bool
    scc_count: int
    density: str
    description: str

    @classmethod
    def describe(
        cls, name: str, graph: Graph, density: str, description: str
    ) -> GraphMetadata:
        """Build metadata by analyzing ``graph`` rather than trusting the recipe."""
        return cls(
            name=name,
            nodes=graph.n,
            edges=graph.num_edges,
            is_cyclic=len(kahn_order(graph, Metrics())) < graph.n,
            scc_count=kosaraju_scc(graph).num_components,
            density=density,
            description=description,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class DatasetGenerator:
    """Random graph factory backed by a private ``random.Random``.

    Args:
        seed: Master seed. Defaults to ``config.seed``.
        config: Weight range and density thresholds.
    """

    def __init__(
        self, seed: Optional[int] = None, config: GeneratorConfig = GENERATOR_CONFIG
    ) -> None:
        self.config = config
        self.seed = config.seed if seed is None else seed
        self.rng = random.Random(self.seed)

    def _weight(self) -> int:
        return self.config.random_weight(self.rng)

    def _edge(self, u: int, v: int) -> Edge:
        return Edge(u, v, self._weight())

    #
    # Edge-list recipes
    #
    def dag_edges(self, nodes: int, density: float) -> List[Edge]:
        """Forward edges ``u < v`` kept with probability ``density``."""
        max_edges = int(nodes * (nodes - 1) * density / 2)
        edges: List[Edge] = []
        for u in range(nodes):
            for v in range(u + 1, nodes):
                if self.rng.random() < density and len(edges) < max_edges:
                    edges.append(self._edge(u, v))
        return edges

    def layered_dag_edges(self, nodes: int, density: float, layers: int) -> List[Edge]:
        """Edges only from lower to strictly higher random layers."""
        if layers < 1:
            raise ValueError(f"layers must be at least 1, got {layers}")
        layer = [self.rng.randrange(layers) for _ in range(nodes)]
        edges: List[Edge] = []
        for u in range(nodes):
            for v in range(nodes):
                if layer[u] < layer[v] and self.rng.random() < density:
                    edges.append(self._edge(u, v))
        return edges

    def cyclic_edges(self, nodes: int, density: float, cycle_count: int) -> List[Edge]:
        """Plant ``cycle_count`` short rings then pad with random edges."""
        edges: List[Edge] = []
        pairs: Set[Tuple[int, int]] = set()

        def add(u: int, v: int) -> None:
            edges.append(self._edge(u, v))
            pairs.add((u, v))

        if nodes >= 2:
            for _ in range(cycle_count):
                size = min(self.rng.randint(2, 4), nodes)
                start = self.rng.randrange(nodes - size + 1)
                for j in range(size):
                    add(start + j, start + (j + 1) % size)

        target = min(int(nodes * nodes * density), nodes * (nodes - 1))
        while len(pairs) < target:
            u = self.rng.randrange(nodes)
            v = self.rng.randrange(nodes)
            if u != v and (u, v) not in pairs:
                add(u, v)
        return edges

    def multiple_scc_edges(self, nodes: int, density: float, scc_count: int) -> List[Edge]:
        """One ring per random component plus sparse cross-component edges."""
        if scc_count < 1:
            raise ValueError(f"scc_count must be at least 1, got {scc_count}")
        component = [self.rng.randrange(scc_count) for _ in range(nodes)]
        edges: List[Edge] = []
        for comp in range(scc_count):
            members = [i for i in range(nodes) if component[i] == comp]
            if len(members) > 1:
                self.rng.shuffle(members)
                for i, u in enumerate(members):
                    edges.append(self._edge(u, members[(i + 1) % len(members)]))

        for u in range(nodes):
            for v in range(nodes):
                if component[u] != component[v] and self.rng.random() < density * 0.3:
                    edges.append(self._edge(u, v))
        return edges

    def mixed_edges(self, nodes: int, density: float) -> List[Edge]:
        """DAG base with one to three random edges, some paired with a reverse edge."""
        edges = self.dag_edges(nodes, density * 0.7)
        if nodes == 0:
            return edges
        pairs = {(e.u, e.v) for e in edges}
        for _ in range(self.rng.randint(1, 3)):
            u = self.rng.randrange(nodes)
            v = self.rng.randrange(nodes)
            if u != v and (u, v) not in pairs:
                edges.append(self._edge(u, v))
                pairs.add((u, v))
                if self.rng.random() < 0.5 and (v, u) not in pairs:
                    edges.append(self._edge(v, u))
                    pairs.add((v, u))
        return edges

    def complex_mixed_edges(self, nodes: int, density: float) -> List[Edge]:
        """SCC-rich lower half feeding a DAG upper half."""
        half = nodes // 2
        edges = self.multiple_scc_edges(half, density, 2)
        edges.extend(_shift(self.dag_edges(half, density), half))
        for _ in range(nodes // 4):
            u = self.rng.randrange(half)
            v = self.rng.randrange(half) + half
            edges.append(self._edge(u, v))
        return edges

    def block_mixed_edges(self, nodes: int, density: float, blocks: int = 4) -> List[Edge]:
        """Alternate cyclic and acyclic blocks joined by random cross edges."""
        if blocks < 1 or nodes < blocks:
            raise ValueError(
                f"block_mixed needs at least one node per block, got {nodes} nodes for {blocks} blocks"
            )
        size = nodes // blocks
        edges: List[Edge] = []
        for block in range(blocks):
            if block % 2 == 0:
                part = self.cyclic_edges(size, density, 2)
            else:
                part = self.dag_edges(size, density)
            edges.extend(_shift(part, block * size))

        for _ in range(nodes * 2):
            u = self.rng.randrange(nodes)
            v = self.rng.randrange(nodes)
            if u // size != v // size and self.rng.random() < density * 0.2:
                edges.append(self._edge(u, v))
        return edges

    #
    # Graph builders
    #
    def dag(self, nodes: int, density: float) -> Graph:
        return Graph(nodes, tuple(self.dag_edges(nodes, density)))

    def layered_dag(self, nodes: int, density: float, layers: int = 4) -> Graph:
        return Graph(nodes, tuple(self.layered_dag_edges(nodes, density, layers)))

    def cyclic(self, nodes: int, density: float, cycle_count: int = 2) -> Graph:
        return Graph(nodes, tuple(self.cyclic_edges(nodes, density, cycle_count)))

    def multiple_sccs(self, nodes: int, density: float, scc_count: int = 3) -> Graph:
        return Graph(nodes, tuple(self.multiple_scc_edges(nodes, density, scc_count)))

    def mixed(self, nodes: int, density: float) -> Graph:
        return Graph(nodes, tuple(self.mixed_edges(nodes, density)))

    def complex_mixed(self, nodes: int, density: float) -> Graph:
        return Graph(nodes, tuple(self.complex_mixed_edges(nodes, density)))

    def block_mixed(self, nodes: int, density: float, blocks: int = 4) -> Graph:
        return Graph(nodes, tuple(self.block_mixed_edges(nodes, density, blocks)))

    #
    # Dataset suite
    #
    def _suite(self) -> List[Tuple[str, str, float, str, Any]]:
        return [
            ("small_dag_1", "dag", 0.3, "Pure DAG, no cycles", (8,)),
            ("small_cyclic_1", "cyclic", 0.4, "Cyclic with planted rings", (7, 2)),
            ("small_mixed_1", "mixed", 0.35, "Mixed structure with cycles and DAG parts", (9,)),
            ("medium_dag_1", "layered_dag", 0.25, "Layered DAG with 4 layers", (15, 4)),
            ("medium_cyclic_1", "multiple_sccs", 0.3, "Multiple SCCs with inter-component edges", (18, 3)),
            ("medium_mixed_1", "complex_mixed", 0.4, "Complex mixed structure", (12,)),
            ("large_dag_1", "layered_dag", 0.2, "Large scale DAG for performance testing", (35, 8)),
            ("large_cyclic_1", "multiple_sccs", 0.25, "Large cyclic graph with multiple SCCs", (45, 5)),
            ("large_mixed_1", "block_mixed", 0.3, "Large mixed graph for comprehensive testing", (28,)),
        ]

    def generate_all(self, output_dir: Union[str, Path] = "data") -> List[GraphMetadata]:
        """Write the nine standard datasets and a markdown report.

        Args:
            output_dir: Directory receiving ``<name>.json`` files and
                ``DATASET_REPORT.md``.

        Returns:
            List[GraphMetadata]: One entry per dataset, in suite order.
        """
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)
        metadata: List[GraphMetadata] = []
        for name, kind, density, description, args in self._suite():
            self.rng = random.Random(derive_seed(self.seed, name))
            nodes, *extra = args
            graph = getattr(self, kind)(nodes, density, *extra)
            save_graph(graph, out / f"{name}.json")
            meta = GraphMetadata.describe(
                name, graph, self.config.density_label(density), description
            )
            logger.info(
                f"Generated {name}: {meta.nodes} nodes, {meta.edges} edges, "
                f"{meta.scc_count} SCCs"
            )
            metadata.append(meta)

        (out / REPORT_FILENAME).write_text(render_report(metadata), encoding="utf-8")
        logger.info(f"Generated {len(metadata)} datasets in {out}")
        return metadata


def _shift(edges: List[Edge], offset: int) -> List[Edge]:
    return [Edge(e.u + offset, e.v + offset, e.weight) for e in edges]


def render_report(metadata: List[GraphMetadata]) -> str:
    """Render dataset metadata as a markdown document."""
    lines = [
        "# Graph Dataset Report",
        "",
        "## Overview",
        f"Generated {len(metadata)} test datasets for graph algorithm testing.",
        "",
        "## Dataset Details",
        "",
        "| Name | Nodes | Edges | Cyclic | SCCs | Density | Description |",
        "|------|-------|-------|--------|------|---------|-------------|",
    ]
    for m in metadata:
        lines.append(
            f"| {m.name} | {m.nodes} | {m.edges} | {m.is_cyclic} | "
            f"{m.scc_count} | {m.density} | {m.description} |"
        )
    lines.extend(
        [
            "",
            "## Categories",
            "- **Small**: 6-10 nodes, simple structures",
            "- **Medium**: 10-20 nodes, mixed structures",
            "- **Large**: 20-50 nodes, performance testing",
            "",
        ]
    )
    return "\n".join(lines)
