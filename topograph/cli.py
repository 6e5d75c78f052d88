"""Command-line interface for TopoGraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from topograph.algorithms import (
    dfs_sort,
    kahn_sort,
    kosaraju_scc,
    reconstruct_path,
    shortest_paths,
)
from topograph.generator import DatasetGenerator
from topograph.graph import Graph
from topograph.io import load_graph
from topograph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)

ALGORITHMS = ("all", "kahn", "dfs", "paths", "scc")


def _format_duration(seconds: float) -> str:
    """Return a concise duration string, e.g. ``"12.3 ms"`` or ``"1.23 s"``."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _run_algorithms(
    graph: Graph,
    algorithm: str,
    source: Optional[int],
    target: Optional[int],
) -> Dict[str, Any]:
    """Run the selected analyses and return results keyed by name."""
    results: Dict[str, Any] = {}
    if algorithm in ("all", "kahn"):
        results["kahn"] = kahn_sort(graph)
    if algorithm in ("all", "dfs"):
        results["dfs"] = dfs_sort(graph)
    if algorithm in ("all", "paths"):
        paths = shortest_paths(graph, source)
        results["paths"] = paths
        if target is not None:
            results["path_to_target"] = reconstruct_path(paths, target)
    if algorithm in ("all", "scc"):
        results["scc"] = kosaraju_scc(graph)
    return results


def _analyze(
    path: Path,
    algorithm: str,
    source: Optional[int],
    target: Optional[int],
    as_json: bool,
) -> None:
    start = perf_counter()
    try:
        graph = load_graph(path)
    except FileNotFoundError:
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to load graph: {e}")
        print(f"ERROR: Invalid graph file: {path}")
        print(f"  {e}")
        sys.exit(1)

    if source is None:
        source = graph.source
    if target is not None and source is None:
        print("ERROR: --target requires a source (--source or a 'source' field in the graph)")
        sys.exit(1)

    try:
        results = _run_algorithms(graph, algorithm, source, target)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    if as_json:
        doc: Dict[str, Any] = {"graph": {"nodes": graph.n, "edges": graph.num_edges}}
        for key, value in results.items():
            doc[key] = value.to_dict() if hasattr(value, "to_dict") else value
        print(json.dumps(doc, indent=2))
    else:
        print(f"Graph: {path} ({graph.n} nodes, {graph.num_edges} edges)")
        for key, value in results.items():
            print()
            if key == "path_to_target":
                shown = value if value else "unreachable"
                print(f"Path {source} -> {target}: {shown}")
            else:
                print(value.summary())

    logger.info(f"Analysis of {path} completed in {_format_duration(perf_counter() - start)}")


def _generate(output: Path, seed: Optional[int]) -> None:
    metadata = DatasetGenerator(seed=seed).generate_all(output)
    for meta in metadata:
        print(
            f"{meta.name:<20} | Nodes: {meta.nodes:<3} | Edges: {meta.edges:<3} | "
            f"Cyclic: {str(meta.is_cyclic):<5} | SCCs: {meta.scc_count:<2} | "
            f"Density: {meta.density:<8} | {meta.description}"
        )
    print(f"\nGenerated {len(metadata)} datasets in {output}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``topograph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="topograph",
        description="Topological sort, DAG path and SCC analysis of directed graphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{analyze,generate}",
        help="Available commands",
    )

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a graph file")
    analyze_parser.add_argument(
        "graph", type=Path, help="Path to a graph file (JSON or YAML)"
    )
    analyze_parser.add_argument(
        "--algorithm",
        "-a",
        choices=ALGORITHMS,
        default="all",
        help="Analysis to run (default: all)",
    )
    analyze_parser.add_argument(
        "--source",
        "-s",
        type=int,
        default=None,
        help="Source node for shortest paths (default: the graph's 'source' field)",
    )
    analyze_parser.add_argument(
        "--target",
        "-t",
        type=int,
        default=None,
        help="Also reconstruct the shortest path to this node",
    )
    analyze_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Generate the synthetic dataset suite"
    )
    generate_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("data"),
        help="Output directory (default: ./data)",
    )
    generate_parser.add_argument(
        "--seed", type=int, default=None, help="Master random seed (default: 42)"
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "analyze":
        _analyze(args.graph, args.algorithm, args.source, args.target, args.json)
    elif args.command == "generate":
        _generate(args.output, args.seed)


if __name__ == "__main__":
    main()
