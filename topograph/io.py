"""Graph serialization in the ``{nodes, edges: [{u, v, w}]}`` schema.

Example document::

    {
        "nodes": 3,
        "edges": [
            {"u": 0, "v": 1, "w": 2},
            {"u": 1, "v": 2, "w": 3}
        ],
        "source": 0
    }

``"n"`` is accepted in place of ``"nodes"``; a missing ``"w"`` means weight
1; ``"source"`` and ``"weight_model"`` are optional. Files ending in
``.yaml``/``.yml`` are read and written as YAML, everything else as JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from topograph.graph import Edge, Graph
from topograph.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

_YAML_SUFFIXES = {".yaml", ".yml"}


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Convert a graph into its serializable dict form.

    Args:
        graph: Graph to convert.

    Returns:
        Dict with ``nodes``, ``edges`` and, when set, ``source``; the
        ``weight_model`` key is always present.
    """
    data: Dict[str, Any] = {
        "nodes": graph.n,
        "edges": [{"u": e.u, "v": e.v, "w": e.weight} for e in graph.edges],
        "weight_model": graph.weight_model,
    }
    if graph.source is not None:
        data["source"] = graph.source
    return data


def graph_from_dict(data: Mapping[str, Any]) -> Graph:
    """Build a graph from its dict form.

    Args:
        data: Mapping following the module schema.

    Returns:
        Graph: Validated graph.

    Raises:
        ValueError: If required keys are missing or have the wrong shape, or
            if the resulting graph is malformed.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Graph document must be a mapping, got {type(data).__name__}.")
    if "nodes" in data:
        n = data["nodes"]
    elif "n" in data:
        n = data["n"]
    else:
        raise ValueError("Graph document is missing the 'nodes' field.")

    raw_edges = data.get("edges", [])
    if not isinstance(raw_edges, list):
        raise ValueError("Graph document field 'edges' must be a list.")

    edges: List[Edge] = []
    for idx, item in enumerate(raw_edges):
        if not isinstance(item, Mapping):
            raise ValueError(f"Edge #{idx} must be a mapping with 'u' and 'v' keys.")
        try:
            edges.append(Edge(item["u"], item["v"], item.get("w", 1)))
        except KeyError as exc:
            raise ValueError(f"Edge #{idx} is missing field {exc.args[0]!r}.") from exc

    return Graph(
        n,
        tuple(edges),
        source=data.get("source"),
        weight_model=data.get("weight_model", "weighted"),
    )


def load_graph(path: PathLike) -> Graph:
    """Read a graph from a JSON or YAML file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document does not describe a valid graph.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Graph file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Graph file {path} is not valid UTF-8: {exc}") from exc
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    graph = graph_from_dict(data)
    logger.debug(f"Loaded graph from {path}: {graph.n} nodes, {graph.num_edges} edges")
    return graph


def save_graph(graph: Graph, path: PathLike) -> Path:
    """Write ``graph`` to ``path``, creating parent directories.

    Returns:
        Path: The written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = graph_to_dict(graph)
    if path.suffix.lower() in _YAML_SUFFIXES:
        text = yaml.safe_dump(data, sort_keys=False)
    else:
        text = json.dumps(data, indent=2) + "\n"
    path.write_text(text, encoding="utf-8")
    logger.debug(f"Saved graph to {path}")
    return path
