# -*- coding: utf-8 -*-
"""
Graphviz DOT export of a graph and its shortest-path tree.

This module provides:

- `to_dot` – serialize a graph, one line per edge, marking tree and non-tree edges.
- `read_dot_edges` – recover ``(source, target, weight, tree)`` from an exported text.
- `save_dot` – write an exported text to disk.

Each edge line has the form::

    <source> -> <target> [weight=<w>, tree=<true|false>, label="<w>", color="<color>"]

``weight`` and ``tree`` carry the data; ``label`` and ``color`` are for display
(tree edges in black, others in grey by default, see `gridpath.utils.config.DotConfig`).
An edge ``(u, v)`` is a tree edge iff ``predecessors[v] == u``. A self-loop on a vertex
that is its own predecessor (the source, or an unreached vertex) is therefore a tree edge.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING
import re

from gridpath.utils.config import DotConfig
from gridpath.utils.utils import quote_dot, resolve_output_path

if TYPE_CHECKING:  # noqa: F401
    from gridpath.analysis.graph import Graph

__all__ = ["to_dot", "read_dot_edges", "save_dot"]

_EDGE_LINE = re.compile(
    r"^\s*(?P<source>\d+)\s*->\s*(?P<target>\d+)\s*"
    r"\[\s*weight=(?P<weight>\d+)\s*,\s*tree=(?P<tree>true|false)\b"
)


def _attribute_list(attributes: dict) -> str:
    return ", ".join(f"{key}={quote_dot(value)}" for key, value in attributes.items())


def to_dot(
    graph: Graph,
    predecessors: Sequence[int],
    *,
    weights: Optional[Sequence[int]] = None,
    config: Optional[DotConfig] = None,
) -> str:
    """
    Serialize ``graph`` as a DOT digraph, marking the shortest-path tree.

    Parameters
    ----------
    graph : Graph
        The graph that was solved.
    predecessors : sequence of int or numpy array
        Predecessor vector returned by `gridpath.analysis.dijkstra.solve`.
    weights : sequence of int, optional
        Weights to write, aligned with ``graph.edges()``. Defaults to ``graph.weights()``.
    config : DotConfig, optional
        Layout options. Defaults to ``DotConfig()``.

    Returns
    -------
    str
        The DOT text, newline-terminated. Edges appear in ``graph.edges()`` order.

    Raises
    ------
    ValueError
        If `predecessors` or `weights` does not match the graph size.
    """
    config = config or DotConfig()
    edges = graph.edges()

    if len(predecessors) != graph.vertex_count():
        raise ValueError(
            f"The predecessor vector has {len(predecessors)} entries, "
            f"the graph has {graph.vertex_count()} vertices."
        )
    if weights is None:
        weights = [w for _, _, w in edges]
    elif len(weights) != len(edges):
        raise ValueError(f"Expected {len(edges)} weights (one per edge), got {len(weights)}.")

    lines = [f"digraph {config.graph_name} {{"]
    lines += [f"  {key}={value}" for key, value in config.graph_attributes.items()]
    if config.edge_attributes:
        lines.append(f"  edge[{_attribute_list(config.edge_attributes)}]")
    if config.node_attributes:
        lines.append(f"  node[{_attribute_list(config.node_attributes)}]")

    if config.include_labels:
        lines += [f"  {v} [label={quote_dot(graph.labels[v])}]" for v in sorted(graph.labels)]

    for (u, v, _), w in zip(edges, weights):
        tree = int(predecessors[v]) == u
        color = config.tree_color if tree else config.non_tree_color
        lines.append(
            f"  {u} -> {v} [weight={w}, tree={'true' if tree else 'false'}, "
            f"label={quote_dot(w)}, color={quote_dot(color)}]"
        )

    lines.append("}")
    return "\n".join(lines) + "\n"


def read_dot_edges(text: str) -> List[Tuple[int, int, int, bool]]:
    """
    Parse the edge lines of a text produced by `to_dot`.

    Returns
    -------
    list of (source, target, weight, tree)
        In file order.
    """
    edges = []
    for line in text.splitlines():
        match = _EDGE_LINE.match(line)
        if match:
            edges.append((
                int(match["source"]),
                int(match["target"]),
                int(match["weight"]),
                match["tree"] == "true",
            ))
    return edges


def save_dot(text: str, config: Optional[DotConfig] = None) -> Path:
    """
    Write a DOT text to ``<custom_path or cwd>/<file_name>.dot``.

    Returns
    -------
    pathlib.Path
        The written file.

    Raises
    ------
    RuntimeError
        If the file cannot be written.
    """
    config = config or DotConfig()
    path = resolve_output_path(config.file_name, config.custom_path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise RuntimeError(f"Error while writing the DOT file '{path}': {e}") from e
    return path
