# -*- coding: utf-8 -*-
"""
Single-source shortest paths (Dijkstra) over a `gridpath.analysis.graph.Graph`.

The frontier is a binary heap with lazy deletion: a relaxed vertex is pushed again
with its new key and stale entries are skipped when popped.

Notes
-----
- Weights are non-negative by construction of the graph (`NegativeWeight` is raised
  by `Graph.build`), so the solver never checks them.
- Ties keep the existing predecessor: relaxation only happens on a strictly
  shorter candidate distance, so the first relaxation wins.
- Unreached vertices keep ``distance = inf`` and ``predecessor = self``.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, NamedTuple, Optional, TYPE_CHECKING
import heapq

import numpy as np
import polars as pl

from gridpath.utils.exceptions import InvalidVertex

if TYPE_CHECKING:  # noqa: F401
    from gridpath.analysis.graph import Graph

__all__ = ["ShortestPaths", "solve"]


class ShortestPaths(NamedTuple):
    """
    Output of `solve`: distance and predecessor vectors indexed by vertex.

    Both arrays are read-only. Unpacks as ``distances, predecessors = solve(graph, 0)``.
    """

    distances: np.ndarray
    predecessors: np.ndarray

    def is_reachable(self, v: int) -> bool:
        return bool(np.isfinite(self.distances[v]))

    def reachable(self) -> List[int]:
        """Reached vertices, in increasing order (the source included)."""
        return [int(v) for v in np.flatnonzero(np.isfinite(self.distances))]

    def to_polars(self, labels: Optional[Mapping[int, str]] = None) -> pl.DataFrame:
        """
        Results table, one row per vertex.

        Columns: 'vertex' (Int64), 'label' (Utf8, only when `labels` is given),
        'distance' (Float64, ``inf`` when unreached), 'predecessor' (Int64), 'reachable' (Boolean).
        """
        n = len(self.distances)
        columns: Dict[str, object] = {"vertex": pl.Series("vertex", np.arange(n), dtype=pl.Int64)}
        if labels is not None:
            columns["label"] = pl.Series("label", [labels.get(v) for v in range(n)], dtype=pl.Utf8)
        columns["distance"] = pl.Series("distance", self.distances, dtype=pl.Float64)
        columns["predecessor"] = pl.Series("predecessor", self.predecessors, dtype=pl.Int64)
        columns["reachable"] = pl.Series("reachable", np.isfinite(self.distances), dtype=pl.Boolean)
        return pl.DataFrame(columns).sort("vertex")


def solve(graph: Graph, source: int) -> ShortestPaths:
    """
    Run Dijkstra's algorithm from ``source``.

    Parameters
    ----------
    graph : Graph
        Graph with non-negative integer weights.
    source : int
        Source vertex, in ``[0, graph.vertex_count())``.

    Returns
    -------
    ShortestPaths
        ``distances[v]`` is the shortest-path weight from ``source`` to ``v`` (``inf`` if
        unreached); ``predecessors[v]`` is the vertex ``v`` was reached from on a
        shortest path (``v`` itself for the source and unreached vertices).

    Raises
    ------
    InvalidVertex
        If ``source`` is not a vertex of the graph.

    Examples
    --------
    >>> g = Graph.build(6, [(0, 3, 1), (2, 5, 1), (3, 4, 1), (4, 5, 1), (5, 2, 1)])
    >>> distances, predecessors = solve(g, 0)
    >>> float(distances[2]), int(predecessors[2])
    (4.0, 5)
    """
    n = graph.vertex_count()
    if isinstance(source, bool) or not isinstance(source, (int, np.integer)) or not 0 <= source < n:
        raise InvalidVertex(source, n)
    source = int(source)

    distances = np.full(n, np.inf)
    predecessors = np.arange(n, dtype=np.int64)
    finalized = np.zeros(n, dtype=bool)

    distances[source] = 0
    frontier = [(0, source)]

    while frontier:
        d, u = heapq.heappop(frontier)
        if finalized[u] or d > distances[u]:
            continue  # stale entry
        finalized[u] = True

        for v, w in graph.neighbors(u):
            candidate = d + w
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                heapq.heappush(frontier, (candidate, v))

    distances.flags.writeable = False
    predecessors.flags.writeable = False
    return ShortestPaths(distances, predecessors)
