# -*- coding: utf-8 -*-
"""
Path reconstruction from a predecessor vector.
"""

from __future__ import annotations

from typing import List, Sequence, TYPE_CHECKING

import numpy as np

from gridpath.utils.exceptions import InvalidEdge, InvalidVertex, Unreachable

if TYPE_CHECKING:  # noqa: F401
    from gridpath.analysis.graph import Graph

__all__ = ["reconstruct", "path_weight"]


def _as_vertex(v: int, n: int) -> int:
    if isinstance(v, bool) or not isinstance(v, (int, np.integer)) or not 0 <= v < n:
        raise InvalidVertex(v, n)
    return int(v)


def reconstruct(predecessors: Sequence[int], source: int, goal: int) -> List[int]:
    """
    Walk the predecessor vector back from ``goal`` to ``source``.

    Parameters
    ----------
    predecessors : sequence of int or numpy array
        Predecessor vector returned by `gridpath.analysis.dijkstra.solve`.
    source : int
        Vertex the solver was run from.
    goal : int
        Vertex to reach.

    Returns
    -------
    list of int
        The path, source first. ``[source]`` when ``goal == source``.

    Raises
    ------
    Unreachable
        If ``goal`` was never reached from ``source``.
    InvalidVertex
        If ``source`` or ``goal`` is outside the vector.

    Notes
    -----
    The walk is bounded by the number of vertices: a chain that never reaches
    ``source`` (e.g. predecessors computed from another source) raises
    `Unreachable` instead of looping.
    """
    n = len(predecessors)
    source = _as_vertex(source, n)
    goal = _as_vertex(goal, n)

    path = [goal]
    current = goal
    for _ in range(n):
        if current == source:
            path.reverse()
            return path
        parent = int(predecessors[current])
        if parent == current:
            break  # unreached vertex, or the root of another tree
        path.append(parent)
        current = parent

    raise Unreachable(source, goal)


def path_weight(graph: Graph, path: Sequence[int]) -> int:
    """
    Total weight of ``path``, taking the cheapest edge between consecutive vertices.

    Raises
    ------
    InvalidEdge
        If two consecutive vertices are not joined by an edge.
    """
    total = 0
    for u, v in zip(path, path[1:]):
        weights = graph.edge_weights(u, v)
        if not weights:
            raise InvalidEdge(f"There is no edge {u} -> {v} in the graph.", edge=(u, v))
        total += min(weights)
    return total
