# -*- coding: utf-8 -*-
"""
Error taxonomy for gridpath.

All errors derive from `GraphError`, itself a ``ValueError``: they always describe
bad structural input (an edge, a vertex id, a disconnected goal), never a transient
condition, so nothing in the package retries on them.

- `InvalidEdge`    – edge endpoint out of range or malformed edge (construction time).
- `NegativeWeight` – edge weight below zero (construction time).
- `InvalidVertex`  – vertex id out of range at a solve / reconstruct boundary.
- `Unreachable`    – no path from source to goal (recoverable outcome).
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = ["GraphError", "InvalidEdge", "NegativeWeight", "InvalidVertex", "Unreachable"]


class GraphError(ValueError):
    """Base class of every gridpath error."""


class InvalidEdge(GraphError):
    """
    An edge cannot belong to the graph.

    Attributes
    ----------
    edge : Any
        The offending edge as supplied by the caller.
    index : int or None
        Position of the edge in the input edge list, if known.
    """

    def __init__(self, message: str, *, edge: Any = None, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.edge = edge
        self.index = index


class NegativeWeight(GraphError):
    """
    An edge weight violates the non-negativity precondition of Dijkstra's algorithm.

    Attributes
    ----------
    edge : Any
        The offending ``(source, target, weight)`` triple.
    index : int or None
        Position of the edge in the input edge list, if known.
    """

    def __init__(self, message: str, *, edge: Any = None, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.edge = edge
        self.index = index


class InvalidVertex(GraphError):
    def __init__(self, vertex: Any, vertex_count: int) -> None:
        super().__init__(
            f"Vertex {vertex!r} is not a vertex of the graph.\n"
            f"Vertices are integers in [0, {vertex_count})."
        )
        self.vertex = vertex
        self.vertex_count = vertex_count


class Unreachable(GraphError, LookupError):
    """
    The goal vertex was never reached from the source.

    This is a legitimate outcome on a disconnected graph: callers are expected
    to catch it and report "no path".
    """

    def __init__(self, source: int, goal: int) -> None:
        super().__init__(f"Vertex {goal} is unreachable from vertex {source}.")
        self.source = source
        self.goal = goal
