# -*- coding: utf-8 -*-
"""
Graph store for the shortest-path analysis.

This module defines the class `Graph`, an immutable weighted directed multigraph built
from a `gridpath.pre.edgelist.EdgeList`. Storage is a frozen NetworkX MultiDiGraph;
adjacency is additionally cached per vertex in insertion order so that neighbor
iteration, and therefore solver and export output, is deterministic.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union, TYPE_CHECKING

import networkx as nx
import numpy as np
import polars as pl

from gridpath.pre.edgelist import EdgeList
from gridpath.utils.constant import OPTIMISATION_METRIC
from gridpath.utils.exceptions import InvalidVertex

if TYPE_CHECKING:  # noqa: F401
    from gridpath.pre.grid import GridMap

__all__ = ["Graph"]


# -----------------------------------------------------------------------------
# Class: Graph
# -----------------------------------------------------------------------------
class Graph:
    """
    Weighted directed graph over the vertices ``[0, N)``.

    Use `Graph.build` (edge triples) or `Graph.from_edgelist` (validated table)
    rather than the constructor.

    Attributes
    ----------
    nx_graph : networkx.MultiDiGraph
        Frozen graph. Each edge carries the attributes 'weight' and 'order'
        (its position in the input edge list). Vertex labels, if any, are
        stored in the node attribute 'label'.
    labels : mapping of int to str
        Caller-provided vertex labels (possibly empty), read-only.

    Notes
    -----
    - Parallel edges are kept and relaxed independently.
    - The graph cannot be modified after construction (`networkx.freeze`).
    """

    def __init__(self, nx_graph: nx.MultiDiGraph, vertex_count: int) -> None:
        self._vertex_count = vertex_count
        self.labels: Mapping[int, str] = MappingProxyType({
            int(v): label for v, label in nx_graph.nodes(data="label") if label is not None
        })

        # Out-edges per vertex, in insertion order (not grouped by target)
        adjacency: List[Tuple[Tuple[int, int], ...]] = []
        for u in range(vertex_count):
            out = sorted(nx_graph.out_edges(u, data=True), key=lambda e: e[2]["order"])
            adjacency.append(tuple((int(v), int(data[OPTIMISATION_METRIC])) for _, v, data in out))
        self._adjacency = tuple(adjacency)

        self.nx_graph = nx.freeze(nx_graph)

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edge_count={self.edge_count()})"

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------
    @classmethod
    def build(
        cls,
        vertex_count: int,
        edges: Union[Iterable[Sequence[int]], pl.DataFrame],
        *,
        labels: Optional[Union[Mapping[int, str], GridMap]] = None,
    ) -> Graph:
        """
        Construct a graph from a vertex count and a list of (source, target, weight) triples.

        Parameters
        ----------
        vertex_count : int
            Number of vertices N.
        edges : iterable of (source, target, weight) or polars.DataFrame
            Edges in insertion order. See `gridpath.pre.edgelist.EdgeList`.
        labels : mapping of int to str, or GridMap, optional
            Caller-provided vertex labels.

        Returns
        -------
        Graph

        Raises
        ------
        InvalidEdge
            If an endpoint is outside ``[0, vertex_count)`` or an edge is malformed.
        NegativeWeight
            If a weight is negative.
        InvalidVertex
            If a label is attached to a vertex outside ``[0, vertex_count)``.

        Examples
        --------
        >>> g = Graph.build(6, [(0, 3, 1), (2, 5, 1), (3, 4, 1), (4, 5, 1), (5, 2, 1)])
        >>> list(g.neighbors(3))
        [(4, 1)]
        """
        return cls.from_edgelist(EdgeList(vertex_count, edges), labels=labels)

    @classmethod
    def from_edgelist(
        cls,
        edgelist: EdgeList,
        *,
        labels: Optional[Union[Mapping[int, str], GridMap]] = None,
    ) -> Graph:
        """
        Construct a graph from an already validated `EdgeList`.

        The Polars table is converted to Pandas for compatibility with NetworkX.
        """
        if not isinstance(edgelist, EdgeList):
            raise TypeError("'edgelist' must be an EdgeList instance.")

        n = edgelist.vertex_count
        graph = nx.from_pandas_edgelist(
            edgelist.to_pandas(),
            source="from",
            target="to",
            edge_attr=[OPTIMISATION_METRIC, "order"],
            create_using=nx.MultiDiGraph,
        )
        graph.add_nodes_from(range(n))

        if labels is not None:
            if hasattr(labels, "labels"):  # GridMap
                labels = labels.labels()
            for v, label in labels.items():
                if v not in graph:
                    raise InvalidVertex(v, n)
                graph.nodes[v]["label"] = str(label)

        return cls(graph, n)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def _check_vertex(self, v: int) -> None:
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)) or not 0 <= v < self._vertex_count:
            raise InvalidVertex(v, self._vertex_count)

    def vertex_count(self) -> int:
        return self._vertex_count

    def edge_count(self) -> int:
        return sum(len(out) for out in self._adjacency)

    def neighbors(self, v: int) -> Iterator[Tuple[int, int]]:
        """
        Iterate over the ``(target, weight)`` pairs of the edges leaving ``v``.

        Each call returns a fresh iterator; the order is the insertion order of the edges.
        """
        self._check_vertex(v)
        return iter(self._adjacency[v])

    def edges(self) -> List[Tuple[int, int, int]]:
        """All ``(source, target, weight)`` triples, by source vertex then insertion order."""
        return [(u, v, w) for u in range(self._vertex_count) for v, w in self._adjacency[u]]

    def weights(self) -> List[int]:
        """Edge weights aligned with `Graph.edges`."""
        return [w for _, _, w in self.edges()]

    def has_edge(self, u: int, v: int) -> bool:
        return self.nx_graph.has_edge(u, v)

    def edge_weights(self, u: int, v: int) -> List[int]:
        """Weights of every parallel edge ``u -> v`` (empty if there is none)."""
        self._check_vertex(u)
        self._check_vertex(v)
        return [w for target, w in self._adjacency[u] if target == v]

    def label(self, v: int) -> Optional[str]:
        self._check_vertex(v)
        return self.labels.get(v)
