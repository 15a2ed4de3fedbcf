# -*- coding: utf-8 -*-
"""
Analysis subpackage: graph store, Dijkstra solver and path reconstruction.

For most users, the class `Route` is the entry point to build a graph, run Dijkstra
and query a path. The pure building blocks are re-exported as well:

- class `Graph` – immutable weighted directed graph
- function `solve` and class `ShortestPaths` – single-source Dijkstra
- functions `reconstruct`, `path_weight` – path from the predecessor vector
"""

from __future__ import annotations

from .graph import Graph
from .dijkstra import ShortestPaths, solve
from .path import reconstruct, path_weight
from .route import Route

__all__ = ["Graph", "ShortestPaths", "solve", "reconstruct", "path_weight", "Route"]
