# -*- coding: utf-8 -*-
"""
Shortest-path pipeline: build → solve → reconstruct → export.

This module defines the class `Route`, a thin configured wrapper on top of
`gridpath.analysis.graph.Graph`, `gridpath.analysis.dijkstra.solve`,
`gridpath.analysis.path.reconstruct` and `gridpath.post.dot.to_dot`. It keeps
the console output (gated by ``ParamConfig.main_print``) out of the pure functions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Union, TYPE_CHECKING
import time

import polars as pl

from gridpath.analysis.dijkstra import ShortestPaths, solve
from gridpath.analysis.graph import Graph
from gridpath.analysis.path import reconstruct
from gridpath.utils.config import ParamConfig
from gridpath.utils.exceptions import Unreachable

if TYPE_CHECKING:  # noqa: F401
    from gridpath.pre.grid import GridMap
    from gridpath.utils.config import DotConfig

__all__ = ["Route"]


# -----------------------------------------------------------------------------
# Class: Route
# -----------------------------------------------------------------------------
class Route:
    """
    Configured shortest-path run from ``config.source``.

    Attributes
    ----------
    config : ParamConfig
        Dataclass with validated configuration parameters.
    graph : Graph or None
        Graph set by ``build()``.
    result : ShortestPaths or None
        Distance and predecessor vectors set by ``process_dijkstra()``.
    table : polars.DataFrame or None
        Results table (see `ShortestPaths.to_polars`), set by ``process_dijkstra()``.
    path : list of int or None
        Last path returned by ``shortest_path()`` (None if unreachable or not queried).
    main_print : bool
        Controls console output, determined by configuration parameters or execution context.

    Methods
    -------
    build(edges, labels=None):
        Creates the graph from (source, target, weight) triples.
    process_dijkstra():
        Runs Dijkstra's algorithm from the configured source.
    shortest_path(goal=None):
        Reconstructs the path to ``goal`` (default: the configured goal).
    report(print_report=True):
        Formats (and prints) distances, parents and path.
    to_dot(config=None) / save_dot(config=None):
        Exports the graph with its shortest-path tree.

    Examples
    --------
    >>> route = Route({"vertex_count": 6, "source": 0, "goal": 2})
    >>> route = route.build([(0, 3, 1), (2, 5, 1), (3, 4, 1), (4, 5, 1), (5, 2, 1)]).process_dijkstra()
    >>> route.shortest_path()
    [0, 3, 4, 5, 2]
    """

    def __init__(self, param: Union[dict, ParamConfig], *, required_fields: Optional[list] = None) -> None:
        """
        Initializes the Route instance with specified and validated parameters.

        Parameters
        ----------
        param : dict or ParamConfig
            A dictionary of configuration parameters or an already validated ParamConfig object.

            Required keys (for the default configuration):

            - `"vertex_count"` : int
                Number of vertices of the graph.

            Optional keys:

            - `"source"` : int
                Source vertex. Default is 0.
            - `"goal"` : int
                Goal vertex of ``shortest_path()``. Default is None.
            - `"main_print"` : bool
                Enables console output for execution status. Default is False.

        required_fields : list, optional
            A custom list of fields required for this specific instance. If not provided,
            defaults to `["vertex_count", "source"]`.

        Raises
        ------
        ValueError
            Raised if any required parameter is missing or a vertex is out of range.
        TypeError
            Raised if a parameter has an incorrect type.
        """
        default_required_fields = ["vertex_count", "source"]
        required_fields = required_fields or default_required_fields

        # Case 1: param is a dictionary
        if isinstance(param, dict):
            self.config = ParamConfig(**param, required_fields=required_fields)
            self.config.validate()

        # Case 2: param is already a ParamConfig
        elif isinstance(param, ParamConfig):
            self.config = param
            self.config.validate_for_class(required_fields)
            self.config.validate()

        # Invalid type
        else:
            raise TypeError("Parameter 'param' must be a dictionary or a ParamConfig object.")

        self.vertex_count = self.config.vertex_count
        self.source = self.config.source
        self.goal = self.config.goal

        # Adjust parameters based on execution context
        self.main_print = self.config.main_print or (__name__ == "__main__")

        # Placeholders
        self.graph: Optional[Graph] = None
        self.result: Optional[ShortestPaths] = None
        self.table: Optional[pl.DataFrame] = None
        self.path: Optional[List[int]] = None

    def __repr__(self) -> str:
        return f"Route(source={self.source}, goal={self.goal}, graph={self.graph!r})"

    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)

    def build(
        self,
        edges: Union[Iterable[Sequence[int]], pl.DataFrame],
        *,
        labels: Optional[Union[Mapping[int, str], GridMap]] = None,
    ) -> Route:
        """
        Creates the graph from the edge list.

        Parameters
        ----------
        edges : iterable of (source, target, weight) or polars.DataFrame
            Edges of the graph, see `gridpath.pre.edgelist.EdgeList`.
        labels : mapping of int to str, or GridMap, optional
            Caller-provided vertex labels.

        Returns
        -------
        self : Route

        Raises
        ------
        InvalidEdge, NegativeWeight
            Propagated from `Graph.build`; no graph is stored.
        """
        self.graph = Graph.build(self.vertex_count, edges, labels=labels)
        self.result = self.table = self.path = None

        self._log(
            f"\nDirected graph created successfully with {self.graph.vertex_count()} nodes "
            f"and {self.graph.edge_count()} edges."
        )
        return self

    def process_dijkstra(self) -> Route:
        """
        Runs Dijkstra's algorithm from the configured source.

        Returns
        -------
        self : Route
            With `result` (ShortestPaths) and `table` (polars.DataFrame) set.

        Raises
        ------
        RuntimeError
            If ``build()`` has not been called.
        """
        if self.graph is None:
            raise RuntimeError("The graph is not built. Run 'build' first.")

        self._log(f"\nStep 1: Calculating shortest paths from node {self.source}...")
        start_time = time.perf_counter()
        self.result = solve(self.graph, self.source)
        elapsed = time.perf_counter() - start_time

        self.table = self.result.to_polars(self.graph.labels or None)
        self.path = None

        reached = len(self.result.reachable())
        self._log(
            "Dijkstra's algorithm successfully completed.\n"
            f"Calculation time: {elapsed:.6f} seconds.\n"
            f"Reached nodes: {reached} / {self.graph.vertex_count()}."
        )
        return self

    def shortest_path(self, goal: Optional[int] = None) -> Optional[List[int]]:
        """
        Reconstructs the path from the source to ``goal``.

        Parameters
        ----------
        goal : int, optional
            Goal vertex. Defaults to the configured goal.

        Returns
        -------
        list of int or None
            The path, source first, or None if ``goal`` is unreachable.

        Raises
        ------
        RuntimeError
            If ``process_dijkstra()`` has not been called.
        ValueError
            If no goal is given nor configured.
        InvalidVertex
            If ``goal`` is not a vertex of the graph.
        """
        if self.result is None:
            raise RuntimeError("No shortest-path results. Run 'process_dijkstra' first.")

        goal = self.goal if goal is None else goal
        if goal is None:
            raise ValueError("No goal vertex: pass 'goal' or set it in the configuration.")

        self._log(f"\nStep 2: Reconstructing the path from node {self.source} to node {goal}...")
        try:
            self.path = reconstruct(self.result.predecessors, self.source, goal)
        except Unreachable as e:
            self._log(str(e))
            self.path = None
        else:
            self._log(f"Path found with {len(self.path) - 1} edges.")
        return self.path

    def report(self, *, print_report: bool = True) -> str:
        """
        Formats distances, parents and, when a goal is configured, the path to it.

        Parameters
        ----------
        print_report : bool, optional
            Print the report to the console. The default is True.
        """
        from gridpath.post.report import format_report

        if self.result is None:
            raise RuntimeError("No shortest-path results. Run 'process_dijkstra' first.")

        path = None
        if self.goal is not None:
            try:
                path = reconstruct(self.result.predecessors, self.source, self.goal)
            except Unreachable:
                path = None

        text = format_report(self.result, self.source, self.goal, path, self.graph.labels or None)
        if print_report:
            print(text)
        return text

    def to_dot(self, config: Optional[DotConfig] = None) -> str:
        """
        Exports the graph with its shortest-path tree as DOT text (see `gridpath.post.dot.to_dot`).
        """
        from gridpath.post.dot import to_dot

        if self.result is None:
            raise RuntimeError("No shortest-path results. Run 'process_dijkstra' first.")
        return to_dot(self.graph, self.result.predecessors, config=config)

    def save_dot(self, config: Optional[DotConfig] = None) -> Path:
        """
        Writes the DOT export to disk (see `gridpath.post.dot.save_dot`).

        Returns
        -------
        pathlib.Path
            The written file.
        """
        from gridpath.post.dot import save_dot

        path = save_dot(self.to_dot(config), config)
        self._log(f"\nDOT file written: {path}")
        return path


# -----------------------------------------------------------------------------
# Main (example-only)
# -----------------------------------------------------------------------------
if __name__ == "__main__":

    dct_param = {
        "vertex_count": 6,
        "source": 0,
        "goal": 2,
        "main_print": True,
    }

    route = Route(dct_param)
    route.build([(0, 3, 1), (2, 5, 1), (3, 4, 1), (4, 5, 1), (5, 2, 1)])
    route.process_dijkstra()
    route.report()
    # route.save_dot()
