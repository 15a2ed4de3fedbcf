# -*- coding: utf-8 -*-
"""
Configuration containers for the gridpath package.

This module defines two dataclasses that centralize user-facing parameters:

- `ParamConfig` – Pipeline parameters (graph size, source, goal, console output).
- `DotConfig` – Layout and export settings for the DOT export.

**Use ``...Config.describe()`` to display a clean summary of current settings.**

Notes
-----
* It is intended to be imported and the configuration objects injected into the
  corresponding classes/functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gridpath.utils.constant import (
    DEFAULT_GRAPH_ATTRIBUTES,
    DEFAULT_EDGE_ATTRIBUTES,
    DEFAULT_NODE_ATTRIBUTES,
    TREE_COLOR,
    NON_TREE_COLOR,
)

__all__ = ["ParamConfig", "DotConfig"]


# -----------------------------------------------------------------------------
# ParamConfig
# -----------------------------------------------------------------------------
@dataclass
class ParamConfig:
    """
    Base configuration class for the shortest-path pipeline (`gridpath.analysis.Route`).

    **Use ``ParamConfig.describe()`` to display a clean summary of current settings.**

    Notes
    -----
    When initializing ``ParamConfig`` **directly** with a dictionary, you must unpack it
    with ``**param`` so that keys map to dataclass fields. In contrast, gridpath
    classes accept either a ``dict`` or an existing ``ParamConfig`` and will handle
    conversion/validation internally.

    Examples
    --------
        >>> param = {"vertex_count": 6, "source": 0, "goal": 2}
        >>> config = ParamConfig(**param)  # keys are mapped to fields via **
        >>> config.validate()

    Attributes
    ----------
    vertex_count : Optional[int]
        Number of vertices N of the graph. Vertices are the integers ``[0, N)``.
    source : Optional[int]
        Vertex from which Dijkstra's algorithm is run. Default is ``0``.
    goal : Optional[int]
        Vertex whose path from ``source`` is reconstructed. ``None`` means no path query.
    main_print : bool
        Controls whether general execution information should be printed to the
        console. Useful for monitoring progress in scripts or debugging.
    required_fields : List[str]
        List of field names that are required for validation. This is set
        dynamically in the context of each class that uses ParamConfig.
    """

    vertex_count: Optional[int] = None  # Number of vertices of the graph.
    source: Optional[int] = 0  # Source vertex of the solver.
    goal: Optional[int] = None  # Goal vertex of the path query.
    main_print: bool = False  # Toggles general execution information in the console.

    # Custom field validation (e.g., required fields)
    required_fields: List[str] = field(default_factory=list)  # Dynamically set in each class.

    def validate(self) -> ParamConfig:
        """
        Validate that all required fields are provided and check value ranges.
        """
        for field_name in self.required_fields:
            if getattr(self, field_name) is None:
                raise ValueError(f"Required parameter '{field_name}' is missing.")

        self._validate_types()
        self._validate_vertices()

        return self

    def _validate_types(self) -> None:
        """
        Explicitly validate types for each field.
        """
        type_map = {
            "vertex_count": (int, type(None)),
            "source": (int, type(None)),
            "goal": (int, type(None)),
            "main_print": (bool,),
        }

        for field_name, expected_types in type_map.items():
            value = getattr(self, field_name)
            # bool is an int subclass; it is never a valid vertex or count
            if field_name != "main_print" and isinstance(value, bool):
                raise TypeError(f"Parameter '{field_name}' must be an integer, got bool.")
            if not isinstance(value, expected_types):
                raise TypeError(
                    f"Parameter '{field_name}' must be of type {expected_types}, got {type(value).__name__}."
                )

    def _validate_vertices(self) -> None:
        """
        Validate the vertex count and that source/goal are vertices of the graph.
        """
        if self.vertex_count is None:
            return  # Ranges cannot be checked before the graph size is known

        if self.vertex_count < 0:
            raise ValueError(f"'vertex_count' must be non-negative, got {self.vertex_count}.")

        for field_name in ("source", "goal"):
            value = getattr(self, field_name)
            if value is not None and not 0 <= value < self.vertex_count:
                raise ValueError(
                    f"Invalid '{field_name}': {value}\n"
                    f"It must be a vertex in [0, {self.vertex_count})."
                )

    def validate_for_class(self, required_fields: List[str]) -> None:
        """
        Validate that the specified required fields are present in the ParamConfig object.

        Parameters
        ----------
        required_fields : list of str
            List of field names that must be validated.

        Raises
        ------
        ValueError
            If any required field is missing.
        """
        missing_fields = [field for field in required_fields if getattr(self, field, None) is None]
        if missing_fields:
            raise ValueError(f"Missing required parameters: {', '.join(missing_fields)}")

    def describe(self) -> None:
        """
        Display a summary of the current pipeline configuration.
        """
        print("\nParamConfig (pipeline settings):")
        print(f" - Vertex count             : {self.vertex_count}")
        print(f" - Source vertex            : {self.source}")
        print(f" - Goal vertex              : {self.goal}")
        print(f" - Print summary            : {self.main_print}")


# -----------------------------------------------------------------------------
# DotConfig
# -----------------------------------------------------------------------------
@dataclass
class DotConfig:
    """
    Configuration container for the DOT export.

    This dataclass centralizes the layout and file options used by
    `gridpath.post.dot.to_dot` and `gridpath.post.dot.save_dot`. It allows the user to control:

      - The graph name and the graph-level statements (rankdir, size, ratio)
      - Default edge and node attributes
      - The colors distinguishing tree edges from non-tree edges
      - Node label declarations
      - The exported file name and directory

    **Use ``DotConfig.describe()`` to display a clean summary of current settings.**

    Attributes
    ----------
    graph_name : str
        Name of the ``digraph``.
    graph_attributes : Dict[str, str]
        Graph-level ``key=value`` statements. Values are written verbatim, quote them if needed.
    edge_attributes : Dict[str, str]
        Default edge attributes, written as ``edge[key="value"]``.
    node_attributes : Dict[str, str]
        Default node attributes, written as ``node[key="value"]``.
    tree_color : str
        Color of edges lying on the shortest-path tree.
    non_tree_color : str
        Color of every other edge.
    include_labels : bool
        If ``True``, labelled vertices get a ``<v> [label="..."]`` declaration.
    file_name : str
        Base name of the exported file (``.dot`` is appended).
    custom_path : Optional[str]
        Directory where the file is written. Current working directory if ``None``.

    Notes
    -----
    - Default values are stored in `gridpath.utils.constant`.
    - Attribute names follow the Graphviz language: <https://graphviz.org/doc/info/attrs.html>
    """

    graph_name: str = "D"
    graph_attributes: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_GRAPH_ATTRIBUTES))
    edge_attributes: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_EDGE_ATTRIBUTES))
    node_attributes: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_NODE_ATTRIBUTES))
    tree_color: str = TREE_COLOR
    non_tree_color: str = NON_TREE_COLOR
    include_labels: bool = False
    file_name: str = "dijkstra-eg"
    custom_path: Optional[str] = None

    def describe(self) -> None:
        """
        Display a summary of the DOT export configuration.
        """
        print("\nDotConfig:")
        print(f" - graph_name            : {self.graph_name}")
        print(f" - graph_attributes      : {self.graph_attributes}")
        print(f" - edge_attributes       : {self.edge_attributes}")
        print(f" - node_attributes       : {self.node_attributes}")
        print(f" - tree_color            : {self.tree_color}")
        print(f" - non_tree_color        : {self.non_tree_color}")
        print(f" - include_labels        : {self.include_labels}")
        print(f" - file_name             : {self.file_name}")
        print(f" - custom_path           : {self.custom_path or 'None'}")

        print("\nAttribute names follow the Graphviz language. See: https://graphviz.org/doc/info/attrs.html")


# -----------------------------------------------------------------------------
# Example usage (no side effects at import time)
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    config = ParamConfig(vertex_count=6, source=0, goal=2, main_print=True, required_fields=["vertex_count"])
    config.validate()
    config.describe()

    DotConfig().describe()
