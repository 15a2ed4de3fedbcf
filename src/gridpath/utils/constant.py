# -*- coding: utf-8 -*-
"""
Core constants for gridpath.

This module centralizes:

- the edge list column names (``EDGE_COLUMNS``) and the weight column (``OPTIMISATION_METRIC``).
- the default DOT header, edge and node attributes.
- the default colors of tree and non-tree edges.

Notes
-----
* The DOT defaults reproduce the layout of the reference ``dijkstra-eg.dot`` output.
"""

from __future__ import annotations

from typing import Dict, List

__all__ = [
    "OPTIMISATION_METRIC",
    "EDGE_COLUMNS",
    "DEFAULT_GRAPH_ATTRIBUTES",
    "DEFAULT_EDGE_ATTRIBUTES",
    "DEFAULT_NODE_ATTRIBUTES",
    "TREE_COLOR",
    "NON_TREE_COLOR",
]


# -----------------------------------------------------------------------------
# Edge list
# -----------------------------------------------------------------------------

# Weight column of the edge list, also the networkx edge attribute name.
OPTIMISATION_METRIC: str = "weight"

# It is essential that these names remain unchanged: they are the public
# column contract of `gridpath.pre.edgelist.EdgeList`.
EDGE_COLUMNS: List[str] = ["from", "to", OPTIMISATION_METRIC]
""" Column names of an edge list table, in order. """


# -----------------------------------------------------------------------------
# DOT export
# -----------------------------------------------------------------------------
DEFAULT_GRAPH_ATTRIBUTES: Dict[str, str] = {
    "rankdir": "LR",
    "size": '"4,3"',
    "ratio": '"fill"',
}
""" Graph-level statements written at the top of the DOT file (values already quoted). """

DEFAULT_EDGE_ATTRIBUTES: Dict[str, str] = {"style": "bold"}
DEFAULT_NODE_ATTRIBUTES: Dict[str, str] = {"shape": "circle"}

TREE_COLOR: str = "black"
NON_TREE_COLOR: str = "grey"
