# -*- coding: utf-8 -*-
"""
Post-processing subpackage: export and presentation of shortest-path results.

This subpackage re-exports the main user-facing functions:

- `to_dot`, `read_dot_edges`, `save_dot` – Graphviz DOT export of the graph with
  its shortest-path tree highlighted.
- `format_report` – console report (distances, parents and path).
"""

from __future__ import annotations

from .dot import to_dot, read_dot_edges, save_dot
from .report import format_report

__all__ = ["to_dot", "read_dot_edges", "save_dot", "format_report"]
