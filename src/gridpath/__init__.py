# -*- coding: utf-8 -*-
"""
`gridpath` — single-source shortest paths over small weighted directed graphs.

This top-level package exposes three user-facing subpackages:

- `gridpath.pre`       – input preparation (grid labels, validated edge lists)
- `gridpath.analysis`  – graph store, Dijkstra solver and path reconstruction
- `gridpath.post`      – DOT export and console reporting
"""

from __future__ import annotations

__all__ = ["pre", "analysis", "post", "__version__"]

# Optional version placeholder; replace at build time if needed
__version__ = "1.0.0"
