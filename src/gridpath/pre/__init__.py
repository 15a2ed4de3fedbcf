# -*- coding: utf-8 -*-
"""
Pre-processing subpackage: input preparation and data structuring.

This subpackage re-exports user-facing classes so they can be imported directly:

- classes `Position`, `GridMap` – grid cells as vertices, and their labels
- class `EdgeList` – validated (source, target, weight) edge table
"""

from __future__ import annotations

from .grid import Position, GridMap
from .edgelist import EdgeList

__all__ = [
    "Position",
    "GridMap",
    "EdgeList",
]
