# -*- coding: utf-8 -*-
"""
Grid cells as graph vertices.

This module defines the class `Position` (one grid cell) and the class `GridMap`,
an ordered collection of cells whose positions in the collection are the vertex
identities used by the graph. The mapping only produces vertex labels: the
shortest-path algorithm treats vertices opaquely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

__all__ = ["Position", "GridMap"]


@dataclass(frozen=True)
class Position:
    """A grid cell at column ``x``, row ``y``, with an optional one-character name."""

    x: int
    y: int
    name: Optional[str] = None

    @property
    def label(self) -> str:
        coordinates = f"({self.x},{self.y})"
        return f"{self.name}{coordinates}" if self.name else coordinates


# -----------------------------------------------------------------------------
# Class: GridMap
# -----------------------------------------------------------------------------
class GridMap:
    """
    Ordered collection of grid cells.

    The index of a cell in the collection is its vertex id: with the cells
    ``[(1,1), (1,2), (1,3), (2,1), (2,2), (2,3)]`` the vertex ``3`` is the cell ``(2,1)``.

    Parameters
    ----------
    positions : iterable of Position or (x, y) tuples
        Cells in vertex order.

    Raises
    ------
    ValueError
        If two cells share the same coordinates.
    """

    def __init__(self, positions: Iterable[Position | Tuple[int, int]]) -> None:
        self._positions: List[Position] = [
            p if isinstance(p, Position) else Position(*p) for p in positions
        ]
        self._index: Dict[Tuple[int, int], int] = {}
        for vertex, position in enumerate(self._positions):
            key = (position.x, position.y)
            if key in self._index:
                raise ValueError(
                    f"Duplicate grid cell {key}: vertices {self._index[key]} and {vertex}."
                )
            self._index[key] = vertex

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    @property
    def vertex_count(self) -> int:
        return len(self._positions)

    def position(self, vertex: int) -> Position:
        """Return the cell of ``vertex``. Raises ``IndexError`` for an unknown vertex."""
        if not 0 <= vertex < len(self._positions):
            raise IndexError(f"Vertex {vertex} is not a cell of the grid (0..{len(self._positions) - 1}).")
        return self._positions[vertex]

    def vertex_of(self, x: int, y: int) -> int:
        """Return the vertex id of the cell ``(x, y)``. Raises ``KeyError`` if absent."""
        try:
            return self._index[(x, y)]
        except KeyError:
            raise KeyError(f"No grid cell at ({x},{y}).") from None

    def labels(self) -> Dict[int, str]:
        """Vertex labels suitable for `gridpath.analysis.Graph.build`."""
        return {vertex: position.label for vertex, position in enumerate(self._positions)}
