# -*- coding: utf-8 -*-
"""
Console report of a shortest-path run.

The functions only build strings; printing is left to the caller
(see `gridpath.analysis.route.Route.report`).
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, TYPE_CHECKING

from gridpath.utils.utils import convert_to_path_string, format_distance

if TYPE_CHECKING:  # noqa: F401
    from gridpath.analysis.dijkstra import ShortestPaths

__all__ = ["format_distances", "format_path", "format_report"]


def format_distances(result: ShortestPaths, labels: Optional[Mapping[int, str]] = None) -> str:
    """
    One line per vertex: ``distance(v) = d, parent(v) = p``.

    Labelled vertices get their label appended, e.g. ``distance(3) = 1, parent(3) = 0  # B(2,1)``.
    """
    labels = labels or {}
    lines: List[str] = []
    for v, (distance, parent) in enumerate(zip(result.distances, result.predecessors)):
        line = f"distance({v}) = {format_distance(distance)}, parent({v}) = {int(parent)}"
        if v in labels:
            line += f"  # {labels[v]}"
        lines.append(line)
    return "\n".join(lines)


def format_path(path: Sequence[int], labels: Optional[Mapping[int, str]] = None) -> str:
    return convert_to_path_string(path, labels)


def format_report(
    result: ShortestPaths,
    source: int,
    goal: Optional[int],
    path: Optional[Sequence[int]],
    labels: Optional[Mapping[int, str]] = None,
) -> str:
    """
    Full report: the distances block, then the path from ``source`` to ``goal``.

    ``path=None`` with a goal means the goal is unreachable. ``goal=None`` omits the path section.
    """
    sections = ["distances and parents:", format_distances(result, labels), ""]
    if goal is not None:
        sections.append(f"Path from node {source} to node {goal}")
        if path is None:
            sections.append(f"No path: node {goal} is unreachable from node {source}.")
        else:
            sections.append(format_path(path, labels))
    return "\n".join(sections)
