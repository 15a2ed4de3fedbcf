# -*- coding: utf-8 -*-
"""
General-purpose utilities for gridpath.

This module provides small helpers for:

- lightweight data formatting (e.g., `convert_to_path_string`, `format_distance`).
- DOT string quoting (`quote_dot`).
- output file path resolution (`resolve_output_path`).
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Union
from pathlib import Path
import math

__all__ = [
    "convert_to_path_string",
    "format_distance",
    "quote_dot",
    "resolve_output_path",
]


# -----------------------------------------------------------------------------
# Data formatting helpers
# -----------------------------------------------------------------------------
def convert_to_path_string(path: Sequence[int], labels: Optional[Mapping[int, str]] = None) -> str:
    """
    Convert a sequence of vertices to a human-readable route.

    Parameters
    ----------
    path : sequence of int
        Vertices of the path, source first.
    labels : mapping of int to str, optional
        Caller-provided vertex labels. Labelled vertices are shown as ``"3 (B)"``.

    Returns
    -------
    str
        The path joined with ``" -> "``.

    Examples
    --------
    >>> convert_to_path_string([0, 3, 4])
    '0 -> 3 -> 4'
    >>> convert_to_path_string([0, 3], {3: "B"})
    '0 -> 3 (B)'
    """
    labels = labels or {}
    return " -> ".join(
        f"{v} ({labels[v]})" if v in labels else str(v) for v in path
    )


def format_distance(value: float) -> str:
    """
    Format a distance value: integral values without decimals, ``inf`` when unreached.

    >>> format_distance(4.0)
    '4'
    >>> format_distance(float("inf"))
    'inf'
    """
    if math.isinf(value):
        return "inf"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def quote_dot(text: str) -> str:
    """
    Quote a string as a DOT double-quoted identifier.

    >>> quote_dot('A "corner"')
    '"A \\\\"corner\\\\""'
    """
    escaped = str(text).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


# -----------------------------------------------------------------------------
# File name or path helpers
# -----------------------------------------------------------------------------
def resolve_output_path(
    file_name: str,
    custom_path: Optional[Union[str, Path]] = None,
    *,
    suffix: str = ".dot",
) -> Path:
    """
    Build the output path of an exported file.

    Parameters
    ----------
    file_name : str
        Base name of the file, with or without ``suffix``.
    custom_path : str or pathlib.Path, optional
        Target directory ('~' expanded). Current working directory if None.
    suffix : str, optional
        File extension to enforce. Default is ``".dot"``.

    Returns
    -------
    pathlib.Path
        The resolved file path.

    Raises
    ------
    TypeError
        If `custom_path` is neither `str`, `pathlib.Path` nor None.
    ValueError
        If `file_name` is empty or contains a directory part.
    """
    if not file_name or Path(file_name).name != file_name:
        raise ValueError(
            "Non-compliant file name.\n"
            f"Received: {file_name!r}\n"
            "Tip: pass the directory through `custom_path`, only a base name is accepted here."
        )

    if custom_path is None:
        directory = Path.cwd()
    elif isinstance(custom_path, (str, Path)):
        directory = Path(custom_path).expanduser()
    else:
        raise TypeError("`custom_path` must be a `str` or `pathlib.Path`.")

    name = file_name if file_name.endswith(suffix) else file_name + suffix
    return directory / name
