# -*- coding: utf-8 -*-
"""
Validated edge list for graph construction (gridpath).

This module defines the class `EdgeList`, which normalizes the caller's edges, given as
``(source, target, weight)`` triples or as a Polars DataFrame, into a single table
with the columns ``['from', 'to', 'weight']`` and checks it against the graph size.

Notes
-----
- The weight column is fixed to ``'weight'`` (see `EdgeList.OPTIMISATION_METRIC`).
- Row order is preserved: it is the insertion order of the graph's edges.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np
import pandas as pd
import polars as pl

from gridpath.utils.constant import EDGE_COLUMNS, OPTIMISATION_METRIC
from gridpath.utils.exceptions import InvalidEdge, NegativeWeight

__all__ = ["EdgeList"]

Edge = Tuple[int, int, int]

_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


# -----------------------------------------------------------------------------
# Class: EdgeList
# -----------------------------------------------------------------------------
class EdgeList:
    """
    EdgeList holds the validated edges of a graph with a fixed number of vertices.

    Constants
    ----------
    OPTIMISATION_METRIC : str

        The name of the weight column, always set to 'weight'.

    Attributes
    ----------
    vertex_count : int
        Number of vertices N. Valid endpoints are the integers ``[0, N)``.
    edgelist : polars.DataFrame
        The edge table, columns 'from', 'to', 'weight' (Int64), in insertion order.

    Notes
    -----
    - Endpoints are checked before weights: an edge that is both out of range and
      negative is reported as `InvalidEdge`.
    - No partial object is ever returned; validation happens in the constructor.

    Examples
    --------
    >>> edges = EdgeList(6, [(0, 3, 1), (2, 5, 1)])
    >>> edges.edgelist.shape
    (2, 3)
    """

    OPTIMISATION_METRIC = OPTIMISATION_METRIC

    def __init__(self, vertex_count: int, edges: Union[Iterable[Sequence[int]], pl.DataFrame]) -> None:
        """
        Parameters
        ----------
        vertex_count : int
            Number of vertices of the graph.
        edges : iterable of (source, target, weight) or polars.DataFrame
            The edges. A DataFrame must contain the integer columns ``['from', 'to', 'weight']``.

        Raises
        ------
        TypeError
            If `vertex_count` is not an integer or `edges` has an unsupported type.
        ValueError
            If `vertex_count` is negative or the DataFrame misses required columns.
        InvalidEdge
            If an edge is malformed or an endpoint is outside ``[0, vertex_count)``.
        NegativeWeight
            If an edge weight is negative.
        """
        if not _is_integer(vertex_count):
            raise TypeError(f"'vertex_count' must be an integer, got {type(vertex_count).__name__}.")
        if vertex_count < 0:
            raise ValueError(f"'vertex_count' must be non-negative, got {vertex_count}.")

        self.vertex_count = int(vertex_count)

        if isinstance(edges, pl.DataFrame):
            table = self._from_polars(edges)
        elif isinstance(edges, (str, bytes)) or not isinstance(edges, Iterable):
            raise TypeError("'edges' must be an iterable of (source, target, weight) triples or a Polars DataFrame.")
        else:
            table = self._from_triples(edges)

        self._validate(table)
        self.edgelist = table

    def __len__(self) -> int:
        return self.edgelist.height

    def __repr__(self) -> str:
        return f"EdgeList(vertex_count={self.vertex_count}, edges={len(self)})"

    @staticmethod
    def _from_triples(edges: Iterable[Sequence[int]]) -> pl.DataFrame:
        columns: List[List[int]] = [[], [], []]
        for index, edge in enumerate(edges):
            try:
                values = tuple(edge)
            except TypeError:
                raise InvalidEdge(
                    f"Edge #{index} must be a (source, target, weight) triple, got {edge!r}.",
                    edge=edge, index=index,
                ) from None
            if len(values) != 3 or not all(_is_integer(v) for v in values):
                raise InvalidEdge(
                    f"Edge #{index} must be a triple of integers (source, target, weight), got {edge!r}.",
                    edge=edge, index=index,
                )
            if not all(_INT64_MIN <= v <= _INT64_MAX for v in values):
                raise InvalidEdge(
                    f"Edge #{index} {edge!r} has a value outside the 64-bit integer range.",
                    edge=edge, index=index,
                )
            for column, value in zip(columns, values):
                column.append(int(value))

        return pl.DataFrame(
            dict(zip(EDGE_COLUMNS, columns)),
            schema={name: pl.Int64 for name in EDGE_COLUMNS},
        )

    @staticmethod
    def _from_polars(edges: pl.DataFrame) -> pl.DataFrame:
        missing_columns = [col for col in EDGE_COLUMNS if col not in edges.columns]
        if missing_columns:
            raise ValueError(f"Missing required columns in edgelist: {', '.join(missing_columns)}")

        for col in EDGE_COLUMNS:
            if not edges.schema[col].is_integer():
                raise TypeError(f"Column '{col}' must have an integer dtype, got {edges.schema[col]}.")

        return edges.select([pl.col(col).cast(pl.Int64) for col in EDGE_COLUMNS])

    def _validate(self, table: pl.DataFrame) -> None:
        n = self.vertex_count
        indexed = table.with_row_index("index")

        nulls = indexed.filter(pl.any_horizontal(pl.col(EDGE_COLUMNS).is_null()))
        if nulls.height:
            row = nulls.row(0, named=True)
            edge = tuple(row[col] for col in EDGE_COLUMNS)
            raise InvalidEdge(f"Edge #{row['index']} has a missing value: {edge}.", edge=edge, index=row["index"])

        out_of_range = indexed.filter(
            (pl.col("from") < 0) | (pl.col("from") >= n) | (pl.col("to") < 0) | (pl.col("to") >= n)
        )
        if out_of_range.height:
            row = out_of_range.row(0, named=True)
            edge = tuple(row[col] for col in EDGE_COLUMNS)
            raise InvalidEdge(
                f"Edge #{row['index']} {edge} has an endpoint outside [0, {n}).\n"
                f"{out_of_range.height} edge(s) out of range in total.",
                edge=edge, index=row["index"],
            )

        negative = indexed.filter(pl.col(OPTIMISATION_METRIC) < 0)
        if negative.height:
            row = negative.row(0, named=True)
            edge = tuple(row[col] for col in EDGE_COLUMNS)
            raise NegativeWeight(
                f"Edge #{row['index']} {edge} has a negative weight.\n"
                "Dijkstra's algorithm requires non-negative weights.",
                edge=edge, index=row["index"],
            )

    def triples(self) -> List[Edge]:
        """The edges as ``(source, target, weight)`` tuples, in insertion order."""
        return [tuple(row) for row in self.edgelist.iter_rows()]

    def to_pandas(self) -> pd.DataFrame:
        """
        The edge table as a Pandas DataFrame, with an extra 'order' column (row position).

        The 'order' column keeps the insertion order of parallel edges once the
        table is loaded into networkx.
        """
        df = self.edgelist.to_pandas()
        df["order"] = range(len(df))
        return df
