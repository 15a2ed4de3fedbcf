"""Tests for the validated edge list."""
import polars as pl
import pytest

from gridpath.pre import EdgeList
from gridpath.utils.exceptions import GraphError, InvalidEdge, NegativeWeight


def test_edgelist_keeps_insertion_order(grid_edges):
    edges = EdgeList(6, grid_edges)

    assert len(edges) == 5
    assert edges.edgelist.columns == ["from", "to", "weight"]
    assert edges.triples() == grid_edges


def test_edgelist_from_polars():
    table = pl.DataFrame({"weight": [2, 0], "from": [0, 1], "to": [1, 0]})
    edges = EdgeList(2, table)

    assert edges.edgelist.columns == ["from", "to", "weight"]
    assert edges.triples() == [(0, 1, 2), (1, 0, 0)]


def test_edgelist_empty():
    edges = EdgeList(3, [])

    assert len(edges) == 0
    assert edges.triples() == []


def test_edgelist_rejects_endpoint_out_of_range():
    with pytest.raises(InvalidEdge) as excinfo:
        EdgeList(6, [(0, 1, 1), (1, 6, 1)])

    assert excinfo.value.index == 1
    assert excinfo.value.edge == (1, 6, 1)


def test_edgelist_rejects_negative_endpoint():
    with pytest.raises(InvalidEdge):
        EdgeList(6, [(-1, 2, 1)])


def test_edgelist_rejects_negative_weight():
    with pytest.raises(NegativeWeight) as excinfo:
        EdgeList(6, [(0, 1, 1), (2, 3, -4)])

    assert excinfo.value.index == 1
    assert isinstance(excinfo.value, GraphError)


def test_edgelist_reports_range_before_weight():
    with pytest.raises(InvalidEdge):
        EdgeList(6, [(0, 9, -1)])


@pytest.mark.parametrize("edge", [(0, 1), (0, 1, 2, 3), (0, 1, 1.5), (0, 1, True), ("0", 1, 1), 7])
def test_edgelist_rejects_malformed_edges(edge):
    with pytest.raises(InvalidEdge):
        EdgeList(6, [edge])


@pytest.mark.parametrize("edge", [(0, 1, 2 ** 63), (0, 2 ** 64, 1), (-(2 ** 63) - 1, 1, 1)])
def test_edgelist_rejects_values_beyond_int64(edge):
    with pytest.raises(InvalidEdge) as excinfo:
        EdgeList(2, [edge])

    assert excinfo.value.index == 0


def test_edgelist_accepts_largest_int64_weight():
    edges = EdgeList(2, [(0, 1, 2 ** 63 - 1)])

    assert edges.triples() == [(0, 1, 2 ** 63 - 1)]


def test_edgelist_polars_missing_column():
    with pytest.raises(ValueError, match="Missing required columns"):
        EdgeList(2, pl.DataFrame({"from": [0], "to": [1]}))


def test_edgelist_polars_float_weights():
    with pytest.raises(TypeError):
        EdgeList(2, pl.DataFrame({"from": [0], "to": [1], "weight": [1.5]}))


def test_edgelist_polars_null_value():
    table = pl.DataFrame({"from": [0, None], "to": [1, 0], "weight": [1, 1]}, schema={
        "from": pl.Int64, "to": pl.Int64, "weight": pl.Int64,
    })
    with pytest.raises(InvalidEdge):
        EdgeList(2, table)


@pytest.mark.parametrize("vertex_count, error", [(-1, ValueError), (2.0, TypeError), (None, TypeError)])
def test_edgelist_rejects_bad_vertex_count(vertex_count, error):
    with pytest.raises(error):
        EdgeList(vertex_count, [])


def test_edgelist_to_pandas_has_order_column(grid_edges):
    df = EdgeList(6, grid_edges).to_pandas()

    assert list(df.columns) == ["from", "to", "weight", "order"]
    assert list(df["order"]) == [0, 1, 2, 3, 4]
