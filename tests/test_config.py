"""Tests for configuration containers, grid mapping and small helpers."""
from pathlib import Path

import pytest

from gridpath.pre import GridMap, Position
from gridpath.utils.config import DotConfig, ParamConfig
from gridpath.utils.utils import convert_to_path_string, format_distance, quote_dot, resolve_output_path


# -----------------------------------------------------------------------------
# ParamConfig / DotConfig
# -----------------------------------------------------------------------------
def test_param_config_validate_returns_self():
    config = ParamConfig(vertex_count=6, source=0, goal=2, required_fields=["vertex_count"])

    assert config.validate() is config


def test_param_config_missing_required_field():
    with pytest.raises(ValueError, match="vertex_count"):
        ParamConfig(required_fields=["vertex_count"]).validate()


def test_param_config_type_check():
    with pytest.raises(TypeError):
        ParamConfig(vertex_count="6").validate()
    with pytest.raises(TypeError):
        ParamConfig(main_print="yes").validate()


def test_param_config_ranges_checked_only_with_vertex_count():
    ParamConfig(source=42).validate()

    with pytest.raises(ValueError):
        ParamConfig(vertex_count=6, source=42).validate()
    with pytest.raises(ValueError):
        ParamConfig(vertex_count=-1).validate()


def test_param_config_validate_for_class():
    with pytest.raises(ValueError, match="Missing required parameters: goal"):
        ParamConfig(vertex_count=6).validate_for_class(["vertex_count", "goal"])


def test_describe(capsys):
    ParamConfig(vertex_count=6).describe()
    DotConfig().describe()

    out = capsys.readouterr().out
    assert "Vertex count             : 6" in out
    assert "file_name             : dijkstra-eg" in out


def test_dot_config_defaults_are_independent():
    first, second = DotConfig(), DotConfig()
    first.graph_attributes["rankdir"] = "TB"

    assert second.graph_attributes["rankdir"] == "LR"


# -----------------------------------------------------------------------------
# GridMap
# -----------------------------------------------------------------------------
def test_grid_map(grid_map):
    assert grid_map.vertex_count == len(grid_map) == 6
    assert grid_map.vertex_of(2, 1) == 3
    assert grid_map.position(5) == Position(2, 3)
    assert grid_map.labels()[4] == "(2,2)"


def test_grid_map_named_cells():
    grid = GridMap([Position(1, 1, "S"), (1, 2)])

    assert grid.labels() == {0: "S(1,1)", 1: "(1,2)"}


def test_grid_map_errors(grid_map):
    with pytest.raises(KeyError):
        grid_map.vertex_of(9, 9)
    with pytest.raises(IndexError):
        grid_map.position(6)
    with pytest.raises(ValueError, match="Duplicate"):
        GridMap([(1, 1), (1, 1)])


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def test_format_distance():
    assert format_distance(4.0) == "4"
    assert format_distance(float("inf")) == "inf"
    assert format_distance(2.5) == "2.5"


def test_convert_to_path_string():
    assert convert_to_path_string([0, 3, 4]) == "0 -> 3 -> 4"
    assert convert_to_path_string([0, 3], {3: "B"}) == "0 -> 3 (B)"
    assert convert_to_path_string([]) == ""


def test_quote_dot():
    assert quote_dot("grey") == '"grey"'
    assert quote_dot('a "b"') == '"a \\"b\\""'


def test_resolve_output_path(tmp_path):
    assert resolve_output_path("graph", tmp_path) == tmp_path / "graph.dot"
    assert resolve_output_path("graph.dot", str(tmp_path)) == tmp_path / "graph.dot"
    assert resolve_output_path("graph") == Path.cwd() / "graph.dot"


def test_resolve_output_path_errors():
    with pytest.raises(ValueError):
        resolve_output_path("dir/graph")
    with pytest.raises(ValueError):
        resolve_output_path("")
    with pytest.raises(TypeError):
        resolve_output_path("graph", 42)
