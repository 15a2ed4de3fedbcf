"""Tests for path reconstruction."""
import pytest

from gridpath.analysis import Graph, path_weight, reconstruct, solve
from gridpath.utils.exceptions import InvalidEdge, InvalidVertex, Unreachable

from conftest import random_edges


def test_grid_scenario_path(grid_graph):
    _, predecessors = solve(grid_graph, 0)

    assert reconstruct(predecessors, 0, 2) == [0, 3, 4, 5, 2]


def test_path_to_source_is_single_vertex(grid_graph):
    _, predecessors = solve(grid_graph, 0)

    assert reconstruct(predecessors, 0, 0) == [0]


def test_unreachable_goal(grid_graph):
    _, predecessors = solve(grid_graph, 0)

    with pytest.raises(Unreachable) as excinfo:
        reconstruct(predecessors, 0, 1)

    assert excinfo.value.source == 0
    assert excinfo.value.goal == 1
    assert isinstance(excinfo.value, LookupError)


def test_predecessors_from_another_source(grid_graph):
    _, predecessors = solve(grid_graph, 0)

    # 3 hangs under 0, not under 4
    with pytest.raises(Unreachable):
        reconstruct(predecessors, 4, 3)


def test_cyclic_predecessors_do_not_loop():
    with pytest.raises(Unreachable):
        reconstruct([1, 0, 2], 2, 0)


def test_reconstruct_accepts_plain_list():
    assert reconstruct([0, 0, 1], 0, 2) == [0, 1, 2]


@pytest.mark.parametrize("source, goal", [(0, 6), (-1, 2), (0, None)])
def test_reconstruct_invalid_vertex(grid_graph, source, goal):
    _, predecessors = solve(grid_graph, 0)

    with pytest.raises(InvalidVertex):
        reconstruct(predecessors, source, goal)


def test_path_weight(grid_graph):
    assert path_weight(grid_graph, [0, 3, 4, 5, 2]) == 4
    assert path_weight(grid_graph, [0]) == 0


def test_path_weight_takes_cheapest_parallel_edge():
    g = Graph.build(2, [(0, 1, 5), (0, 1, 2)])

    assert path_weight(g, [0, 1]) == 2


def test_path_weight_missing_edge(grid_graph):
    with pytest.raises(InvalidEdge):
        path_weight(grid_graph, [0, 4])


@pytest.mark.parametrize("seed", range(25))
def test_reconstructed_paths_are_valid(seed):
    edges = random_edges(seed, n=8, m=16)
    g = Graph.build(8, edges)

    for source in range(8):
        result = solve(g, source)
        for goal in range(8):
            if not result.is_reachable(goal):
                with pytest.raises(Unreachable):
                    reconstruct(result.predecessors, source, goal)
                continue

            path = reconstruct(result.predecessors, source, goal)
            assert path[0] == source
            assert path[-1] == goal
            assert all(g.has_edge(u, v) for u, v in zip(path, path[1:]))
            assert path_weight(g, path) == result.distances[goal]
