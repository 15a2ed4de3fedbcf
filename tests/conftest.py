"""Shared fixtures and reference helpers for the gridpath tests."""
import math
import random
from typing import List, Tuple

import networkx as nx
import pytest

from gridpath.analysis import Graph
from gridpath.pre import GridMap, Position

# 0 (initial)   1 (obstacle)   2 (free)
# 3 (free)      4 (free)       5 (free)
GRID_EDGES = [(0, 3, 1), (2, 5, 1), (3, 4, 1), (4, 5, 1), (5, 2, 1)]
GRID_CELLS = [(1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (2, 3)]


@pytest.fixture
def grid_edges() -> List[Tuple[int, int, int]]:
    return list(GRID_EDGES)


@pytest.fixture
def grid_map() -> GridMap:
    return GridMap([Position(x, y) for x, y in GRID_CELLS])


@pytest.fixture
def grid_graph() -> Graph:
    return Graph.build(6, GRID_EDGES)


def random_edges(seed: int, n: int = 6, m: int = 12, max_weight: int = 5) -> List[Tuple[int, int, int]]:
    rng = random.Random(seed)
    return [(rng.randrange(n), rng.randrange(n), rng.randint(0, max_weight)) for _ in range(m)]


def brute_force_distances(n: int, edges, source: int) -> List[float]:
    """Minimum path weight over every simple path, using networkx for the enumeration."""
    g = nx.DiGraph()
    g.add_nodes_from(range(n))
    for u, v, w in edges:
        if u != v and (not g.has_edge(u, v) or w < g[u][v]["weight"]):
            g.add_edge(u, v, weight=w)

    distances = [math.inf] * n
    distances[source] = 0
    for target in range(n):
        if target == source:
            continue
        for path in nx.all_simple_paths(g, source, target):
            distances[target] = min(distances[target], nx.path_weight(g, path, "weight"))
    return distances
