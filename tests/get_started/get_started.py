# Getting started: shortest path on a small 2x3 grid.
# Cell 1 is an obstacle; the other cells are connected by unit-cost moves.

import pathlib

from gridpath.utils import ParamConfig, DotConfig
from gridpath.pre import GridMap, Position
from gridpath.analysis import Route

output_folder = pathlib.Path("outputs")
output_folder.mkdir(exist_ok=True)

# ==========================================================================================
# === Grid: the position of a cell in the list is its vertex id ===
# ==========================================================================================

#        0                1                2
grid = GridMap([
    Position(1, 1, "S"), Position(1, 2, "X"), Position(1, 3, "G"),
    Position(2, 1),      Position(2, 2),      Position(2, 3),
])
#        3                4                5

edges = [(0, 3, 1), (2, 5, 1), (3, 4, 1), (4, 5, 1), (5, 2, 1)]


# ==========================================================================================
# === Configuration ===
# ==========================================================================================

config = ParamConfig(**{
    "vertex_count": grid.vertex_count,
    "source": grid.vertex_of(1, 1),
    "goal": grid.vertex_of(1, 3),
    "main_print": True,
})
config.describe()

dot_config = DotConfig(include_labels=True, custom_path=str(output_folder))


# ==========================================================================================
# === Analysis: build, solve, reconstruct ===
# ==========================================================================================

route = Route(config).build(edges, labels=grid).process_dijkstra()
route.report()

print(route.table)


# ==========================================================================================
# === Post-processing: DOT export (open it with any Graphviz viewer) ===
# ==========================================================================================

route.save_dot(dot_config)
