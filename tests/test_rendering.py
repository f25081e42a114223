"""
Unit tests for the text renderers.
"""

import math

from astar_engine import find_path
from grid_graph import GridGraph
from rendering import format_distances, format_path, render_path


def test_format_distances_marks_unreachable():
    text = format_distances([0, 4, 2.0, math.inf, 1.5], source=0)
    assert text.splitlines() == [
        "Shortest distances from vertex 0:",
        "Vertex 0: 0",
        "Vertex 1: 4",
        "Vertex 2: 2",
        "Vertex 3: INF",
        "Vertex 4: 1.5",
    ]


def test_format_path():
    assert format_path([]) == "No path found."
    assert format_path([(0, 0), (0, 1)]) == "Path found (2 steps):\n(0, 0) (0, 1)"


def test_render_path_overlay():
    grid = GridGraph.from_cells([[0, 0, 0], [1, 1, 0], [0, 0, 0]])
    path = find_path(grid, (0, 0), (2, 2))
    assert render_path(grid, path, (0, 0), (2, 2)) == "S P P\n# # P\n. . G"
