"""
Plain-text rendering of search results.
"""

from typing import Iterable, Sequence
import math

from grid_graph import GridGraph
from nodes import Cell, VertexId


def format_cost(cost: float) -> str:
    if math.isinf(cost):
        return "INF"
    if isinstance(cost, float) and cost.is_integer():
        return str(int(cost))
    return str(cost)


def format_distances(distances: Sequence[float], source: VertexId) -> str:
    lines = [f"Shortest distances from vertex {source}:"]
    lines.extend(f"Vertex {i}: {format_cost(d)}" for i, d in enumerate(distances))
    return "\n".join(lines)


def format_path(path: Sequence[Cell]) -> str:
    if not path:
        return "No path found."
    coords = " ".join(f"({r}, {c})" for r, c in path)
    return f"Path found ({len(path)} steps):\n{coords}"


def render_path(grid: GridGraph, path: Iterable[Cell], start: Cell, goal: Cell) -> str:
    """
    Draw the grid with S (start), G (goal), P (path), . (open) and # (blocked).
    """
    on_path = set(path)
    start, goal = tuple(start), tuple(goal)
    lines = []
    for r in range(grid.rows):
        row = []
        for c in range(grid.cols):
            cell = (r, c)
            if cell == start:
                row.append("S")
            elif cell == goal:
                row.append("G")
            elif not grid.is_walkable(cell):
                row.append("#")
            elif cell in on_path:
                row.append("P")
            else:
                row.append(".")
        lines.append(" ".join(row))
    return "\n".join(lines)
