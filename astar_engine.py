"""
A* search over the implicit 4-connected grid.

Shares PriorityFrontier and CostTable with the Dijkstra engine. The frontier
is keyed by estimated total cost (accumulated cost + heuristic); a cell is
finalized the first time it is popped and never expanded again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Set
import logging
import math

from algorithms import PathSearchEngine
from cost_table import CostTable
from errors import InvalidInputError
from frontier import PriorityFrontier
from grid_graph import GridGraph, GridInput
from nodes import Cell, as_cell

logger = logging.getLogger(__name__)

Heuristic = Callable[[Cell, Cell], float]


def manhattan_distance(a: Cell, b: Cell) -> int:
    """|drow| + |dcol|; admissible and consistent on a unit-cost 4-connected grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def zero_heuristic(a: Cell, b: Cell) -> int:
    """Turns A* into plain uniform-cost search."""
    return 0


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of one grid search.

    An empty path means the goal was unreachable; that is a normal result,
    not an error.
    """
    path: List[Cell] = field(default_factory=list)
    expanded: int = 0

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def cost(self) -> float:
        return len(self.path) - 1 if self.path else math.inf


class SimpleAStarEngine(PathSearchEngine):
    """
    A* with a pluggable heuristic (Manhattan by default).

    The heuristic must be consistent for the first goal expansion to be
    optimal, since closed cells are never reopened.
    """

    def __init__(self, heuristic: Heuristic = manhattan_distance) -> None:
        self._heuristic = heuristic

    def find_path(self, grid: GridInput, start: Cell, goal: Cell) -> List[Cell]:
        return self.search(grid, start, goal).path

    def search(self, grid: GridInput, start: Cell, goal: Cell) -> PathResult:
        """
        Search from start to goal on grid.

        grid may be a GridGraph or anything GridGraph.from_cells accepts.

        Raises:
            EmptyGraphError: grid has no rows or no columns, or ragged rows.
            InvalidInputError: start or goal is out of bounds or blocked.
        """
        grid = GridGraph.from_cells(grid)
        start = _check_endpoint(grid, start, "start")
        goal = _check_endpoint(grid, goal, "goal")
        h = self._heuristic

        table = CostTable()
        table.seed(start)
        frontier: PriorityFrontier[Cell] = PriorityFrontier()
        frontier.insert(h(start, goal), start)
        closed: Set[Cell] = set()

        while not frontier.is_empty():
            _, u = frontier.extract_min()
            if u in closed:
                continue
            closed.add(u)

            if u == goal:
                path = table.path_to(goal)
                logger.debug(
                    "astar %s -> %s: %d steps, expanded=%d", start, goal, len(path) - 1, len(closed)
                )
                return PathResult(path=path, expanded=len(closed))

            g_u = table.best_cost(u)
            for v in grid.neighbors(u):
                if v in closed:
                    continue
                candidate = g_u + 1
                if table.relax(v, candidate, u):
                    frontier.insert(candidate + h(v, goal), v)

        logger.debug("astar %s -> %s: no path, expanded=%d", start, goal, len(closed))
        return PathResult(path=[], expanded=len(closed))


def find_path(grid: GridInput, start: Cell, goal: Cell) -> List[Cell]:
    """
    Shortest 4-connected path from start to goal inclusive, [] if none exists.
    """
    return SimpleAStarEngine().find_path(grid, start, goal)


def _check_endpoint(grid: GridGraph, cell, role: str) -> Cell:
    try:
        cell = as_cell(cell)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{role.capitalize()} {cell!r} is not a (row, col) pair.") from exc
    if not grid.in_bounds(cell):
        raise InvalidInputError(
            f"{role.capitalize()} {cell} is outside the {grid.rows}x{grid.cols} grid."
        )
    if not grid.is_walkable(cell):
        raise InvalidInputError(f"{role.capitalize()} {cell} is on a blocked cell.")
    return cell
