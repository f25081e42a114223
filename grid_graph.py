"""
Implicit 4-connected grid graph for gridroute.

Cells are addressed as (row, col). A cell is walkable when its stored value
is zero/False; any non-zero value marks it blocked. Edges are never
materialized: every walkable cell has a unit-weight edge to each in-bounds,
walkable orthogonal neighbour.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from errors import EmptyGraphError
from nodes import Cell

# Up, down, left, right.
_MOVES: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Anything GridGraph.from_cells accepts.
GridInput = Union["GridGraph", np.ndarray, Sequence[str], Sequence[Sequence[int]]]


class GridGraph:
    """
    Read-only view over a boolean obstacle array.

    ``blocked[r, c]`` is True when cell (r, c) cannot be entered.
    """

    def __init__(self, blocked: np.ndarray) -> None:
        if blocked.ndim != 2 or blocked.shape[0] == 0 or blocked.shape[1] == 0:
            raise EmptyGraphError(
                f"Grid must be a non-empty 2-D array, got shape {blocked.shape}."
            )
        self._blocked = blocked.astype(bool, copy=True)
        self._blocked.setflags(write=False)

    @classmethod
    def from_cells(cls, cells: GridInput) -> GridGraph:
        """
        Build a grid from nested sequences, a 2-D numpy array, or an existing
        GridGraph (returned unchanged).

        Rows may also be strings: "0 10 0" (whitespace-separated, non-zero
        blocked) or "#.." (one character per cell, ``#`` or non-zero digit
        blocked). Unrecognised cells, ragged or empty input raise
        EmptyGraphError.
        """
        if isinstance(cells, GridGraph):
            return cells
        if isinstance(cells, np.ndarray):
            return cls(cells != 0)

        rows = list(cells)
        if not rows:
            raise EmptyGraphError("Grid has no rows.")
        parsed = [_parse_row(row) for row in rows]
        width = len(parsed[0])
        if width == 0:
            raise EmptyGraphError("Grid has no columns.")
        if any(len(row) != width for row in parsed):
            raise EmptyGraphError("Grid rows must all have the same length.")
        return cls(np.array(parsed, dtype=bool))

    @property
    def rows(self) -> int:
        return int(self._blocked.shape[0])

    @property
    def cols(self) -> int:
        return int(self._blocked.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def blocked(self) -> np.ndarray:
        """The underlying read-only obstacle mask."""
        return self._blocked

    def in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_walkable(self, cell: Cell) -> bool:
        """True iff cell is in bounds and not blocked."""
        if not self.in_bounds(cell):
            return False
        r, c = cell
        return not self._blocked[r, c]

    def neighbors(self, cell: Cell) -> Iterator[Cell]:
        """Yield walkable orthogonal neighbours in up, down, left, right order."""
        r, c = cell
        for dr, dc in _MOVES:
            n = (r + dr, c + dc)
            if self.is_walkable(n):
                yield n

    def walkable_count(self) -> int:
        return int(self._blocked.size - np.count_nonzero(self._blocked))


def _parse_row(row) -> Sequence[bool]:
    """
    Whitespace-separated string rows are read token by token, other strings
    one character per cell. ``#`` is blocked, ``.`` is open, and numbers are
    blocked when non-zero.
    """
    if isinstance(row, str):
        row = row.strip()
        tokens = row.split() if any(ch.isspace() for ch in row) else list(row)
        return [_parse_cell(tok) for tok in tokens]
    return [bool(v) for v in row]


def _parse_cell(tok: str) -> bool:
    if tok == "#":
        return True
    if tok == ".":
        return False
    try:
        return int(tok) != 0
    except ValueError:
        raise EmptyGraphError(f"Unrecognised grid cell {tok!r}.") from None
