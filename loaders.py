"""
Text loaders for grid maps and weighted edge lists.

Grid map format:
    rows cols
    rows * cols whitespace-separated cells, 0 = walkable, 1 = blocked

Edge-list format:
    n m
    m lines of "u v w" (0-based vertex ids, non-negative weight)
    source vertex
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Union
import logging

import numpy as np

from adjacency_list_graph import AdjacencyListGraph
from config import DEFAULT_UNDIRECTED
from errors import EmptyGraphError, InputFormatError
from grid_graph import GridGraph
from nodes import VertexId

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class EdgeListInput:
    graph: AdjacencyListGraph
    n: int
    source: VertexId


class _Tokens:
    """Whitespace token reader that reports what it expected on failure."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())
        self._pos = 0

    def next_int(self, what: str) -> int:
        tok = self._next(what)
        try:
            return int(tok)
        except ValueError:
            raise InputFormatError(f"Token {self._pos} ({what}): expected an integer, got {tok!r}.") from None

    def next_number(self, what: str) -> float:
        tok = self._next(what)
        try:
            return int(tok)
        except ValueError:
            pass
        try:
            return float(tok)
        except ValueError:
            raise InputFormatError(f"Token {self._pos} ({what}): expected a number, got {tok!r}.") from None

    def expect_end(self) -> None:
        leftover = list(self._it)
        if leftover:
            raise InputFormatError(f"Unexpected trailing data: {' '.join(leftover[:5])!r}.")

    def _next(self, what: str) -> str:
        try:
            tok = next(self._it)
        except StopIteration:
            raise InputFormatError(f"Input ended early; expected {what}.") from None
        self._pos += 1
        return tok


def parse_grid(text: str) -> GridGraph:
    tokens = _Tokens(text)
    rows = tokens.next_int("row count")
    cols = tokens.next_int("column count")
    if rows <= 0 or cols <= 0:
        raise EmptyGraphError(f"Invalid map dimensions {rows}x{cols}.")

    cells: List[int] = []
    for r in range(rows):
        for c in range(cols):
            value = tokens.next_int(f"cell ({r}, {c})")
            if value not in (0, 1):
                raise InputFormatError(f"Cell ({r}, {c}) is {value}; expected 0 or 1.")
            cells.append(value)
    tokens.expect_end()

    blocked = np.array(cells, dtype=bool).reshape(rows, cols)
    return GridGraph(blocked)


def parse_edge_list(text: str, undirected: bool = DEFAULT_UNDIRECTED) -> EdgeListInput:
    """
    Parse an edge list. Vertex ids and weights are validated by
    AdjacencyListGraph.add_edge; the source is checked by the engine.
    """
    tokens = _Tokens(text)
    n = tokens.next_int("vertex count")
    m = tokens.next_int("edge count")
    if n <= 0:
        raise EmptyGraphError(f"Graph must have at least one node, got n={n}.")
    if m < 0:
        raise InputFormatError(f"Edge count must be non-negative, got m={m}.")

    graph = AdjacencyListGraph(n)
    for i in range(m):
        u = tokens.next_int(f"edge {i} source")
        v = tokens.next_int(f"edge {i} target")
        w = tokens.next_number(f"edge {i} weight")
        if undirected:
            graph.add_undirected_edge(u, v, w)
        else:
            graph.add_edge(u, v, w)
    source = tokens.next_int("source vertex")
    tokens.expect_end()
    return EdgeListInput(graph=graph, n=n, source=source)


def load_grid(path: PathLike) -> GridGraph:
    path = Path(path)
    grid = parse_grid(path.read_text())
    logger.debug("loaded %dx%d grid from %s", grid.rows, grid.cols, path)
    return grid


def load_edge_list(path: PathLike, undirected: bool = DEFAULT_UNDIRECTED) -> EdgeListInput:
    path = Path(path)
    data = parse_edge_list(path.read_text(), undirected=undirected)
    logger.debug(
        "loaded graph n=%d edges=%d from %s", data.n, data.graph.edge_count(), path
    )
    return data
