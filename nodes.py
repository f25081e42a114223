"""
Node identifiers for gridroute.

Explicit graphs address vertices by integer index in [0, n). Grids address
cells by zero-based (row, col) pairs. Both are hashable and stable for the
lifetime of a search.
"""

from numbers import Integral
from typing import Hashable, Tuple

Node = Hashable
VertexId = int
Cell = Tuple[int, int]  # (row, col)


def as_cell(value) -> Cell:
    """
    Coerce a two-element sequence of integers into a (row, col) tuple.

    Raises:
        TypeError: value is a string, or a component is a bool or not an
            integer (1.0 and "1" are both rejected).
        ValueError: value does not have exactly two components.
    """
    if isinstance(value, (str, bytes)):
        raise TypeError(f"Cell must be a (row, col) pair, got {value!r}.")
    row, col = value
    for part in (row, col):
        if isinstance(part, bool) or not isinstance(part, Integral):
            raise TypeError(f"Cell coordinates must be integers, got {value!r}.")
    return (int(row), int(col))
