"""
Min-priority frontier shared by the Dijkstra and A* engines.

Entries are (key, node) pairs kept in a binary heap. There is no
decrease-key: when a node's cost improves the caller inserts a fresh entry
and leaves the old one in place, then discards it on pop if it no longer
matches the node's current cost (lazy deletion).
"""

from __future__ import annotations

from itertools import count
from typing import Generic, List, Tuple, TypeVar
import heapq

N = TypeVar("N")


class PriorityFrontier(Generic[N]):
    """
    Binary-heap frontier ordered by key, ties broken by insertion order.

    The sequence number sits between key and node in each heap entry, so
    equal keys pop first-in first-out and nodes never have to be comparable.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, N]] = []
        self._seq = count()

    def insert(self, key: float, node: N) -> None:
        heapq.heappush(self._heap, (key, next(self._seq), node))

    def extract_min(self) -> Tuple[float, N]:
        """
        Remove and return the (key, node) entry with the smallest key.

        Raises:
            IndexError: if the frontier is empty.
        """
        if not self._heap:
            raise IndexError("extract_min from an empty frontier")
        key, _, node = heapq.heappop(self._heap)
        return key, node

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
