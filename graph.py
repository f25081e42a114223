"""
Directed, weighted graph abstraction for gridroute.

Nodes are integer vertex ids in [0, n).
Edges are directed: u -> v with a non-negative weight, kept in insertion order.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Sequence, Tuple

from nodes import VertexId

Edge = Tuple[VertexId, float]


class Graph(ABC):
    """Directed, weighted graph over integer vertex ids."""

    @abstractmethod
    def node_count(self) -> int:
        """Number of vertices n; ids run from 0 to n - 1."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: VertexId) -> Sequence[Edge]:
        """
        Outgoing edges for a given node, in insertion order.

        Returns: list[(neighbor, weight)]. Duplicates and self-loops are
        returned as stored.
        """
        raise NotImplementedError

    def nodes(self) -> Iterable[VertexId]:
        """Return all vertex ids in the graph."""
        return range(self.node_count())
