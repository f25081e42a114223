"""
Concrete directed, weighted graph implementation for gridroute.

Implements the Graph interface using a list-of-lists adjacency representation.
"""

import math
from typing import Iterable, List, Sequence, Tuple

from errors import EmptyGraphError, InvalidInputError
from graph import Edge, Graph
from nodes import VertexId


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by one ordered edge list per vertex.
    """

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise EmptyGraphError(f"Graph must have at least one node, got n={n}.")
        self._adj: List[List[Edge]] = [[] for _ in range(n)]

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[Tuple[VertexId, VertexId, float]],
        undirected: bool = False,
    ) -> "AdjacencyListGraph":
        """Build a graph from (u, v, w) triples, inserting both directions if undirected."""
        graph = cls(n)
        for u, v, w in edges:
            if undirected:
                graph.add_undirected_edge(u, v, w)
            else:
                graph.add_edge(u, v, w)
        return graph

    @classmethod
    def from_adjacency(cls, adjacency: Sequence[Sequence[Edge]]) -> "AdjacencyListGraph":
        """Wrap a raw adjacency list, validating every edge."""
        graph = cls(len(adjacency))
        for u, edges in enumerate(adjacency):
            for v, w in edges:
                graph.add_edge(u, v, w)
        return graph

    # --- Mutation API (loaders/tests only, not part of Graph interface) ------

    def add_edge(self, src: VertexId, dst: VertexId, weight: float) -> None:
        """
        Append a directed edge src -> dst. Parallel edges are kept.
        """
        self._check_vertex(src)
        self._check_vertex(dst)
        if math.isnan(weight) or weight < 0:
            raise InvalidInputError(
                f"Edge {src} -> {dst} has weight {weight!r}; weights must be non-negative."
            )
        self._adj[src].append((dst, weight))

    def add_undirected_edge(self, u: VertexId, v: VertexId, weight: float) -> None:
        self.add_edge(u, v, weight)
        self.add_edge(v, u, weight)

    def adjacency(self) -> List[List[Edge]]:
        """Copy of the raw adjacency list."""
        return [list(edges) for edges in self._adj]

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adj)

    # --- Graph interface -----------------------------------------------------

    def node_count(self) -> int:
        return len(self._adj)

    def outgoing(self, node: VertexId) -> Sequence[Edge]:
        self._check_vertex(node)
        return list(self._adj[node])

    def _check_vertex(self, node: VertexId) -> None:
        if not 0 <= node < len(self._adj):
            raise InvalidInputError(
                f"Vertex {node} is outside the graph (expected 0 <= id < {len(self._adj)})."
            )
