"""
Heap-based DijkstraEngine implementation for gridroute.

Uses PriorityFrontier and CostTable to compute single-source shortest paths
over any implementation of the Graph interface, or over a raw adjacency
list via shortest_distances().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import List, Optional, Sequence, Set, Tuple, Union
import logging
import math

from adjacency_list_graph import AdjacencyListGraph
from algorithms import DijkstraEngine
from cost_table import CostTable
from errors import EmptyGraphError, InvalidInputError
from frontier import PriorityFrontier
from graph import Edge, Graph
from nodes import VertexId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistanceResult:
    """
    Outcome of one single-source search: dist[v] and prev[v] for every
    vertex, plus the number of vertices expanded (closed).
    """
    dist: List[float] = field(default_factory=list)
    prev: List[Optional[VertexId]] = field(default_factory=list)
    expanded: int = 0

    @property
    def reachable(self) -> int:
        return sum(1 for d in self.dist if not math.isinf(d))


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap with lazy deletion.

    Complexity:
        O(E log E) over the edges reachable from the source.
    """

    def shortest_path_costs(self, graph: Graph, source: VertexId) -> List[float]:
        return self.search(graph, source).dist

    def shortest_paths(
        self, graph: Graph, source: VertexId
    ) -> Tuple[List[float], List[Optional[VertexId]]]:
        result = self.search(graph, source)
        return result.dist, result.prev

    def search(self, graph: Graph, source: VertexId) -> DistanceResult:
        table, expanded = self._search(graph, source)
        nodes = range(graph.node_count())
        return DistanceResult(
            dist=[table.best_cost(v) for v in nodes],
            prev=[table.predecessor(v) for v in nodes],
            expanded=expanded,
        )

    def path_to(self, graph: Graph, source: VertexId, target: VertexId) -> List[VertexId]:
        """
        One shortest vertex path source -> target, or [] if target is unreachable.
        """
        _check_vertex(graph, target, "target")
        table, _ = self._search(graph, source)
        return table.path_to(target)

    def _search(self, graph: Graph, source: VertexId) -> Tuple[CostTable, int]:
        _check_graph(graph)
        _check_vertex(graph, source, "source")

        table = CostTable()
        table.seed(source)
        frontier: PriorityFrontier[VertexId] = PriorityFrontier()
        frontier.insert(0, source)
        closed: Set[VertexId] = set()
        stale = 0

        while not frontier.is_empty():
            cost, u = frontier.extract_min()

            # Skip outdated entries; a cheaper one for u was already handled.
            if cost > table.best_cost(u) or u in closed:
                stale += 1
                continue
            closed.add(u)

            for v, w in graph.outgoing(u):
                candidate = cost + w
                if table.relax(v, candidate, u):
                    frontier.insert(candidate, v)

        logger.debug(
            "dijkstra source=%s expanded=%d stale_pops=%d", source, len(closed), stale
        )
        return table, len(closed)


def shortest_distances(
    graph: Union[Graph, Sequence[Sequence[Edge]]], n: int, source: VertexId
) -> List[float]:
    """
    Shortest distance from source to each of the n vertices.

    graph is either a Graph or an adjacency list where graph[u] holds the
    (v, weight) pairs leaving u. Unreachable vertices get math.inf.

    Raises:
        EmptyGraphError: n == 0.
        InvalidInputError: source out of range, adjacency length != n, an
            edge to a vertex outside [0, n), or a negative weight.
    """
    if n <= 0:
        raise EmptyGraphError(f"Graph must have at least one node, got n={n}.")
    if not isinstance(graph, Graph):
        if len(graph) != n:
            raise InvalidInputError(
                f"Adjacency list has {len(graph)} entries but n={n}."
            )
        graph = AdjacencyListGraph.from_adjacency(graph)
    elif graph.node_count() != n:
        raise InvalidInputError(
            f"Graph has {graph.node_count()} nodes but n={n}."
        )
    return SimpleDijkstraEngine().shortest_path_costs(graph, source)


def _check_graph(graph: Graph) -> None:
    n = graph.node_count()
    if n <= 0:
        raise EmptyGraphError("Graph has no nodes.")
    for u in graph.nodes():
        for v, w in graph.outgoing(u):
            if not isinstance(v, Integral) or not 0 <= v < n:
                raise InvalidInputError(f"Edge {u} -> {v} leaves the graph (n={n}).")
            if math.isnan(w) or w < 0:
                raise InvalidInputError(
                    f"Edge {u} -> {v} has weight {w!r}; weights must be non-negative."
                )


def _check_vertex(graph: Graph, node: VertexId, role: str) -> None:
    n = graph.node_count()
    if isinstance(node, bool) or not isinstance(node, Integral) or not 0 <= node < n:
        raise InvalidInputError(
            f"{role.capitalize()} vertex {node!r} is outside the graph (expected 0 <= id < {n})."
        )
