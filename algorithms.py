"""
Algorithm interfaces for gridroute.

Keeps the search engines separate from input loading and rendering.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from graph import Graph
from grid_graph import GridGraph
from nodes import Cell, VertexId


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation over a Graph.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: VertexId) -> List[float]:
        """
        Compute shortest-path costs from source to every vertex.

        Returns:
            List of length n; unreachable vertices hold math.inf.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: VertexId
    ) -> Tuple[List[float], List[Optional[VertexId]]]:
        """
        Compute shortest-path costs plus the predecessor of each vertex.

        Returns:
            (dist, prev) where prev[v] is the vertex before v on one shortest
            path, or None for the source and unreachable vertices.
        """
        raise NotImplementedError


class PathSearchEngine(ABC):
    """
    Interface for start -> goal path search on a grid.
    """

    @abstractmethod
    def find_path(self, grid: GridGraph, start: Cell, goal: Cell) -> List[Cell]:
        """
        Return the cells of one shortest path from start to goal inclusive,
        or an empty list when the goal cannot be reached.
        """
        raise NotImplementedError
