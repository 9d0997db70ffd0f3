"""Shortest-path functionality."""

from typing import Optional

from ..types import GraphProtocol, Key
from .algorithms import BellmanFordFinder, DijkstraFinder, FloydWarshallFinder
from .base import PathFinder, SingleSourceFinder
from .models import AllToAllResult, OneToAllResult, PerformanceMetrics
from .utils import INFINITY, MemoryManager, PriorityQueue

__all__ = [
    "AllToAllResult",
    "BellmanFordFinder",
    "DijkstraFinder",
    "FloydWarshallFinder",
    "INFINITY",
    "MemoryManager",
    "OneToAllResult",
    "PathFinder",
    "PerformanceMetrics",
    "PriorityQueue",
    "ShortestPaths",
    "SingleSourceFinder",
]


class ShortestPaths:
    """Static interface for shortest-path operations."""

    @staticmethod
    def dijkstra(
        graph: GraphProtocol, source: Key, max_memory_mb: Optional[float] = None
    ) -> OneToAllResult:
        """Shortest paths from ``source`` over non-negative weights."""
        return DijkstraFinder(graph, max_memory_mb).run(source)

    @staticmethod
    def bellman_ford(
        graph: GraphProtocol, source: Key, max_memory_mb: Optional[float] = None
    ) -> OneToAllResult:
        """Shortest paths from ``source`` over arbitrary weights."""
        return BellmanFordFinder(graph, max_memory_mb).run(source)

    @staticmethod
    def floyd_warshall(
        graph: GraphProtocol, max_memory_mb: Optional[float] = None
    ) -> AllToAllResult:
        """Shortest paths between every ordered pair of vertices."""
        return FloydWarshallFinder(graph, max_memory_mb).run()
