"""
Graph traversal system using iterator pattern.

This module provides breadth-first and depth-first traversal strategies. Both
visit every vertex of the graph exactly once: when the part of the graph
reachable from the current frontier is exhausted, traversal restarts from the
first unvisited vertex in vertex order, and depth counting starts again at 0.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, Iterator, Tuple, Type

from .exceptions import VertexNotFoundError
from .types import GraphProtocol, Key

logger = logging.getLogger(__name__)


class GraphIterator(ABC):
    """Base class for graph traversal iterators."""

    def __init__(self, graph: GraphProtocol, start_node: Key):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            start_node: Vertex the traversal starts from

        Raises:
            VertexNotFoundError: If the graph is not empty and lacks ``start_node``
        """
        if graph.vertex_count and not graph.has_vertex(start_node):
            raise VertexNotFoundError(f"Start vertex '{start_node}' not found in the graph")
        self.graph = graph
        self.start = start_node
        self.visited: set = set()

    def _restart_points(self) -> Iterator[Key]:
        """Yield unvisited vertices in vertex order, checked lazily."""
        for key in self.graph.keys():
            if key not in self.visited:
                logger.debug("Frontier exhausted, restarting traversal at %r", key)
                yield key

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[Key, int]]:
        """
        Get iterator for traversal.

        Returns:
            Iterator yielding tuples of (key, depth)
        """
        pass


class BFSIterator(GraphIterator):
    """Breadth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[Key, int]]:
        """
        Traverse graph in breadth-first order.

        Neighbours are visited when they are enqueued, in adjacency order.

        Yields:
            Tuples of (key, depth) in BFS order
        """
        total = self.graph.vertex_count
        if not total:
            return

        restarts = self._restart_points()
        queue = deque([(self.start, 0)])
        self.visited.add(self.start)
        yield self.start, 0

        while len(self.visited) < total:
            if not queue:
                vertex = next(restarts)
                self.visited.add(vertex)
                yield vertex, 0
                queue.append((vertex, 0))
                continue

            node, depth = queue.popleft()
            for neighbor in self.graph.get_neighbors(node):
                if neighbor not in self.visited:
                    self.visited.add(neighbor)
                    yield neighbor, depth + 1
                    queue.append((neighbor, depth + 1))


class DFSIterator(GraphIterator):
    """Depth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[Key, int]]:
        """
        Traverse graph in depth-first order.

        An explicit stack of (vertex, depth, edge cursor) frames replaces
        recursion, so traversal depth is not bounded by the interpreter stack.

        Yields:
            Tuples of (key, depth) in DFS order
        """
        total = self.graph.vertex_count
        if not total:
            return

        restarts = self._restart_points()
        self.visited.add(self.start)
        yield self.start, 0
        stack = [(self.start, 0, iter(self.graph.get_neighbors(self.start)))]

        while len(self.visited) < total:
            if not stack:
                vertex = next(restarts)
                self.visited.add(vertex)
                yield vertex, 0
                stack.append((vertex, 0, iter(self.graph.get_neighbors(vertex))))
                continue

            _, depth, cursor = stack[-1]
            neighbor = next((n for n in cursor if n not in self.visited), None)
            if neighbor is None:
                stack.pop()
                continue

            self.visited.add(neighbor)
            yield neighbor, depth + 1
            stack.append((neighbor, depth + 1, iter(self.graph.get_neighbors(neighbor))))


TRAVERSAL_STRATEGIES: Dict[str, Type[GraphIterator]] = {
    "bfs": BFSIterator,
    "dfs": DFSIterator,
}
