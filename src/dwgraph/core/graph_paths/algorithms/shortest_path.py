"""
Single-source shortest path algorithms.

DijkstraFinder handles graphs with non-negative weights and refuses negative
ones; BellmanFordFinder accepts any weights and reports negative-weight cycles
reachable from the source.
"""

import logging

from ...exceptions import NegativeCycleError, NegativeWeightError
from ...types import Key
from ..base import SingleSourceFinder
from ..models import OneToAllResult
from ..utils import INFINITY, PriorityQueue

logger = logging.getLogger(__name__)


class DijkstraFinder(SingleSourceFinder):
    """Dijkstra's algorithm over a binary heap."""

    operation = "dijkstra"

    def run(self, source: Key) -> OneToAllResult:
        """
        Compute shortest paths from ``source``.

        Args:
            source: Key of the source vertex

        Returns:
            OneToAllResult: Distances and predecessors for every vertex

        Raises:
            VertexNotFoundError: If ``source`` is not in the graph
            NegativeWeightError: As soon as an edge with negative weight is relaxed
        """
        self.validate_source(source)
        logger.debug("Starting Dijkstra's algorithm from %r", source)

        with self._search_context() as metrics:
            distances, predecessors = self.initial_state(source)
            visited = set()
            pq = PriorityQueue()
            pq.add_or_update(source, 0.0)

            while not pq.empty():
                self.memory_manager.check_memory()
                current_dist, current = pq.pop()
                visited.add(current)
                metrics.vertices_explored += 1

                for edge in self.graph.iter_outedges(current):
                    metrics.edges_relaxed += 1
                    if edge.weight < 0:
                        raise NegativeWeightError(
                            f"Negative weight {edge.weight} found on edge {edge.ordinal} "
                            f"({edge.tail!r} -> {edge.head!r})"
                        )
                    if edge.head in visited:
                        continue

                    new_dist = current_dist + edge.weight
                    if new_dist < distances[edge.head]:
                        distances[edge.head] = new_dist
                        predecessors[edge.head] = current
                        pq.add_or_update(edge.head, new_dist)

        return OneToAllResult(source=source, distances=distances, predecessors=predecessors)


class BellmanFordFinder(SingleSourceFinder):
    """Bellman-Ford algorithm with early exit and negative-cycle detection."""

    operation = "bellman_ford"

    def run(self, source: Key) -> OneToAllResult:
        """
        Compute shortest paths from ``source`` with arbitrary edge weights.

        Args:
            source: Key of the source vertex

        Returns:
            OneToAllResult: Distances and predecessors for every vertex

        Raises:
            VertexNotFoundError: If ``source`` is not in the graph
            NegativeCycleError: If a negative-weight cycle is reachable from ``source``
        """
        self.validate_source(source)
        logger.debug("Starting Bellman-Ford algorithm from %r", source)

        with self._search_context() as metrics:
            distances, predecessors = self.initial_state(source)

            # Relax edges |V| - 1 times
            for iteration in range(self.graph.vertex_count - 1):
                self.memory_manager.check_memory()
                metrics.vertices_explored += self.graph.vertex_count
                relaxed = False

                for edge in self.graph.iter_edges():
                    metrics.edges_relaxed += 1
                    tail_dist = distances[edge.tail]
                    if tail_dist == INFINITY:
                        continue
                    if tail_dist + edge.weight < distances[edge.head]:
                        distances[edge.head] = tail_dist + edge.weight
                        predecessors[edge.head] = edge.tail
                        relaxed = True

                if not relaxed:
                    logger.debug("Bellman-Ford converged after %d passes", iteration + 1)
                    break

            # Check for negative cycles
            for edge in self.graph.iter_edges():
                tail_dist = distances[edge.tail]
                if tail_dist != INFINITY and tail_dist + edge.weight < distances[edge.head]:
                    raise NegativeCycleError(
                        f"Negative cycle reachable from {source!r} through edge {edge.ordinal} "
                        f"({edge.tail!r} -> {edge.head!r})"
                    )

        return OneToAllResult(source=source, distances=distances, predecessors=predecessors)
