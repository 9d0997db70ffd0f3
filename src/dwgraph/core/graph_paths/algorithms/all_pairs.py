"""
All-pairs shortest path algorithm.
"""

import logging
from typing import List, Optional

from ...exceptions import NegativeCycleError
from ..base import PathFinder
from ..models import AllToAllResult
from ..utils import INFINITY

logger = logging.getLogger(__name__)


class FloydWarshallFinder(PathFinder[AllToAllResult]):
    """Floyd-Warshall algorithm with successor-table path reconstruction."""

    operation = "floyd_warshall"

    def run(self) -> AllToAllResult:
        """
        Compute shortest paths between every ordered pair of vertices.

        Table rows and columns follow vertex order. Parallel edges seed their
        pair with the smallest weight among them.

        Returns:
            AllToAllResult: Distance and successor tables, empty for an empty graph

        Raises:
            NegativeCycleError: If any vertex lies on a negative-weight cycle
        """
        keys = self.graph.keys()
        size = len(keys)
        index = {key: i for i, key in enumerate(keys)}
        logger.debug("Starting Floyd-Warshall algorithm over %d vertices", size)

        with self._search_context() as metrics:
            distance: List[List[float]] = [[INFINITY] * size for _ in range(size)]
            successor: List[List[Optional[int]]] = [[None] * size for _ in range(size)]
            for i in range(size):
                distance[i][i] = 0.0
                successor[i][i] = i

            for edge in self.graph.iter_edges():
                i, j = index[edge.tail], index[edge.head]
                if edge.weight < distance[i][j]:
                    distance[i][j] = edge.weight
                    successor[i][j] = j

            for k in range(size):
                self.memory_manager.check_memory()
                metrics.vertices_explored += 1
                row_k = distance[k]
                for i in range(size):
                    row_i = distance[i]
                    through_k = row_i[k]
                    if through_k == INFINITY:
                        continue
                    for j in range(size):
                        metrics.edges_relaxed += 1
                        candidate = through_k + row_k[j]
                        if candidate < row_i[j]:
                            row_i[j] = candidate
                            successor[i][j] = successor[i][k]

            for i in range(size):
                if distance[i][i] < 0:
                    raise NegativeCycleError(f"Negative cycle through vertex {keys[i]!r}")

        return AllToAllResult(
            keys=tuple(keys),
            distances=distance,
            successors=[
                [keys[s] if s is not None else None for s in row] for row in successor
            ],
        )
