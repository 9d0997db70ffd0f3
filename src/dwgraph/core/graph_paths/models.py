"""
Data models for shortest-path results.

This module provides the result containers produced by the shortest-path
engines together with the performance metrics they record:

- OneToAllResult: distances and predecessors from a single source
- AllToAllResult: distance and successor tables over every ordered pair
- PerformanceMetrics: timing and work counters for one algorithm run

Results are immutable snapshots. They are detached from the graph that produced
them and do not follow its later mutations.

Example:
    >>> result = graph.dijkstra("A")
    >>> result.path_cost("C")
    2.0
    >>> result.path_vertices("C")
    ['A', 'B', 'C']
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..exceptions import VertexNotFoundError
from ..types import Key
from .utils import INFINITY


@dataclass(frozen=True, eq=False)
class OneToAllResult:
    """
    Shortest paths from one source vertex to every vertex of the graph.

    Attributes:
        source: Key of the source vertex
        distances: Shortest distance per vertex, INFINITY when unreachable
        predecessors: Previous vertex on the shortest path, None for the source
            and for unreachable vertices
    """

    source: Key
    distances: Mapping[Key, float]
    predecessors: Mapping[Key, Optional[Key]]

    def __post_init__(self):
        """Freeze the tables and check that they describe the same vertices."""
        object.__setattr__(self, "distances", MappingProxyType(dict(self.distances)))
        object.__setattr__(self, "predecessors", MappingProxyType(dict(self.predecessors)))
        if self.source not in self.distances:
            raise ValueError("source must be one of the tracked vertices")
        if self.distances.keys() != self.predecessors.keys():
            raise ValueError("distances and predecessors must track the same vertices")

    def _require(self, terminal: Key) -> None:
        if terminal is None or terminal not in self.distances:
            raise VertexNotFoundError(f"Vertex '{terminal}' was not tracked by this result")

    def path_cost(self, terminal: Key) -> float:
        """
        Get the length of the shortest path from the source to ``terminal``.

        Returns:
            float: Path cost, INFINITY if ``terminal`` is unreachable

        Raises:
            VertexNotFoundError: If ``terminal`` was not a vertex at computation time
        """
        self._require(terminal)
        return self.distances[terminal]

    def path_vertices(self, terminal: Key) -> List[Key]:
        """
        Reconstruct the shortest path from the source to ``terminal``.

        Returns:
            List[Key]: Vertices from source to terminal; ``[source]`` for the
                source itself and an empty list when ``terminal`` is unreachable

        Raises:
            VertexNotFoundError: If ``terminal`` was not a vertex at computation time
        """
        self._require(terminal)
        if terminal == self.source:
            return [self.source]

        path = [terminal]
        current = self.predecessors[terminal]
        while current is not None:
            path.append(current)
            if current == self.source:
                path.reverse()
                return path
            current = self.predecessors[current]
        return []

    def is_reachable(self, terminal: Key) -> bool:
        """Check whether ``terminal`` can be reached from the source."""
        return self.path_cost(terminal) != INFINITY

    def distance_map(self) -> Dict[Key, float]:
        """Get a mutable copy of the distance table."""
        return dict(self.distances)

    def predecessor_map(self) -> Dict[Key, Optional[Key]]:
        """Get a mutable copy of the predecessor table."""
        return dict(self.predecessors)


@dataclass(frozen=True, eq=False)
class AllToAllResult:
    """
    Shortest paths between every ordered pair of vertices.

    Row and column ``i`` of both tables belong to ``keys[i]``.

    Attributes:
        keys: Vertex keys in table order
        distances: ``distances[i][j]`` is the cost from ``keys[i]`` to ``keys[j]``
        successors: ``successors[i][j]`` is the vertex following ``keys[i]`` on the
            shortest path to ``keys[j]``, None when there is no path
    """

    keys: Tuple[Key, ...]
    distances: Tuple[Tuple[float, ...], ...]
    successors: Tuple[Tuple[Optional[Key], ...], ...]
    _index: Mapping[Key, int] = field(init=False, repr=False)

    def __post_init__(self):
        """Freeze the tables and index the keys."""
        keys = tuple(self.keys)
        object.__setattr__(self, "keys", keys)
        object.__setattr__(self, "distances", _freeze_table(self.distances))
        object.__setattr__(self, "successors", _freeze_table(self.successors))
        size = len(keys)
        if len(self.distances) != size or any(len(row) != size for row in self.distances):
            raise ValueError("distance table must be square over the keys")
        if len(self.successors) != size or any(len(row) != size for row in self.successors):
            raise ValueError("successor table must be square over the keys")
        object.__setattr__(
            self, "_index", MappingProxyType({key: i for i, key in enumerate(keys)})
        )

    def _index_of(self, key: Key) -> int:
        index = self._index.get(key) if key is not None else None
        if index is None:
            raise VertexNotFoundError(f"Vertex '{key}' was not tracked by this result")
        return index

    def path_cost(self, initial: Key, terminal: Key) -> float:
        """
        Get the length of the shortest path from ``initial`` to ``terminal``.

        Raises:
            VertexNotFoundError: If either vertex was not tracked
        """
        return self.distances[self._index_of(initial)][self._index_of(terminal)]

    def path_vertices(self, initial: Key, terminal: Key) -> List[Key]:
        """
        Reconstruct the shortest path by walking the successor table forward.

        Returns:
            List[Key]: Vertices from initial to terminal, empty when no path exists

        Raises:
            VertexNotFoundError: If either vertex was not tracked
        """
        row = self._index_of(initial)
        column = self._index_of(terminal)
        if self.successors[row][column] is None:
            return []

        path = [initial]
        current = initial
        while current != terminal:
            current = self.successors[self._index[current]][column]
            if current is None:
                return []
            path.append(current)
        return path

    def is_reachable(self, initial: Key, terminal: Key) -> bool:
        """Check whether a path leads from ``initial`` to ``terminal``."""
        return self.path_cost(initial, terminal) != INFINITY

    def __len__(self) -> int:
        """Return the number of tracked vertices."""
        return len(self.keys)


def _freeze_table(rows: Sequence[Sequence[Union[float, Optional[Key]]]]) -> Tuple[Tuple, ...]:
    return tuple(tuple(row) for row in rows)


@dataclass
class PerformanceMetrics:
    """
    Container for shortest-path performance metrics.

    Attributes:
        operation: Name of the algorithm
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        vertices_explored: Number of vertices settled or scanned
        edges_relaxed: Number of edge relaxations attempted
        max_memory_used: Peak memory usage during operation (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    vertices_explored: int = 0
    edges_relaxed: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "vertices_explored": self.vertices_explored,
            "edges_relaxed": self.edges_relaxed,
            "max_memory_used": self.max_memory_used,
        }
