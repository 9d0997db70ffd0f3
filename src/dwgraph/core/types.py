"""
Core type definitions and protocols.

This module provides type aliases and the read-only graph protocol that the
traversal and shortest-path engines are written against.
"""

from typing import Any, Callable, Hashable, Iterator, List, Protocol

from .models import Edge

# Type alias for vertex keys
Key = Hashable

# Type alias for traversal visitor callbacks
Visitor = Callable[[Key, Any], None]


class GraphProtocol(Protocol):
    """Protocol defining the graph operations algorithms read through."""

    def has_vertex(self, key: Key) -> bool:
        """Check if a vertex exists."""
        ...

    def keys(self) -> List[Key]:
        """Get vertex keys in vertex order."""
        ...

    def vertex_data(self, key: Key) -> Any:
        """Get the payload of a vertex."""
        ...

    def iter_outedges(self, key: Key) -> Iterator[Edge]:
        """Iterate over outgoing edges of a vertex in adjacency order."""
        ...

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over all edges, vertex by vertex, in adjacency order."""
        ...

    def get_neighbors(self, key: Key) -> List[Key]:
        """Get heads of outgoing edges in adjacency order."""
        ...

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        ...

