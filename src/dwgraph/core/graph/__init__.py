"""
Graph module for the weighted graph engine.

This module provides the Graph facade, combining:
- The ordinal-addressed vertex/edge store
- Event notification for graph mutations
- Breadth-first and depth-first traversal with visitor callbacks
- Single-source and all-pairs shortest paths
- Snapshot transactions that roll back on error
"""

import logging
from contextlib import contextmanager
from typing import Any, Generator, Iterator, List, Optional, Tuple

from ..config import GraphConfig
from ..exceptions import DuplicateVertexError, EdgeNotFoundError, VertexNotFoundError
from ..graph_paths import AllToAllResult, OneToAllResult, ShortestPaths
from ..models import Edge, Vertex
from ..traversal import TRAVERSAL_STRATEGIES, BFSIterator, DFSIterator, GraphIterator
from ..types import Key, Visitor
from .base import BaseGraph
from .events import GraphEvent, GraphEventDetails, GraphEventListener, GraphEventManager

logger = logging.getLogger(__name__)


class Graph:
    """
    Directed, weighted graph with payload-carrying vertices.

    Vertices are identified by unique hashable keys (None is reserved) and kept
    in insertion order. Every edge gets an ordinal when it is inserted; the
    ordinal never changes and is never reused, so it identifies the edge across
    renames and other mutations.

    The graph is not safe for concurrent mutation; callers sharing one across
    threads must serialize access themselves.

    Example:
        >>> graph = Graph()
        >>> for key in "ABC":
        ...     graph.insert_vertex(key)
        >>> graph.insert_edge("A", "B", 1.0)
        1
        >>> graph.insert_edge("B", "C", 1.0)
        2
        >>> graph.dijkstra("A").path_vertices("C")
        ['A', 'B', 'C']
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[GraphConfig]): Policy settings, defaults when omitted
        """
        self.config = config if config is not None else GraphConfig()
        self._base_graph = BaseGraph()
        self.event_manager = GraphEventManager()

    # ------------------------------------------------------------------ events

    def add_listener(self, listener: GraphEventListener) -> None:
        """Add a listener for state changes."""
        self.event_manager.add_listener(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Remove a state change listener."""
        self.event_manager.remove_listener(listener)

    def _notify_edges_removed(self, edges: List[Edge]) -> None:
        for edge in edges:
            self.event_manager.notify(GraphEvent.EDGE_REMOVED, GraphEventDetails(edges=[edge]))

    @contextmanager
    def transaction(self) -> Generator["Graph", None, None]:
        """
        Context manager for atomic batches of graph operations.

        The store is snapshotted on entry and restored if the block raises.
        Events already delivered during the block are not retracted.
        """
        state_backup = self._base_graph.copy()
        try:
            yield self
        except Exception:
            self._base_graph = state_backup
            logger.debug("Transaction rolled back")
            raise

    # ---------------------------------------------------------------- vertices

    def insert_vertex(self, key: Key, data: Any = None) -> None:
        """
        Insert vertex ``key`` carrying ``data``.

        Raises:
            InvalidValueError: If ``key`` is None
            DuplicateVertexError: If ``key`` is already present and the configured
                duplicate policy is "raise"
        """
        if self.config.ignore_duplicates and self._base_graph.has_vertex(key):
            logger.warning("Ignoring duplicate insert of vertex %r", key)
            return
        self._base_graph.insert_vertex(key, data)
        logger.debug("Inserted vertex %r", key)
        self.event_manager.notify(GraphEvent.VERTEX_ADDED, GraphEventDetails(vertices=[key]))

    def erase_vertex(self, key: Key) -> None:
        """Erase vertex ``key`` and every edge incident on it; no-op if absent."""
        removed = self._base_graph.erase_vertex(key)
        if removed is None:
            return
        logger.debug("Erased vertex %r with %d incident edges", key, len(removed))
        self._notify_edges_removed(removed)
        self.event_manager.notify(GraphEvent.VERTEX_REMOVED, GraphEventDetails(vertices=[key]))

    def reset_key(self, key: Key, new_key: Key) -> None:
        """
        Rename vertex ``key`` to ``new_key``.

        Data, outgoing edges and edge ordinals move with the vertex, and every
        edge entering ``key`` now enters ``new_key``.

        Raises:
            VertexNotFoundError: If ``key`` is not present
            DuplicateVertexError: If ``new_key`` is already present
        """
        if self._base_graph.reset_key(key, new_key):
            logger.debug("Renamed vertex %r to %r", key, new_key)
            self.event_manager.notify(
                GraphEvent.VERTEX_RENAMED,
                GraphEventDetails(vertices=[key, new_key], metadata={"old_key": key}),
            )

    def reset_data(self, key: Key, data: Any) -> None:
        """Replace the data of vertex ``key``."""
        self._base_graph.reset_data(key, data)
        self.event_manager.notify(GraphEvent.DATA_CHANGED, GraphEventDetails(vertices=[key]))

    def vertex_data(self, key: Key) -> Any:
        """Get the data object stored on vertex ``key``; mutations are kept."""
        return self._base_graph.vertex_data(key)

    def has_vertex(self, key: Key) -> bool:
        """Check if a vertex exists in the graph."""
        return self._base_graph.has_vertex(key)

    def indegree(self, key: Key) -> int:
        """Count edges entering vertex ``key``."""
        return self._base_graph.indegree(key)

    def outdegree(self, key: Key) -> int:
        """Count edges leaving vertex ``key``."""
        return self._base_graph.outdegree(key)

    def degree(self, key: Optional[Key] = None) -> int:
        """
        Count edges incident on ``key``, or get the degree of the graph.

        Without a key, returns the greatest total degree over all vertices.

        Raises:
            VertexNotFoundError: If ``key`` is given and not present
            EmptyGraphError: If no key is given and the graph is empty
        """
        if key is None:
            return self._base_graph.max_degree()
        return self._base_graph.degree(key)

    def max_degree(self) -> int:
        """Get the greatest total degree over all vertices."""
        return self._base_graph.max_degree()

    def keys(self) -> List[Key]:
        """Get vertex keys in vertex order."""
        return self._base_graph.keys()

    def vertices(self) -> Iterator[Vertex]:
        """Iterate over detached snapshots of the vertices in vertex order."""
        return self._base_graph.vertices()

    def outgoing(self, key: Key) -> List[Edge]:
        """Get detached copies of the edges leaving ``key`` in adjacency order."""
        return [self._base_graph.get_edge(o) for o in self._base_graph.outedges(key)]

    # ------------------------------------------------------------------- edges

    def insert_edge(self, tail: Key, head: Key, weight: Optional[float] = None) -> int:
        """
        Insert an edge from ``tail`` to ``head``.

        Args:
            tail (Key): Vertex the edge leaves
            head (Key): Vertex the edge enters
            weight (Optional[float]): Edge weight, the configured default if omitted

        Returns:
            int: Ordinal of the new edge

        Raises:
            VertexNotFoundError: If either vertex is not present
        """
        if weight is None:
            weight = self.config.default_weight
        edge = self._base_graph.insert_edge(tail, head, weight)
        logger.debug("Inserted edge %d: %r -> %r (%s)", edge.ordinal, tail, head, edge.weight)
        self.event_manager.notify(GraphEvent.EDGE_ADDED, GraphEventDetails(edges=[edge]))
        return edge.ordinal

    def insert_undirected_edge(
        self, tail: Key, head: Key, weight: Optional[float] = None
    ) -> Tuple[int, int]:
        """
        Insert the two edges ``tail -> head`` and ``head -> tail``.

        Returns:
            Tuple[int, int]: Ordinals of the forward and backward edges
        """
        if weight is None:
            weight = self.config.default_weight
        forward, backward = self._base_graph.insert_undirected_edge(tail, head, weight)
        for edge in (forward, backward):
            self.event_manager.notify(GraphEvent.EDGE_ADDED, GraphEventDetails(edges=[edge]))
        return forward.ordinal, backward.ordinal

    def edges(self, tail: Key, head: Key) -> List[int]:
        """Get ordinals of the edges from ``tail`` to ``head``."""
        return self._base_graph.edges(tail, head)

    def outedges(self, tail: Key) -> List[int]:
        """Get ordinals of the edges leaving ``tail``."""
        return self._base_graph.outedges(tail)

    def inedges(self, head: Key) -> List[int]:
        """Get ordinals of the edges entering ``head``."""
        return self._base_graph.inedges(head)

    def edge(self, ordinal: int) -> Edge:
        """
        Get a detached copy of edge ``ordinal``.

        Raises:
            EdgeNotFoundError: If no live edge has this ordinal
        """
        return self._base_graph.get_edge(ordinal)

    def has_edge(self, ordinal: int) -> bool:
        """Check if an edge with this ordinal is live."""
        return self._base_graph.has_edge(ordinal)

    def erase_edge(self, ordinal: int, tail: Optional[Key] = None) -> None:
        """
        Erase edge ``ordinal``, looked up among the edges leaving ``tail`` if given.

        Nothing happens if no such edge exists.
        """
        removed = self._base_graph.erase_edge(ordinal, tail)
        if removed is not None:
            self._notify_edges_removed([removed])

    def erase_edges(self, tail: Key, head: Key) -> None:
        """Erase every edge from ``tail`` to ``head``; no-op if either is absent."""
        self._notify_edges_removed(self._base_graph.erase_edges(tail, head))

    def erase_inedges(self, head: Key) -> None:
        """Erase every edge entering ``head``; no-op if absent."""
        self._notify_edges_removed(self._base_graph.erase_inedges(head))

    def erase_outedges(self, tail: Key) -> None:
        """Erase every edge leaving ``tail``; no-op if absent."""
        self._notify_edges_removed(self._base_graph.erase_outedges(tail))

    def reset_weight(self, ordinal: int, new_weight: float, tail: Optional[Key] = None) -> None:
        """
        Set the weight of edge ``ordinal``.

        Raises:
            VertexNotFoundError: If ``tail`` is given and not present
            EdgeNotFoundError: If no live edge matches
        """
        previous = self._base_graph.reset_weight(ordinal, new_weight, tail)
        self.event_manager.notify(
            GraphEvent.WEIGHT_CHANGED,
            GraphEventDetails(
                edges=[self._base_graph.get_edge(ordinal)],
                metadata={"previous_weight": previous},
            ),
        )

    def reset_weights(self, tail: Key, head: Key, new_weight: float) -> int:
        """
        Set the weight of every edge from ``tail`` to ``head``.

        Returns:
            int: Number of edges updated

        Raises:
            VertexNotFoundError: If either vertex is not present
        """
        updated = self._base_graph.reset_weights(tail, head, new_weight)
        if updated:
            self.event_manager.notify(
                GraphEvent.WEIGHT_CHANGED,
                GraphEventDetails(edges=[self._base_graph.get_edge(e.ordinal) for e in updated]),
            )
        return len(updated)

    def edge_weight(self, ordinal: int, tail: Optional[Key] = None) -> float:
        """Get the weight of edge ``ordinal``."""
        return self._base_graph.edge_weight(ordinal, tail)

    def iter_outedges(self, key: Key) -> Iterator[Edge]:
        """Iterate over the live records of the edges leaving ``key``; read only."""
        return self._base_graph.iter_outedges(key)

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over the live records of every edge; read only."""
        return self._base_graph.iter_edges()

    def get_neighbors(self, key: Key) -> List[Key]:
        """Get heads of the edges leaving ``key`` in adjacency order."""
        return self._base_graph.get_neighbors(key)

    # ------------------------------------------------------------------- state

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return self._base_graph.vertex_count

    @property
    def edge_count(self) -> int:
        """Number of edges."""
        return self._base_graph.edge_count

    @property
    def last_ordinal(self) -> int:
        """Highest edge ordinal issued so far."""
        return self._base_graph.last_ordinal

    def empty(self) -> bool:
        """Check whether the graph has no vertices."""
        return self._base_graph.empty()

    def clear(self) -> None:
        """Reset to the empty graph, including the edge ordinal counter."""
        self._base_graph.clear()
        logger.debug("Graph cleared")
        self.event_manager.notify(GraphEvent.GRAPH_CLEARED, GraphEventDetails())

    def __len__(self) -> int:
        return self.vertex_count

    def __contains__(self, key: Key) -> bool:
        return self.has_vertex(key)

    def __iter__(self) -> Iterator[Key]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"

    # --------------------------------------------------------------- traversal

    def iterator(self, source: Key, strategy: str = "bfs") -> GraphIterator:
        """
        Get an iterator for traversing the graph.

        Args:
            source: Vertex the traversal starts from
            strategy: Traversal strategy ('bfs' or 'dfs')

        Returns:
            Appropriate iterator instance

        Raises:
            ValueError: If strategy is not recognized
            VertexNotFoundError: If the graph is not empty and lacks ``source``
        """
        if strategy not in TRAVERSAL_STRATEGIES:
            raise ValueError(
                f"Unknown traversal strategy '{strategy}'. "
                f"Must be one of: {', '.join(TRAVERSAL_STRATEGIES.keys())}"
            )
        return TRAVERSAL_STRATEGIES[strategy](self, source)

    def traverse(self, source: Key, strategy: str = "bfs") -> Iterator[Tuple[Key, int]]:
        """Iterate over (key, depth) pairs; depth restarts at 0 per restarted component."""
        return iter(self.iterator(source, strategy))

    def breadth_first_search(self, source: Key, visitor: Visitor) -> None:
        """
        Visit every vertex once in breadth-first order, starting at ``source``.

        Args:
            source: Vertex to start from
            visitor: Called as ``visitor(key, data)`` for each vertex

        Raises:
            VertexNotFoundError: If the graph is not empty and lacks ``source``
        """
        for key, _ in BFSIterator(self, source):
            visitor(key, self._base_graph.vertex_data(key))

    def depth_first_search(self, source: Key, visitor: Visitor) -> None:
        """
        Visit every vertex once in depth-first order, starting at ``source``.

        Args:
            source: Vertex to start from
            visitor: Called as ``visitor(key, data)`` for each vertex

        Raises:
            VertexNotFoundError: If the graph is not empty and lacks ``source``
        """
        for key, _ in DFSIterator(self, source):
            visitor(key, self._base_graph.vertex_data(key))

    # ---------------------------------------------------------- shortest paths

    def dijkstra(self, source: Key) -> OneToAllResult:
        """Shortest paths from ``source``; weights must be non-negative."""
        return ShortestPaths.dijkstra(self, source, self.config.max_memory_mb)

    def bellman_ford(self, source: Key) -> OneToAllResult:
        """Shortest paths from ``source``; fails on reachable negative cycles."""
        return ShortestPaths.bellman_ford(self, source, self.config.max_memory_mb)

    def floyd_warshall(self) -> AllToAllResult:
        """Shortest paths between every ordered pair of vertices."""
        return ShortestPaths.floyd_warshall(self, self.config.max_memory_mb)


__all__ = [
    "BaseGraph",
    "DuplicateVertexError",
    "EdgeNotFoundError",
    "Graph",
    "GraphEvent",
    "GraphEventDetails",
    "GraphEventListener",
    "GraphEventManager",
    "VertexNotFoundError",
]
