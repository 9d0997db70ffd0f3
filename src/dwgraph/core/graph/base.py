"""
Core graph data structure with ordinal-addressed edge storage.

This module provides the BaseGraph class, the exclusive owner of vertex and
edge state. Vertices are kept in insertion order and each of them holds only
the ordinals of its outgoing edges; the edge records live in an arena keyed by
ordinal, so an edge can be found, reweighted or erased without scanning
adjacency lists. A reverse index maps every vertex to the ordinals of its
incoming edges, which keeps vertex erasure and renaming proportional to the
vertex's degree.

The implementation is pure, focusing only on graph operations without side
concerns like events, configuration or transactions which are handled by the
Graph facade.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..exceptions import DuplicateVertexError, EdgeNotFoundError, EmptyGraphError
from ..exceptions import InvalidValueError, VertexNotFoundError
from ..models import Edge, Vertex, validate_weight
from ..types import Key


@dataclass
class BaseGraph:
    """
    Pure graph data structure using an edge arena and per-vertex ordinal lists.

    Attributes:
        _vertices (Dict[Key, Vertex]): Vertices in vertex order
        _edges (Dict[int, Edge]): Live edges keyed by ordinal
        _reverse_index (Dict[Key, Dict[int, None]]): Incoming ordinals per vertex,
            kept as insertion-ordered sets
        _last_ordinal (int): Highest ordinal issued so far
    """

    _vertices: Dict[Key, Vertex] = field(default_factory=dict)
    _edges: Dict[int, Edge] = field(default_factory=dict)
    _reverse_index: Dict[Key, Dict[int, None]] = field(default_factory=dict)
    _last_ordinal: int = 0

    # ------------------------------------------------------------------ vertices

    def has_vertex(self, key: Key) -> bool:
        """Check if a vertex exists in the graph."""
        return key is not None and key in self._vertices

    def _require_vertex(self, key: Key) -> Vertex:
        """Return the vertex record or raise VertexNotFoundError."""
        vertex = self._vertices.get(key) if key is not None else None
        if vertex is None:
            raise VertexNotFoundError(f"Vertex '{key}' not found in the graph")
        return vertex

    def insert_vertex(self, key: Key, data: Any = None) -> Vertex:
        """
        Insert a new vertex.

        Args:
            key (Key): Unique key of the vertex
            data (Any): Payload assigned to the vertex

        Returns:
            Vertex: The stored vertex record

        Raises:
            InvalidValueError: If the key is None
            DuplicateVertexError: If the key is already present
        """
        if key is None:
            raise InvalidValueError("None cannot be used as a vertex key")
        if key in self._vertices:
            raise DuplicateVertexError(f"Vertex '{key}' already exists in the graph")
        vertex = Vertex(key=key, data=data)
        self._vertices[key] = vertex
        self._reverse_index[key] = {}
        return vertex

    def erase_vertex(self, key: Key) -> Optional[List[Edge]]:
        """
        Erase a vertex together with every edge incident on it.

        Args:
            key (Key): Key of the vertex to erase

        Returns:
            Optional[List[Edge]]: The removed edges, outgoing ones first,
                or None if the vertex was not present
        """
        if not self.has_vertex(key):
            return None
        vertex = self._vertices[key]
        outgoing = list(vertex.outedges)
        own = set(outgoing)
        incoming = [ordinal for ordinal in self._reverse_index[key] if ordinal not in own]
        removed = [self._detach_edge(ordinal) for ordinal in outgoing + incoming]
        del self._vertices[key]
        del self._reverse_index[key]
        return removed

    def reset_key(self, key: Key, new_key: Key) -> bool:
        """
        Rename a vertex, keeping its data, position, edges and ordinals.

        Args:
            key (Key): Current key of the vertex
            new_key (Key): Key to rename the vertex to

        Returns:
            bool: True if the vertex was renamed, False if the keys are equal

        Raises:
            VertexNotFoundError: If ``key`` is not present
            InvalidValueError: If ``new_key`` is None
            DuplicateVertexError: If ``new_key`` is already present
        """
        if key == new_key:
            return False
        vertex = self._require_vertex(key)
        if new_key is None:
            raise InvalidValueError("None cannot be used as a vertex key")
        if new_key in self._vertices:
            raise DuplicateVertexError(f"Vertex '{new_key}' already exists in the graph")

        vertex.key = new_key
        self._vertices = {
            (new_key if current == key else current): record
            for current, record in self._vertices.items()
        }
        for ordinal in vertex.outedges:
            self._edges[ordinal].tail = new_key
        incoming = self._reverse_index.pop(key)
        for ordinal in incoming:
            self._edges[ordinal].head = new_key
        self._reverse_index[new_key] = incoming
        return True

    def reset_data(self, key: Key, data: Any) -> Any:
        """Replace the payload of a vertex and return the previous one."""
        vertex = self._require_vertex(key)
        previous, vertex.data = vertex.data, data
        return previous

    def vertex_data(self, key: Key) -> Any:
        """Return the payload object stored on a vertex."""
        return self._require_vertex(key).data

    def indegree(self, key: Key) -> int:
        """Count edges entering a vertex."""
        self._require_vertex(key)
        return len(self._reverse_index[key])

    def outdegree(self, key: Key) -> int:
        """Count edges leaving a vertex."""
        return len(self._require_vertex(key).outedges)

    def degree(self, key: Key) -> int:
        """Count edges incident on a vertex; a self-loop counts twice."""
        return self.outdegree(key) + self.indegree(key)

    def max_degree(self) -> int:
        """
        Get the greatest total degree over all vertices.

        Raises:
            EmptyGraphError: If the graph has no vertices
        """
        if not self._vertices:
            raise EmptyGraphError("degree of the graph is undefined")
        return max(
            len(vertex.outedges) + len(self._reverse_index[key])
            for key, vertex in self._vertices.items()
        )

    def keys(self) -> List[Key]:
        """Get vertex keys in vertex order."""
        return list(self._vertices)

    def vertices(self) -> Iterator[Vertex]:
        """Iterate over detached copies of the vertex records."""
        for vertex in self._vertices.values():
            yield Vertex(key=vertex.key, data=vertex.data, outedges=list(vertex.outedges))

    # --------------------------------------------------------------------- edges

    def insert_edge(self, tail: Key, head: Key, weight: float = 0.0) -> Edge:
        """
        Insert a directed edge from ``tail`` to ``head``.

        Args:
            tail (Key): Vertex the edge leaves
            head (Key): Vertex the edge enters
            weight (float): Weight of the edge

        Returns:
            Edge: The stored edge record with its fresh ordinal

        Raises:
            VertexNotFoundError: If either endpoint is not present
        """
        tail_vertex = self._require_vertex(tail)
        self._require_vertex(head)
        edge = Edge(ordinal=self._last_ordinal + 1, tail=tail, head=head, weight=weight)
        self._last_ordinal = edge.ordinal
        self._edges[edge.ordinal] = edge
        tail_vertex.outedges.append(edge.ordinal)
        self._reverse_index[head][edge.ordinal] = None
        return edge

    def insert_undirected_edge(
        self, tail: Key, head: Key, weight: float = 0.0
    ) -> Tuple[Edge, Edge]:
        """Insert the pair of edges ``tail -> head`` and ``head -> tail``."""
        self._require_vertex(tail)
        self._require_vertex(head)
        validate_weight(weight)
        return self.insert_edge(tail, head, weight), self.insert_edge(head, tail, weight)

    def _detach_edge(self, ordinal: int) -> Edge:
        """Remove a live edge from the arena, its tail and the reverse index."""
        edge = self._edges.pop(ordinal)
        self._vertices[edge.tail].outedges.remove(ordinal)
        del self._reverse_index[edge.head][ordinal]
        return edge

    def _lookup_edge(self, ordinal: int, tail: Optional[Key] = None) -> Edge:
        """Find a live edge by ordinal, optionally restricted to one tail."""
        if tail is not None:
            self._require_vertex(tail)
        edge = self._edges.get(ordinal)
        if edge is None or (tail is not None and edge.tail != tail):
            if tail is None:
                raise EdgeNotFoundError(f"Edge {ordinal} not found in the graph")
            raise EdgeNotFoundError(f"Edge {ordinal} does not leave vertex '{tail}'")
        return edge

    def has_edge(self, ordinal: int) -> bool:
        """Check if an edge with the given ordinal is live."""
        return ordinal in self._edges

    def get_edge(self, ordinal: int) -> Edge:
        """Get a detached copy of a live edge."""
        return replace(self._lookup_edge(ordinal))

    def edges(self, tail: Key, head: Key) -> List[int]:
        """Get ordinals of the edges from ``tail`` to ``head`` in adjacency order."""
        tail_vertex = self._require_vertex(tail)
        self._require_vertex(head)
        return [o for o in tail_vertex.outedges if self._edges[o].head == head]

    def outedges(self, tail: Key) -> List[int]:
        """Get ordinals of the edges leaving ``tail`` in adjacency order."""
        return list(self._require_vertex(tail).outedges)

    def inedges(self, head: Key) -> List[int]:
        """Get ordinals of the edges entering ``head``, tail by tail in vertex order."""
        self._require_vertex(head)
        return [
            ordinal
            for vertex in self._vertices.values()
            for ordinal in vertex.outedges
            if self._edges[ordinal].head == head
        ]

    def erase_edge(self, ordinal: int, tail: Optional[Key] = None) -> Optional[Edge]:
        """
        Erase exactly one edge.

        Args:
            ordinal (int): Ordinal of the edge
            tail (Optional[Key]): If given, only the edges leaving this vertex are searched

        Returns:
            Optional[Edge]: The removed edge, or None if nothing matched
        """
        edge = self._edges.get(ordinal)
        if edge is None:
            return None
        if tail is not None and edge.tail != tail:
            return None
        return self._detach_edge(ordinal)

    def erase_edges(self, tail: Key, head: Key) -> List[Edge]:
        """Erase all edges from ``tail`` to ``head``; no-op if either is absent."""
        if not self.has_vertex(tail) or not self.has_vertex(head):
            return []
        return [self._detach_edge(o) for o in self.edges(tail, head)]

    def erase_inedges(self, head: Key) -> List[Edge]:
        """Erase all edges entering ``head``; no-op if absent."""
        if not self.has_vertex(head):
            return []
        return [self._detach_edge(o) for o in self.inedges(head)]

    def erase_outedges(self, tail: Key) -> List[Edge]:
        """Erase all edges leaving ``tail``; no-op if absent."""
        if not self.has_vertex(tail):
            return []
        return [self._detach_edge(o) for o in self.outedges(tail)]

    def reset_weight(self, ordinal: int, new_weight: float, tail: Optional[Key] = None) -> float:
        """
        Set the weight of one edge.

        Returns:
            float: The previous weight

        Raises:
            VertexNotFoundError: If ``tail`` is given and not present
            EdgeNotFoundError: If no live edge matches
        """
        edge = self._lookup_edge(ordinal, tail)
        new_weight = validate_weight(new_weight)
        previous, edge.weight = edge.weight, new_weight
        return previous

    def reset_weights(self, tail: Key, head: Key, new_weight: float) -> List[Edge]:
        """Set the weight of every edge from ``tail`` to ``head``."""
        ordinals = self.edges(tail, head)
        new_weight = validate_weight(new_weight)
        for ordinal in ordinals:
            self._edges[ordinal].weight = new_weight
        return [self._edges[o] for o in ordinals]

    def edge_weight(self, ordinal: int, tail: Optional[Key] = None) -> float:
        """Get the weight of one edge."""
        return self._lookup_edge(ordinal, tail).weight

    def iter_outedges(self, key: Key) -> Iterator[Edge]:
        """Iterate over the live records of the edges leaving ``key``."""
        for ordinal in self._require_vertex(key).outedges:
            yield self._edges[ordinal]

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over all live edge records, vertex by vertex."""
        for vertex in self._vertices.values():
            for ordinal in vertex.outedges:
                yield self._edges[ordinal]

    def get_neighbors(self, key: Key) -> List[Key]:
        """Get heads of the edges leaving ``key`` in adjacency order."""
        return [edge.head for edge in self.iter_outedges(key)]

    # --------------------------------------------------------------------- state

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        """Number of live edges."""
        return len(self._edges)

    @property
    def last_ordinal(self) -> int:
        """Highest ordinal issued so far, 0 if none."""
        return self._last_ordinal

    def empty(self) -> bool:
        """Check whether the graph has no vertices."""
        return not self._vertices

    def clear(self) -> None:
        """Reset to the empty graph, including the ordinal counter."""
        self._vertices = {}
        self._edges = {}
        self._reverse_index = {}
        self._last_ordinal = 0

    def copy(self) -> "BaseGraph":
        """
        Create a structural copy of the graph.

        Vertex and edge records are copied; vertex payloads are shared.
        """
        return BaseGraph(
            _vertices={
                key: Vertex(key=key, data=vertex.data, outedges=list(vertex.outedges))
                for key, vertex in self._vertices.items()
            },
            _edges={ordinal: replace(edge) for ordinal, edge in self._edges.items()},
            _reverse_index={key: dict(ords) for key, ords in self._reverse_index.items()},
            _last_ordinal=self._last_ordinal,
        )
