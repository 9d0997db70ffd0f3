"""
Tests for core graph store functionality.
"""

import math

import pytest

from dwgraph.core.config import GraphConfig
from dwgraph.core.exceptions import (
    DuplicateVertexError,
    EdgeNotFoundError,
    EmptyGraphError,
    InvalidValueError,
    OutOfRangeError,
    VertexNotFoundError,
)
from dwgraph.core.graph import Graph


def test_empty_graph(empty_graph):
    """Test a freshly created graph."""
    assert empty_graph.empty()
    assert empty_graph.vertex_count == 0
    assert empty_graph.edge_count == 0
    assert empty_graph.last_ordinal == 0
    assert list(empty_graph) == []


def test_insert_vertex(empty_graph):
    """Test inserting vertices with and without data."""
    empty_graph.insert_vertex("A", {"color": "red"})
    empty_graph.insert_vertex("B")

    assert not empty_graph.empty()
    assert empty_graph.vertex_count == 2
    assert empty_graph.vertex_data("A") == {"color": "red"}
    assert empty_graph.vertex_data("B") is None
    assert "A" in empty_graph
    assert "Z" not in empty_graph
    assert empty_graph.keys() == ["A", "B"]


def test_insert_duplicate_vertex_raises(triangle_graph):
    """Test that duplicate keys are rejected by default."""
    with pytest.raises(DuplicateVertexError):
        triangle_graph.insert_vertex("A", "other")

    assert triangle_graph.vertex_count == 3
    assert triangle_graph.vertex_data("A") == "a"


def test_insert_duplicate_vertex_ignored_by_policy():
    """Test the ignore policy for duplicate keys."""
    graph = Graph(GraphConfig(duplicate_vertex_policy="ignore"))
    graph.insert_vertex("A", 1)
    graph.insert_vertex("A", 2)

    assert graph.vertex_count == 1
    assert graph.vertex_data("A") == 1


def test_none_is_not_a_vertex_key(empty_graph):
    """Test that None is reserved."""
    with pytest.raises(InvalidValueError):
        empty_graph.insert_vertex(None)
    assert empty_graph.empty()


def test_integer_and_tuple_keys(empty_graph):
    """Test that any hashable value can be a key."""
    empty_graph.insert_vertex(0)
    empty_graph.insert_vertex((1, 2))
    ordinal = empty_graph.insert_edge(0, (1, 2), 4.5)

    assert empty_graph.edge(ordinal).head == (1, 2)
    assert empty_graph.outdegree(0) == 1


def test_vertex_data_is_mutable_handle(triangle_graph):
    """Test that vertex_data returns the stored object itself."""
    triangle_graph.reset_data("A", [])
    triangle_graph.vertex_data("A").append(42)

    assert triangle_graph.vertex_data("A") == [42]


def test_vertex_data_missing_vertex(triangle_graph):
    """Test data access on an absent vertex."""
    with pytest.raises(VertexNotFoundError):
        triangle_graph.vertex_data("Z")
    with pytest.raises(OutOfRangeError):
        triangle_graph.reset_data("Z", 1)


def test_degrees(triangle_graph):
    """Test in-, out- and total degree queries."""
    assert triangle_graph.outdegree("A") == 2
    assert triangle_graph.indegree("A") == 0
    assert triangle_graph.indegree("C") == 2
    assert triangle_graph.degree("B") == 2
    assert triangle_graph.degree() == 2


def test_degree_with_self_loop(empty_graph):
    """Test that a self-loop counts once in each direction."""
    empty_graph.insert_vertex("A")
    empty_graph.insert_edge("A", "A", 1.0)

    assert empty_graph.indegree("A") == 1
    assert empty_graph.outdegree("A") == 1
    assert empty_graph.degree("A") == 2


def test_degree_of_graph(triangle_graph):
    """Test the maximum degree over all vertices."""
    triangle_graph.insert_edge("C", "A", 1.0)

    assert triangle_graph.degree() == 3
    assert triangle_graph.max_degree() == 3


def test_degree_of_empty_graph(empty_graph):
    """Test that the degree of an empty graph is undefined."""
    with pytest.raises(EmptyGraphError):
        empty_graph.degree()


def test_degree_missing_vertex(triangle_graph):
    """Test degree queries on an absent vertex."""
    with pytest.raises(VertexNotFoundError):
        triangle_graph.indegree("Z")
    with pytest.raises(VertexNotFoundError):
        triangle_graph.outdegree("Z")
    with pytest.raises(VertexNotFoundError):
        triangle_graph.degree("Z")


def test_insert_edge_assigns_increasing_ordinals(triangle_graph):
    """Test ordinals of inserted edges."""
    assert triangle_graph.outedges("A") == [1, 3]
    assert triangle_graph.insert_edge("C", "A") == 4
    assert triangle_graph.last_ordinal == 4
    assert triangle_graph.edge_weight(4) == 0.0


def test_insert_edge_missing_endpoint(triangle_graph):
    """Test that both endpoints must exist."""
    with pytest.raises(VertexNotFoundError):
        triangle_graph.insert_edge("A", "Z", 1.0)
    with pytest.raises(VertexNotFoundError):
        triangle_graph.insert_edge("Z", "A", 1.0)

    assert triangle_graph.edge_count == 3
    assert triangle_graph.last_ordinal == 3


def test_insert_edge_rejects_non_numeric_weight(triangle_graph):
    """Test weight validation on insert."""
    with pytest.raises(TypeError):
        triangle_graph.insert_edge("A", "B", "heavy")
    with pytest.raises(ValueError):
        triangle_graph.insert_edge("A", "B", math.nan)

    assert triangle_graph.last_ordinal == 3


def test_default_weight_from_config():
    """Test that the configured default weight is used."""
    graph = Graph(GraphConfig(default_weight=1.5))
    graph.insert_vertex("A")
    graph.insert_vertex("B")
    ordinal = graph.insert_edge("A", "B")

    assert graph.edge_weight(ordinal) == 1.5


def test_multi_edges_and_self_loops(empty_graph):
    """Test parallel edges and loops."""
    empty_graph.insert_vertex("A")
    empty_graph.insert_vertex("B")
    first = empty_graph.insert_edge("A", "B", 1.0)
    second = empty_graph.insert_edge("A", "B", 2.0)
    loop = empty_graph.insert_edge("A", "A", 3.0)

    assert empty_graph.edges("A", "B") == [first, second]
    assert empty_graph.edges("A", "A") == [loop]
    assert empty_graph.edge(loop).is_loop
    assert empty_graph.edge_count == 3


def test_insert_undirected_edge(empty_graph):
    """Test that an undirected edge is two directed edges."""
    empty_graph.insert_vertex("A")
    empty_graph.insert_vertex("B")
    forward, backward = empty_graph.insert_undirected_edge("A", "B", 7.0)

    assert (forward, backward) == (1, 2)
    assert empty_graph.edges("A", "B") == [forward]
    assert empty_graph.edges("B", "A") == [backward]
    assert empty_graph.edge_weight(backward) == 7.0
    assert empty_graph.edge_count == 2


def test_insert_undirected_edge_missing_endpoint(empty_graph):
    """Test that nothing is inserted when an endpoint is missing."""
    empty_graph.insert_vertex("A")
    with pytest.raises(VertexNotFoundError):
        empty_graph.insert_undirected_edge("A", "Z", 1.0)

    assert empty_graph.edge_count == 0
    assert empty_graph.last_ordinal == 0


def test_edge_queries(triangle_graph):
    """Test ordinal queries by endpoint."""
    triangle_graph.insert_edge("C", "B", 1.0)

    assert triangle_graph.edges("A", "C") == [3]
    assert triangle_graph.edges("C", "A") == []
    assert triangle_graph.outedges("B") == [2]
    assert triangle_graph.inedges("B") == [1, 4]
    assert triangle_graph.inedges("C") == [3, 2]


def test_inedges_follow_vertex_then_adjacency_order(empty_graph):
    """Test the order of incoming edge ordinals."""
    for key in "XYZ":
        empty_graph.insert_vertex(key)
    late = empty_graph.insert_edge("Y", "Z", 1.0)
    early = empty_graph.insert_edge("X", "Z", 1.0)

    assert empty_graph.inedges("Z") == [early, late]


def test_edge_queries_missing_vertex(triangle_graph):
    """Test ordinal queries naming an absent vertex."""
    with pytest.raises(VertexNotFoundError):
        triangle_graph.edges("A", "Z")
    with pytest.raises(VertexNotFoundError):
        triangle_graph.outedges("Z")
    with pytest.raises(VertexNotFoundError):
        triangle_graph.inedges("Z")


def test_erase_vertex_cascades_edges(empty_graph):
    """Test erasing a vertex with two outgoing and one incoming edge."""
    for key in "ABCD":
        empty_graph.insert_vertex(key)
    empty_graph.insert_edge("A", "B", 1.0)
    empty_graph.insert_edge("A", "C", 1.0)
    empty_graph.insert_edge("D", "A", 1.0)
    kept = empty_graph.insert_edge("D", "B", 1.0)

    empty_graph.erase_vertex("A")

    assert empty_graph.edge_count == 1
    assert empty_graph.vertex_count == 3
    assert "A" not in empty_graph
    assert empty_graph.outedges("D") == [kept]
    assert empty_graph.inedges("B") == [kept]
    assert empty_graph.indegree("C") == 0


def test_erase_vertex_with_self_loop(empty_graph):
    """Test that a self-loop is removed once."""
    empty_graph.insert_vertex("A")
    empty_graph.insert_edge("A", "A", 1.0)
    empty_graph.erase_vertex("A")

    assert empty_graph.empty()
    assert empty_graph.edge_count == 0


def test_erase_absent_vertex_is_noop(triangle_graph):
    """Test erasing a vertex that does not exist."""
    triangle_graph.erase_vertex("Z")

    assert triangle_graph.vertex_count == 3
    assert triangle_graph.edge_count == 3


def test_reset_key(triangle_graph):
    """Test renaming a vertex."""
    ordinals_out = triangle_graph.outedges("B")
    ordinals_in = triangle_graph.inedges("B")

    triangle_graph.reset_key("B", "Q")

    assert "B" not in triangle_graph
    assert triangle_graph.vertex_data("Q") == "b"
    assert triangle_graph.outedges("Q") == ordinals_out
    assert triangle_graph.inedges("Q") == ordinals_in
    assert triangle_graph.edges("A", "Q") == [1]
    assert triangle_graph.edge(1).head == "Q"
    assert triangle_graph.edge(2).tail == "Q"
    assert triangle_graph.keys() == ["A", "Q", "C"]


def test_reset_key_with_self_loop(empty_graph):
    """Test renaming a vertex that has a self-loop."""
    empty_graph.insert_vertex("A")
    loop = empty_graph.insert_edge("A", "A", 1.0)
    empty_graph.reset_key("A", "B")

    assert empty_graph.edges("B", "B") == [loop]


def test_reset_key_same_key_is_noop(triangle_graph):
    """Test renaming a vertex onto its own key."""
    triangle_graph.reset_key("A", "A")

    assert triangle_graph.keys() == ["A", "B", "C"]


def test_reset_key_failures(triangle_graph):
    """Test renaming errors."""
    with pytest.raises(VertexNotFoundError):
        triangle_graph.reset_key("Z", "Y")
    with pytest.raises(DuplicateVertexError):
        triangle_graph.reset_key("A", "B")
    with pytest.raises(InvalidValueError):
        triangle_graph.reset_key("A", None)

    assert triangle_graph.keys() == ["A", "B", "C"]


def test_erase_edge(triangle_graph):
    """Test erasing an edge by ordinal."""
    triangle_graph.erase_edge(2)

    assert not triangle_graph.has_edge(2)
    assert triangle_graph.edge_count == 2
    assert triangle_graph.outedges("B") == []
    assert triangle_graph.inedges("C") == [3]


def test_erase_edge_restricted_to_tail(triangle_graph):
    """Test erasing an edge among one vertex's outgoing edges."""
    triangle_graph.erase_edge(2, "A")
    assert triangle_graph.has_edge(2)

    triangle_graph.erase_edge(2, "B")
    assert not triangle_graph.has_edge(2)


def test_erase_edge_unknown_ordinal_is_noop(triangle_graph):
    """Test erasing ordinals that do not exist."""
    triangle_graph.erase_edge(99)
    triangle_graph.erase_edge(0)
    triangle_graph.erase_edge(1, "Z")

    assert triangle_graph.edge_count == 3


def test_bulk_erase(triangle_graph):
    """Test erasing edges by endpoint pattern."""
    triangle_graph.insert_edge("A", "B", 9.0)
    triangle_graph.erase_edges("A", "B")
    assert triangle_graph.edges("A", "B") == []
    assert triangle_graph.edge_count == 2

    triangle_graph.erase_inedges("C")
    assert triangle_graph.edge_count == 0

    triangle_graph.insert_edge("A", "B")
    triangle_graph.insert_edge("A", "C")
    triangle_graph.erase_outedges("A")
    assert triangle_graph.edge_count == 0


def test_bulk_erase_absent_vertex_is_noop(triangle_graph):
    """Test bulk erasure naming absent vertices."""
    triangle_graph.erase_edges("A", "Z")
    triangle_graph.erase_inedges("Z")
    triangle_graph.erase_outedges("Z")

    assert triangle_graph.edge_count == 3


def test_ordinals_are_never_reused(triangle_graph):
    """Test ordinals across erase/insert cycles."""
    seen = set(triangle_graph.outedges("A") + triangle_graph.outedges("B"))
    for _ in range(3):
        triangle_graph.erase_edges("A", "B")
        ordinal = triangle_graph.insert_edge("A", "B", 1.0)
        assert ordinal > max(seen)
        seen.add(ordinal)

    triangle_graph.erase_vertex("C")
    triangle_graph.insert_vertex("C")
    assert triangle_graph.insert_edge("B", "C") == max(seen) + 1


def test_reset_weight(triangle_graph):
    """Test changing the weight of one edge."""
    triangle_graph.reset_weight(3, 0.5)
    assert triangle_graph.edge_weight(3) == 0.5

    triangle_graph.reset_weight(3, 0.25, "A")
    assert triangle_graph.edge_weight(3, "A") == 0.25


def test_reset_weight_failures(triangle_graph):
    """Test weight updates addressing no live edge."""
    with pytest.raises(EdgeNotFoundError):
        triangle_graph.reset_weight(99, 1.0)
    with pytest.raises(EdgeNotFoundError):
        triangle_graph.reset_weight(2, 1.0, "A")
    with pytest.raises(VertexNotFoundError):
        triangle_graph.reset_weight(2, 1.0, "Z")

    triangle_graph.erase_edge(2)
    with pytest.raises(OutOfRangeError):
        triangle_graph.reset_weight(2, 1.0)


def test_reset_weights(triangle_graph):
    """Test changing the weight of parallel edges."""
    extra = triangle_graph.insert_edge("A", "B", 4.0)

    assert triangle_graph.reset_weights("A", "B", 8.0) == 2
    assert triangle_graph.edge_weight(1) == 8.0
    assert triangle_graph.edge_weight(extra) == 8.0
    assert triangle_graph.reset_weights("B", "A", 8.0) == 0


def test_reset_weights_missing_vertex(triangle_graph):
    """Test weight updates by pair naming an absent vertex."""
    with pytest.raises(VertexNotFoundError):
        triangle_graph.reset_weights("A", "Z", 1.0)


def test_edge_weight_failures(triangle_graph):
    """Test weight lookups addressing no live edge."""
    with pytest.raises(EdgeNotFoundError):
        triangle_graph.edge_weight(4)
    with pytest.raises(EdgeNotFoundError):
        triangle_graph.edge_weight(1, "B")
    with pytest.raises(VertexNotFoundError):
        triangle_graph.edge_weight(1, "Z")


def test_infinite_weight_is_allowed(triangle_graph):
    """Test that infinity is a legal weight."""
    triangle_graph.reset_weight(1, math.inf)
    assert triangle_graph.edge_weight(1) == math.inf


def test_negative_infinite_weight_is_rejected(triangle_graph):
    """Test that negative infinity is refused on insert and on update."""
    with pytest.raises(ValueError):
        triangle_graph.insert_edge("B", "A", -math.inf)
    with pytest.raises(ValueError):
        triangle_graph.insert_undirected_edge("A", "C", -math.inf)
    with pytest.raises(ValueError):
        triangle_graph.reset_weight(1, -math.inf)
    with pytest.raises(ValueError):
        triangle_graph.reset_weights("A", "B", -math.inf)

    assert triangle_graph.edge_count == 3
    assert triangle_graph.last_ordinal == 3
    assert triangle_graph.edge_weight(1) == 1.0


def test_edge_returns_detached_copy(triangle_graph):
    """Test that edge records handed out do not alias the store."""
    edge = triangle_graph.edge(1)
    edge.weight = 100.0

    assert triangle_graph.edge_weight(1) == 1.0


def test_vertices_snapshot(triangle_graph):
    """Test read-only vertex iteration for renderers."""
    snapshot = list(triangle_graph.vertices())

    assert [v.key for v in snapshot] == ["A", "B", "C"]
    assert snapshot[0].data == "a"
    assert snapshot[0].outedges == [1, 3]

    snapshot[0].outedges.clear()
    assert triangle_graph.outedges("A") == [1, 3]
    assert [(e.ordinal, e.head, e.weight) for e in triangle_graph.outgoing("A")] == [
        (1, "B", 1.0),
        (3, "C", 5.0),
    ]


def test_clear(triangle_graph):
    """Test resetting the graph."""
    triangle_graph.clear()

    assert triangle_graph.empty()
    assert triangle_graph.edge_count == 0
    assert triangle_graph.last_ordinal == 0

    triangle_graph.insert_vertex("A")
    assert triangle_graph.insert_edge("A", "A") == 1


def test_counts_follow_insertions_and_erasures(empty_graph):
    """Test vertex and edge counters over a mixed sequence of operations."""
    for key in range(5):
        empty_graph.insert_vertex(key)
    for tail in range(5):
        for head in range(5):
            if tail != head:
                empty_graph.insert_edge(tail, head, float(tail + head))
    assert empty_graph.edge_count == 20

    empty_graph.erase_vertex(0)
    assert empty_graph.vertex_count == 4
    assert empty_graph.edge_count == 12

    empty_graph.erase_edges(1, 2)
    empty_graph.erase_outedges(3)
    assert empty_graph.edge_count == 8
    assert sum(empty_graph.outdegree(k) for k in empty_graph) == empty_graph.edge_count
    assert sum(empty_graph.indegree(k) for k in empty_graph) == empty_graph.edge_count


def test_transaction_rolls_back(triangle_graph):
    """Test that a failing transaction leaves the graph unchanged."""
    with pytest.raises(VertexNotFoundError):
        with triangle_graph.transaction() as graph:
            graph.insert_vertex("D")
            graph.insert_edge("A", "D", 1.0)
            graph.insert_edge("D", "Z", 1.0)

    assert "D" not in triangle_graph
    assert triangle_graph.edge_count == 3
    assert triangle_graph.last_ordinal == 3


def test_transaction_commits(triangle_graph):
    """Test that a successful transaction keeps its changes."""
    with triangle_graph.transaction() as graph:
        graph.insert_vertex("D")
        graph.insert_edge("C", "D", 1.0)

    assert triangle_graph.edges("C", "D") == [4]


def test_repr(triangle_graph):
    """Test the graph representation."""
    assert repr(triangle_graph) == "Graph(vertices=3, edges=3)"
    assert len(triangle_graph) == 3
