"""Shared test fixtures."""

import pytest

from dwgraph.core.graph import Graph


@pytest.fixture
def empty_graph() -> Graph:
    """Fixture providing a graph without vertices."""
    return Graph()


@pytest.fixture
def triangle_graph() -> Graph:
    """
    Fixture providing a small weighted graph:
    A --1--> B --1--> C
    A --------5-----> C
    """
    graph = Graph()
    for key in "ABC":
        graph.insert_vertex(key, key.lower())
    graph.insert_edge("A", "B", 1.0)
    graph.insert_edge("B", "C", 1.0)
    graph.insert_edge("A", "C", 5.0)
    return graph


@pytest.fixture
def disconnected_graph() -> Graph:
    """
    Fixture providing a graph with three weakly connected parts:
    A -> B -> C      D <-> E      F
    """
    graph = Graph()
    for key in "ABCDEF":
        graph.insert_vertex(key)
    graph.insert_edge("A", "B", 2.0)
    graph.insert_edge("B", "C", 3.0)
    graph.insert_undirected_edge("D", "E", 1.0)
    return graph


class RecordingListener:
    """Listener collecting every event it receives."""

    def __init__(self):
        self.events = []

    def on_state_change(self, event, details):
        self.events.append((event, details))


@pytest.fixture
def recorder() -> RecordingListener:
    """Fixture providing a recording event listener."""
    return RecordingListener()
