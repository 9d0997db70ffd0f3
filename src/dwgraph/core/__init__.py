"""Core graph functionality."""

from .config import GraphConfig
from .exceptions import (
    ConfigurationError,
    DuplicateVertexError,
    EdgeNotFoundError,
    EmptyGraphError,
    GraphError,
    GraphOperationError,
    InvalidValueError,
    NegativeCycleError,
    NegativeWeightError,
    OutOfRangeError,
    VertexNotFoundError,
)
from .models import Edge, Vertex
from .types import GraphProtocol
from .graph import Graph, GraphEvent
from .graph_paths import AllToAllResult, OneToAllResult, ShortestPaths
from .traversal import BFSIterator, DFSIterator

__all__ = [
    "AllToAllResult",
    "BFSIterator",
    "ConfigurationError",
    "DFSIterator",
    "DuplicateVertexError",
    "Edge",
    "EdgeNotFoundError",
    "EmptyGraphError",
    "Graph",
    "GraphConfig",
    "GraphError",
    "GraphEvent",
    "GraphOperationError",
    "GraphProtocol",
    "InvalidValueError",
    "NegativeCycleError",
    "NegativeWeightError",
    "OneToAllResult",
    "OutOfRangeError",
    "ShortestPaths",
    "Vertex",
    "VertexNotFoundError",
]
