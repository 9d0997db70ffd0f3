"""
Custom exceptions for the weighted graph engine.

This module defines the hierarchy of exceptions raised by the graph store, the
traversal engine and the shortest-path engines. Every exception derives from
GraphError so callers can catch the whole family at once, while the
intermediate classes map onto the error kinds callers usually branch on:

    * OutOfRangeError - a referenced vertex key or edge ordinal does not exist
    * EmptyGraphError - the operation needs at least one vertex
    * InvalidValueError - the operation would break key uniqueness
    * NegativeWeightError - Dijkstra met a negative edge weight
    * NegativeCycleError - a negative-weight cycle makes distances undefined
"""


class GraphError(Exception):
    """Base class for all graph engine errors."""


class OutOfRangeError(GraphError):
    """
    Raised when a referenced vertex or edge does not exist in the graph.

    Examples:
        * Querying the degree of an unknown vertex
        * Inserting an edge whose endpoint was never inserted
        * Reading the weight of an erased edge
    """


class VertexNotFoundError(OutOfRangeError):
    """
    Raised when a requested vertex key is not present in the graph.

    Examples:
        * Renaming a vertex that does not exist
        * Starting a traversal from an unknown source
        * Asking a result object about a vertex it never tracked
    """


class EdgeNotFoundError(OutOfRangeError):
    """
    Raised when a requested edge ordinal is not present in the graph.

    Examples:
        * Ordinal beyond the highest ordinal ever issued
        * Ordinal of an edge that has been erased
        * Ordinal owned by a different tail vertex
    """


class EmptyGraphError(GraphError):
    """Raised when an operation requiring at least one vertex runs on an empty graph."""

    def __str__(self) -> str:
        """Format empty graph error message."""
        message = super().__str__()
        return f"Empty graph: {message}" if message else "Empty graph"


class InvalidValueError(GraphError):
    """
    Raised when a value cannot be accepted by the graph.

    Examples:
        * Using None as a vertex key
        * Renaming a vertex onto a key that is already taken
    """


class DuplicateVertexError(InvalidValueError):
    """Raised when inserting or renaming onto a key that is already present."""


class GraphOperationError(GraphError):
    """
    Raised when a graph algorithm cannot produce a meaningful result.

    Examples:
        * Negative weights fed to an algorithm that requires non-negative ones
        * Negative-weight cycles that make shortest distances undefined
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NegativeWeightError(GraphOperationError):
    """Raised when Dijkstra's algorithm relaxes an edge with a negative weight."""


class NegativeCycleError(GraphOperationError):
    """Raised when a negative-weight cycle is detected during shortest-path search."""


class ConfigurationError(GraphError):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown configuration keys
        * Values of the wrong type or outside their allowed set
    """
