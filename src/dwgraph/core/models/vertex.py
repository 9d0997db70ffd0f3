"""
Vertex model for the weighted graph engine.

A vertex is identified by a caller-chosen hashable key and carries an arbitrary
payload. It owns the ordered list of ordinals of its outgoing edges; the edge
records themselves live in the graph's edge arena.
"""

from dataclasses import dataclass, field
from typing import Any, Hashable, List


@dataclass
class Vertex:
    """
    Vertex record.

    Attributes:
        key (Hashable): Unique key of the vertex; None is reserved
        data (Any): Payload assigned to the vertex
        outedges (List[int]): Ordinals of outgoing edges in insertion order
    """

    key: Hashable
    data: Any = None
    outedges: List[int] = field(default_factory=list)

    def __post_init__(self):
        """Validate vertex after initialization."""
        if self.key is None:
            raise ValueError("vertex key must not be None")
        hash(self.key)

    @property
    def outdegree(self) -> int:
        """Number of outgoing edges."""
        return len(self.outedges)
