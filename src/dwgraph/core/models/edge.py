"""
Edge model for the weighted graph engine.

An edge is a directed, weighted connection from a tail vertex to a head vertex.
Its ordinal is issued by the owning graph when the edge is created and is the
only stable way to refer to the edge across later mutations of either endpoint.
"""

import math
from dataclasses import dataclass
from typing import Hashable


@dataclass
class Edge:
    """
    Directed weighted edge record.

    Attributes:
        ordinal (int): Graph-wide unique identifier, never reused
        tail (Hashable): Key of the vertex the edge leaves
        head (Hashable): Key of the vertex the edge enters
        weight (float): Edge weight; ``math.inf`` marks an unusable edge
    """

    ordinal: int
    tail: Hashable
    head: Hashable
    weight: float = 0.0

    def __post_init__(self):
        """Validate edge after initialization."""
        if isinstance(self.ordinal, bool) or not isinstance(self.ordinal, int):
            raise TypeError("ordinal must be an integer")
        if self.ordinal < 1:
            raise ValueError("ordinal must be positive")
        if self.tail is None or self.head is None:
            raise ValueError("edge endpoints must not be None")
        self.weight = validate_weight(self.weight)

    @property
    def is_loop(self) -> bool:
        """Whether the edge starts and ends at the same vertex."""
        return self.tail == self.head


def validate_weight(weight: float) -> float:
    """Check that a weight is a real number and return it as a float."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise TypeError("weight must be a numeric value")
    if math.isnan(weight):
        raise ValueError("weight must not be NaN")
    if weight == -math.inf:
        raise ValueError("weight must not be negative infinity")
    return float(weight)
