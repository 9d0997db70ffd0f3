"""
Core domain models package for the weighted graph engine.

This package provides the records the graph store is built from: vertices
holding payload data and edges holding weights and ordinals.
"""

from .edge import Edge, validate_weight
from .vertex import Vertex

__all__ = [
    "Edge",
    "Vertex",
    "validate_weight",
]
