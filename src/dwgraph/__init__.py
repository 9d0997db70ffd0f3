"""
dwgraph - Directed Weighted Graphs

This package provides an in-memory directed, weighted graph container and the
classic analysis algorithms on top of it:

- Vertex and edge storage with stable edge ordinals that survive mutation
- Degree queries and bulk edge operations
- Breadth-first and depth-first traversal with visitor callbacks
- Dijkstra and Bellman-Ford single-source shortest paths
- Floyd-Warshall all-pairs shortest paths with path reconstruction
"""

__version__ = "0.1.0"
__author__ = "dwgraph Team"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("dwgraph requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig
from .core.graph import Graph
from .core.models import Edge, Vertex

__all__ = [
    "Graph",
    "GraphConfig",
    "Edge",
    "Vertex",
]
