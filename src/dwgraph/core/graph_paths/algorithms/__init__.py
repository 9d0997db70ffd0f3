"""Shortest-path algorithm implementations."""

from .all_pairs import FloydWarshallFinder
from .shortest_path import BellmanFordFinder, DijkstraFinder

__all__ = [
    "BellmanFordFinder",
    "DijkstraFinder",
    "FloydWarshallFinder",
]
