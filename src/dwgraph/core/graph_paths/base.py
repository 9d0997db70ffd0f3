import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from time import time
from typing import Dict, Generator, Generic, Optional, Tuple, TypeVar

from ..exceptions import VertexNotFoundError
from ..types import GraphProtocol, Key
from .models import AllToAllResult, OneToAllResult, PerformanceMetrics
from .utils import INFINITY, MemoryManager

logger = logging.getLogger(__name__)

# Type variable for shortest-path results
T = TypeVar("T", OneToAllResult, AllToAllResult)


class PathFinder(ABC, Generic[T]):
    """Abstract base class for shortest-path algorithms."""

    operation = "shortest_path"

    def __init__(self, graph: GraphProtocol, max_memory_mb: Optional[float] = None):
        """Initialize finder with graph and optional memory limit."""
        self.graph = graph
        self.memory_manager = MemoryManager(max_memory_mb)
        self.metrics = PerformanceMetrics(operation=self.operation, start_time=time())

    @contextmanager
    def _search_context(self) -> Generator[PerformanceMetrics, None, None]:
        """Context manager tracking timing and memory of one search."""
        self.metrics = PerformanceMetrics(operation=self.operation, start_time=time())
        try:
            yield self.metrics
        finally:
            self.metrics.end_time = time()
            self.metrics.max_memory_used = int(self.memory_manager.peak_memory_mb * 1024 * 1024)
            self.memory_manager.reset_peak_memory()
            logger.debug("%s finished: %s", self.operation, self.metrics.to_dict())

    @abstractmethod
    def run(self, *args, **kwargs) -> T:
        """Run the algorithm and return its result."""
        pass


class SingleSourceFinder(PathFinder[OneToAllResult]):
    """Base class for algorithms producing one-to-all results."""

    def validate_source(self, source: Key) -> None:
        """Validate that the source vertex exists in the graph."""
        if not self.graph.has_vertex(source):
            raise VertexNotFoundError(f"Source vertex '{source}' not found")

    def initial_state(self, source: Key) -> Tuple[Dict[Key, float], Dict[Key, Optional[Key]]]:
        """Distances at INFINITY and no predecessors, except the source at 0."""
        distances: Dict[Key, float] = {key: INFINITY for key in self.graph.keys()}
        predecessors: Dict[Key, Optional[Key]] = {key: None for key in distances}
        distances[source] = 0.0
        return distances, predecessors
