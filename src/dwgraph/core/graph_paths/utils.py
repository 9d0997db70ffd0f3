"""
Utility functions and helpers for shortest-path operations.
"""

import gc
import logging
import math
import os
import time
from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

import psutil

from ..types import Key

logger = logging.getLogger(__name__)

# Constants
INFINITY = math.inf  # Distance of unreachable vertices
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between two RSS samples


class PriorityQueue:
    """
    Binary-heap priority queue with decrease-key by lazy invalidation.

    Updating an item pushes a fresh heap entry and remembers only the newest
    (priority, counter) pair for it; older entries stay in the heap and are
    discarded when they surface. The insertion counter breaks priority ties,
    so keys never have to be comparable.
    """

    def __init__(self):
        self._queue: List[Tuple[float, int, Key]] = []
        self._entry_finder: Dict[Key, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties

    def add_or_update(self, item: Key, priority: float) -> bool:
        """
        Insert an item or lower its priority.

        Returns:
            bool: True if the queue changed, False if the item already had a
                priority at least as good
        """
        current = self._entry_finder.get(item)
        if current is not None and not priority < current[0]:
            return False

        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, (priority, self._counter, item))
        self._counter += 1
        return True

    def pop(self) -> Optional[Tuple[float, Key]]:
        """Remove and return the (priority, item) pair with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, count):
                del self._entry_finder[item]
                return priority, item
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


class MemoryManager:
    """Memory budget guard for graph algorithms."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager with an optional budget in megabytes."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.monotonic()
        self._check_interval = MEMORY_CHECK_INTERVAL

    def check_memory(self) -> None:
        """
        Check if memory usage exceeds the budget.

        Samples are rate limited, so calling this from an inner loop is cheap.

        Raises:
            MemoryError: If growth since the start exceeds the budget even after
                a garbage collection
        """
        now = time.monotonic()
        if now - self._last_check < self._check_interval:
            return

        self._last_check = now
        if not self.max_memory:
            return

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.warning(
                    "Memory budget exceeded: %.1fMB used, %.1fMB allowed",
                    (current - self.start_memory) / 1024 / 1024,
                    self.max_memory / 1024 / 1024,
                )
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.monotonic()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
