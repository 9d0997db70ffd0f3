"""
Graph event system.

This module provides an event system for graph mutations, allowing components
to subscribe to and be notified of changes in the graph state. A failing
listener is logged and skipped so it cannot abort the mutation that fired the
event or starve the listeners registered after it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Protocol

from ..models import Edge
from ..types import Key

logger = logging.getLogger(__name__)


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    VERTEX_ADDED = auto()
    VERTEX_REMOVED = auto()
    VERTEX_RENAMED = auto()
    DATA_CHANGED = auto()
    EDGE_ADDED = auto()
    EDGE_REMOVED = auto()
    WEIGHT_CHANGED = auto()
    GRAPH_CLEARED = auto()


class GraphEventListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Called when the graph state changes.

        Args:
            event (GraphEvent): Type of event that occurred
            details (Dict[str, Any]): Additional information about the event
        """
        ...


@dataclass
class GraphEventDetails:
    """
    Container for graph event details.

    Attributes:
        vertices (List[Key]): Affected vertex keys
        edges (List[Edge]): Affected edges, as detached copies
        metadata (Dict[str, Any]): Additional event metadata
    """

    vertices: List[Key] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert event details to dictionary format."""
        return {
            "vertices": list(self.vertices),
            "edges": [
                {
                    "ordinal": edge.ordinal,
                    "tail": edge.tail,
                    "head": edge.head,
                    "weight": edge.weight,
                }
                for edge in self.edges
            ],
            "metadata": dict(self.metadata),
        }


@dataclass
class GraphEventManager:
    """
    Manages graph event subscriptions and notifications.

    Attributes:
        _listeners (List[GraphEventListener]): Registered event listeners
    """

    _listeners: List[GraphEventListener] = field(default_factory=list)

    def add_listener(self, listener: GraphEventListener) -> None:
        """Add a listener for graph events; adding twice has no effect."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Remove a graph event listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def clear_listeners(self) -> None:
        """Remove all event listeners."""
        self._listeners.clear()

    @property
    def listener_count(self) -> int:
        """Number of registered listeners."""
        return len(self._listeners)

    def notify(self, event: GraphEvent, details: GraphEventDetails) -> None:
        """
        Notify all listeners of a graph event.

        Args:
            event (GraphEvent): The type of event that occurred
            details (GraphEventDetails): Information about the event
        """
        if not self._listeners:
            return
        payload = details.to_dict()
        for listener in self._listeners.copy():
            try:
                listener.on_state_change(event, payload)
            except Exception:
                # Log error but continue notifying other listeners
                logger.exception("Error notifying listener %r of %s", listener, event.name)
