"""
Configuration for graph instances.

GraphConfig gathers the few policy knobs of the engine: what to do with
duplicate vertex inserts, which weight to use when none is given, and an
optional memory budget for the shortest-path engines. Configurations built
from plain mappings are validated against a JSON schema.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import ConfigurationError
from .models import validate_weight

logger = logging.getLogger(__name__)

DUPLICATE_RAISE = "raise"
DUPLICATE_IGNORE = "ignore"

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "duplicate_vertex_policy": {
            "type": "string",
            "enum": [DUPLICATE_RAISE, DUPLICATE_IGNORE],
        },
        "default_weight": {"type": "number"},
        "max_memory_mb": {
            "anyOf": [
                {"type": "number", "exclusiveMinimum": 0},
                {"type": "null"},
            ]
        },
    },
    "additionalProperties": False,
}


class GraphConfig:
    """
    Configuration for a graph instance.

    Attributes:
        duplicate_vertex_policy: ``"raise"`` to reject a duplicate vertex insert
            with DuplicateVertexError, ``"ignore"`` to keep the existing vertex
        default_weight: Weight assigned by insert_edge when none is given
        max_memory_mb: Memory budget for shortest-path searches, None for no limit
    """

    def __init__(
        self,
        duplicate_vertex_policy: str = DUPLICATE_RAISE,
        default_weight: float = 0.0,
        max_memory_mb: Optional[float] = None,
    ):
        self.duplicate_vertex_policy = duplicate_vertex_policy
        self.default_weight = default_weight
        self.max_memory_mb = max_memory_mb
        self.validate()

    def validate(self) -> None:
        """
        Validate the configuration against the schema.

        Raises:
            ConfigurationError: If any setting is missing its expected type or value
        """
        try:
            json_validate(instance=self.to_dict(), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        try:
            validate_weight(self.default_weight)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid graph configuration: default_weight {e}") from e

    @property
    def ignore_duplicates(self) -> bool:
        """Whether duplicate vertex inserts are silently ignored."""
        return self.duplicate_vertex_policy == DUPLICATE_IGNORE

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a plain mapping."""
        return {
            "duplicate_vertex_policy": self.duplicate_vertex_policy,
            "default_weight": self.default_weight,
            "max_memory_mb": self.max_memory_mb,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a mapping.

        Missing keys fall back to their defaults. The mapping is validated before
        any value is applied.

        Args:
            data: Mapping with any of the configuration keys

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If the mapping does not match the schema
        """
        try:
            json_validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        logger.debug("Loaded graph configuration: %s", dict(data))
        return cls(**data)

    def __repr__(self) -> str:
        return (
            f"GraphConfig(duplicate_vertex_policy={self.duplicate_vertex_policy!r}, "
            f"default_weight={self.default_weight!r}, max_memory_mb={self.max_memory_mb!r})"
        )
