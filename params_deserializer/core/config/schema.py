"""Declarative schema for environment variable configuration.

This module provides a single source of truth for all environment variables,
including automatic type coercion, validation, and documentation.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL")
        default: Default value if env var not set
        type_hint: Type for validation (int, str, float, bool)
        description: Human-readable description for docs
        validator: Optional custom validation function
        coerce: Optional function to convert string to target type
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None
    coerce: Callable[[str], Any] | None = None


class ConfigSchema:
    """Registry of all configuration environment variables."""

    LOG_LEVEL = EnvVarSpec(
        name="LOG_LEVEL",
        default="INFO",
        type_hint=str,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        validator=lambda x: x.split()[0].upper() in VALID_LOG_LEVELS,
    )

    PD_LOG_DESERIALIZATION = EnvVarSpec(
        name="PD_LOG_DESERIALIZATION",
        default=False,
        type_hint=bool,
        description="Log every request body deserialized by the web integration at INFO",
    )

    PD_DESERIALIZERS_DIR = EnvVarSpec(
        name="PD_DESERIALIZERS_DIR",
        default="deserializers",
        type_hint=str,
        description="Directory the generator writes new deserializer modules to",
        validator=lambda x: bool(x.strip()),
    )

    PD_BASE_IMPORT = EnvVarSpec(
        name="PD_BASE_IMPORT",
        default="params_deserializer",
        type_hint=str,
        description="Module generated deserializers import ParamsDeserializer from",
        validator=lambda x: all(part.isidentifier() for part in x.split(".")),
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Return every EnvVarSpec declared on the schema, keyed by name."""
        return {
            value.name: value
            for value in vars(cls).values()
            if isinstance(value, EnvVarSpec)
        }
