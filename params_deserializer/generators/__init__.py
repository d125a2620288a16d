"""Code generators."""

from params_deserializer.generators.scaffold import (
    DeserializerScaffold,
    generate_deserializer,
    render_deserializer,
)

__all__ = ["DeserializerScaffold", "generate_deserializer", "render_deserializer"]
