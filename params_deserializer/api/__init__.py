"""FastAPI integration."""

from params_deserializer.api.dependencies import DeserializedParams
from params_deserializer.api.errors import ErrorResponseBuilder, register_exception_handlers

__all__ = ["DeserializedParams", "ErrorResponseBuilder", "register_exception_handlers"]
