"""
Exception hierarchy for params_deserializer.

All exceptions inherit from ParamsDeserializerError, allowing callers to
catch every library-specific error with a single except clause.

Exceptions raised by user-defined accessors or ``present_if`` predicates are
not wrapped: they reach the caller of ``deserialize()`` unchanged.

Example:
    >>> try:
    ...     UserDeserializer(payload).deserialize()
    ... except ParamsDeserializerError as e:
    ...     print(f"Deserialization failed: {e}")
"""

from __future__ import annotations


class ParamsDeserializerError(Exception):
    """Base exception for all params_deserializer errors."""

    pass


class ConfigurationError(ParamsDeserializerError):
    """Raised at class definition when a declaration is structurally invalid.

    This is a programming error in the deserializer class, never a runtime
    condition of the input data.

    Attributes:
        field: Name of the declaration option that is invalid
        value: The invalid value that was provided
        message: Human-readable explanation
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        self.field = field
        self.value = value
        self.message = message
        super().__init__(f"Invalid {field!r}: {message} (got {value!r})")

    def __repr__(self) -> str:
        return (
            f"ConfigurationError(field={self.field!r}, value={self.value!r}, "
            f"message={self.message!r})"
        )


class TypeMismatch(ParamsDeserializerError, TypeError):
    """Raised during deserialization when input has the wrong shape.

    Used for a root value or collection source that is not the container
    the declaration requires. Values are never coerced.

    Attributes:
        attribute: The input key (or root key) being read
        expected: Description of the expected shape
        value: The offending value
    """

    def __init__(self, attribute: str, expected: str, value: object) -> None:
        self.attribute = attribute
        self.expected = expected
        self.value = value
        super().__init__(
            f"{attribute!r} must be {expected}, got {type(value).__name__}: {value!r}"
        )
