"""Root key handling.

Input is unwrapped from the root key before attributes are resolved; output
is wrapped back under it unless the root declaration asks to discard it.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from params_deserializer.core.exceptions import TypeMismatch
from params_deserializer.core.key_format import KeyFormat, format_key

_EMPTY: Mapping[Any, Any] = {}


@dataclass(frozen=True, slots=True)
class RootConfig:
    """Root key declared on a deserializer.

    Attributes:
        key: Key the payload is nested under in the input
        discard: When True the output is not re-wrapped under ``key``
    """

    key: str
    discard: bool = False


def unwrap(params: Mapping[Any, Any], config: RootConfig | None) -> Mapping[Any, Any]:
    """Return the mapping attributes are read from.

    A missing root key, or one mapped to None, yields an empty mapping.

    Raises:
        TypeMismatch: If the root value is present but not a mapping.
    """
    if config is None:
        return params

    nested = params.get(config.key)
    if nested is None:
        return _EMPTY
    if not isinstance(nested, Mapping):
        raise TypeMismatch(config.key, "a mapping", nested)
    return nested


def wrap(
    result: dict[Any, Any],
    config: RootConfig | None,
    key_format: KeyFormat = KeyFormat.NONE,
) -> dict[Any, Any]:
    """Nest the deserialized mapping under the root key when it is kept.

    The root key itself goes through the same key format as the attributes.
    """
    if config is None or config.discard:
        return result
    return {format_key(config.key, key_format): result}
