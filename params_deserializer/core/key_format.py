"""Key case conversion.

Pure string functions used for the final key rename pass of a deserializer.
Case boundaries are detected on ASCII letters only; every other character is
carried through unchanged, so the functions are total over any text.
"""

import re
from collections.abc import Mapping
from enum import Enum
from string import ascii_letters, ascii_lowercase, ascii_uppercase, digits
from typing import Any

_ACRONYM_BOUNDARY_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")

_SEPARATORS = frozenset("_-")
# to_snake_case splits lowercase/digit + upper, and an uppercase run before
# upper + lower. A separator is only dropped where one of those puts it back.
_MERGEABLE_AFTER = frozenset(ascii_lowercase + digits)


class KeyFormat(str, Enum):
    """Key format options for ``format_keys``."""

    NONE = "none"
    SNAKE_CASE = "snake_case"
    PASCAL_CASE = "pascal_case"
    LOWER_CAMEL = "lower_camel"

    @classmethod
    def parse(cls, value: "KeyFormat | str | None") -> "KeyFormat":
        """Resolve an option name to a KeyFormat.

        ``None`` means NONE. ``camel_case`` is accepted as an alias of
        PASCAL_CASE.

        Raises:
            ValueError: If the option is not a known format.
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in _ALIASES:
                return _ALIASES[normalized]
            return cls(normalized)
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")


_ALIASES = {
    "camel_case": KeyFormat.PASCAL_CASE,
    "camelcase": KeyFormat.PASCAL_CASE,
    "pascalcase": KeyFormat.PASCAL_CASE,
    "lower_camel_case": KeyFormat.LOWER_CAMEL,
    "lowercamel": KeyFormat.LOWER_CAMEL,
}


def to_snake_case(key: str) -> str:
    """Convert a key to snake_case.

    >>> to_snake_case("camelCase")
    'camel_case'
    >>> to_snake_case("HTMLParser")
    'html_parser'
    """
    key = _ACRONYM_BOUNDARY_RE.sub(r"\1_\2", key)
    key = _WORD_BOUNDARY_RE.sub(r"\1_\2", key)
    return key.replace("-", "_").lower()


def _can_merge(previous: str, following: str) -> bool:
    if previous in _MERGEABLE_AFTER:
        return True
    return previous in ascii_uppercase and following != "" and following in ascii_lowercase


def to_pascal_case(key: str) -> str:
    """Convert a key to PascalCase.

    Separators are dropped wherever ``to_snake_case`` can restore them, so
    ``a_b_c`` keeps one: ``A_bC``.

    >>> to_pascal_case("snake_case")
    'SnakeCase'
    >>> to_pascal_case("x_coordinate")
    'XCoordinate'
    >>> to_pascal_case("camelCase")
    'CamelCase'
    """
    chars: list[str] = []
    for index, char in enumerate(key):
        if index == 0:
            chars.append(char.upper() if char in ascii_letters else char)
            continue

        if (
            char in ascii_letters
            and len(chars) >= 2
            and chars[-1] in _SEPARATORS
            and _can_merge(chars[-2], key[index + 1 : index + 2])
        ):
            chars[-1] = char.upper()
        else:
            chars.append(char)
    return "".join(chars)


def to_lower_camel_case(key: str) -> str:
    """Convert a key to lowerCamelCase: PascalCase with a lowercase first letter.

    >>> to_lower_camel_case("snake_case")
    'snakeCase'
    """
    pascal = to_pascal_case(key)
    if pascal and pascal[0] in ascii_letters:
        return pascal[0].lower() + pascal[1:]
    return pascal


_CONVERTERS = {
    KeyFormat.SNAKE_CASE: to_snake_case,
    KeyFormat.PASCAL_CASE: to_pascal_case,
    KeyFormat.LOWER_CAMEL: to_lower_camel_case,
}


def format_key(key: Any, option: KeyFormat) -> Any:
    """Apply a key format to a single key. Non-string keys are returned as is."""
    if option is KeyFormat.NONE or not isinstance(key, str):
        return key
    return _CONVERTERS[option](key)


def format_mapping_keys(mapping: Mapping[Any, Any], option: KeyFormat) -> dict[Any, Any]:
    """Return a copy of ``mapping`` with its keys formatted at every level.

    Nested mappings are copied with their keys formatted too. Lists and other
    values are returned as they are, so collection items keep the format their
    own deserializer gave them.
    """
    if option is KeyFormat.NONE:
        return dict(mapping)
    return {
        format_key(key, option): (
            format_mapping_keys(value, option) if isinstance(value, Mapping) else value
        )
        for key, value in mapping.items()
    }
