"""Declarative schema for deserializer classes.

This module provides the declaration operations used in a deserializer's
``declarations`` sequence and the registry built from them:

- attribute / attributes: copy a key from the input, optionally renamed
- has_many: copy a list of mappings, optionally deserializing each item
- root: unwrap the input from (and re-wrap the output under) a root key
- format_keys: rename every output key to a case convention

Each deserializer class owns one SchemaRegistry. It holds only the class's own
declarations plus a reference to the parent registry; the inherited sequence
is flattened on first use and cached. Registries are never modified after the
class statement completes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from params_deserializer.core.exceptions import ConfigurationError
from params_deserializer.core.key_format import KeyFormat
from params_deserializer.core.root import RootConfig

if TYPE_CHECKING:
    from params_deserializer.core.deserializer import ParamsDeserializer

PresentIf = Callable[["ParamsDeserializer"], Any]


@dataclass(frozen=True, slots=True)
class AttributeSpec:
    """Specification for a single declared attribute.

    Attributes:
        name: Key read from the input mapping
        rename_to: Key written to the output (defaults to ``name``)
        present_if: Predicate called with the deserializer instance; when set it
            alone decides whether the attribute is emitted
        is_collection: True for ``has_many`` attributes
        each_deserializer: Deserializer class applied to every collection item
    """

    name: str
    rename_to: str | None = None
    present_if: PresentIf | None = None
    is_collection: bool = False
    each_deserializer: type[ParamsDeserializer] | None = None

    @property
    def output_key(self) -> str:
        return self.rename_to if self.rename_to is not None else self.name


@dataclass(frozen=True, slots=True)
class KeyFormatDeclaration:
    option: KeyFormat


Declaration = AttributeSpec | RootConfig | KeyFormatDeclaration


def _require_key(field: str, value: object) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(field, value, "must be a string")
    if not value:
        raise ConfigurationError(field, value, "must not be empty")
    return value


def attribute(
    name: str,
    rename_to: str | None = None,
    present_if: PresentIf | None = None,
) -> AttributeSpec:
    """Declare one attribute.

    Args:
        name: Input key to copy
        rename_to: Output key, if different from ``name``
        present_if: Callable taking the deserializer instance. When given, the
            attribute is emitted if and only if it returns a truthy value,
            whether or not ``name`` exists in the input.

    Raises:
        ConfigurationError: If any option is structurally invalid.
    """
    _require_key("name", name)
    if rename_to is not None:
        _require_key("rename_to", rename_to)
    if present_if is not None and not callable(present_if):
        raise ConfigurationError("present_if", present_if, "must be callable")
    return AttributeSpec(name=name, rename_to=rename_to, present_if=present_if)


def attributes(*names: str) -> tuple[AttributeSpec, ...]:
    """Declare several attributes with no options."""
    return tuple(attribute(name) for name in names)


def has_many(
    name: str,
    rename_to: str | None = None,
    each_deserializer: type[ParamsDeserializer] | None = None,
) -> AttributeSpec:
    """Declare a collection attribute.

    The input value must be a list of mappings. Each item is run through
    ``each_deserializer`` when one is given, otherwise copied unchanged.

    Raises:
        ConfigurationError: If ``each_deserializer`` is not a deserializer class.
    """
    from params_deserializer.core.deserializer import ParamsDeserializer

    _require_key("name", name)
    if rename_to is not None:
        _require_key("rename_to", rename_to)
    if each_deserializer is not None and not (
        isinstance(each_deserializer, type) and issubclass(each_deserializer, ParamsDeserializer)
    ):
        raise ConfigurationError(
            "each_deserializer", each_deserializer, "must be a ParamsDeserializer subclass"
        )
    return AttributeSpec(
        name=name,
        rename_to=rename_to,
        is_collection=True,
        each_deserializer=each_deserializer,
    )


def root(key: str, discard: bool = False) -> RootConfig:
    """Declare the root key the payload is nested under."""
    _require_key("root", key)
    if not isinstance(discard, bool):
        raise ConfigurationError("discard", discard, "must be a bool")
    return RootConfig(key=key, discard=discard)


def format_keys(option: KeyFormat | str) -> KeyFormatDeclaration:
    """Declare the case convention applied to every output key."""
    try:
        return KeyFormatDeclaration(KeyFormat.parse(option))
    except ValueError as e:
        valid = ", ".join(member.value for member in KeyFormat)
        raise ConfigurationError("format_keys", option, f"must be one of {valid}") from e


def _iter_declarations(declarations: Iterable[Any]) -> Iterator[Declaration]:
    for entry in declarations:
        if isinstance(entry, str):
            yield attribute(entry)
        elif isinstance(entry, (list, tuple)):
            yield from _iter_declarations(entry)
        elif isinstance(entry, (AttributeSpec, RootConfig, KeyFormatDeclaration)):
            yield entry
        else:
            raise ConfigurationError("declarations", entry, "unknown declaration")


class SchemaRegistry:
    """Declared attributes and options of one deserializer class.

    Responsibilities:
    - Hold the class's own attribute specs, root config and key format
    - Inherit everything else from the parent registry
    - Flatten the inherited attribute sequence once, on first use
    """

    def __init__(
        self,
        own_specs: Iterable[AttributeSpec] = (),
        parent: SchemaRegistry | None = None,
        root_config: RootConfig | None = None,
        key_format: KeyFormat | None = None,
    ) -> None:
        self._own_specs = tuple(own_specs)
        self._parent = parent
        self._root_config = root_config
        self._key_format = key_format
        self._flattened: tuple[AttributeSpec, ...] | None = None

    @classmethod
    def from_declarations(
        cls, declarations: Any, parent: SchemaRegistry | None = None
    ) -> SchemaRegistry:
        """Build a registry from a ``declarations`` sequence.

        Plain strings are shorthand for ``attribute(name)`` and nested
        sequences are flattened. A later root or format declaration replaces
        an earlier one.

        Raises:
            ConfigurationError: If ``declarations`` is not a sequence or holds
                something other than declarations.
        """
        if isinstance(declarations, (str, bytes)) or not isinstance(declarations, (list, tuple)):
            raise ConfigurationError("declarations", declarations, "must be a list or tuple")

        specs: list[AttributeSpec] = []
        root_config: RootConfig | None = None
        key_format: KeyFormat | None = None
        for declaration in _iter_declarations(declarations):
            if isinstance(declaration, AttributeSpec):
                specs.append(declaration)
            elif isinstance(declaration, RootConfig):
                root_config = declaration
            else:
                key_format = declaration.option

        return cls(specs, parent=parent, root_config=root_config, key_format=key_format)

    @property
    def own_specs(self) -> tuple[AttributeSpec, ...]:
        return self._own_specs

    @property
    def parent(self) -> SchemaRegistry | None:
        return self._parent

    @property
    def specs(self) -> tuple[AttributeSpec, ...]:
        """Parent specs followed by own specs.

        A later spec with the same input name, or the same output key,
        replaces the earlier one in its original position.
        """
        if self._flattened is None:
            inherited = self._parent.specs if self._parent is not None else ()
            by_name: dict[str, AttributeSpec] = {}
            for spec in (*inherited, *self._own_specs):
                by_name[spec.name] = spec
            by_output_key: dict[str, AttributeSpec] = {}
            for spec in by_name.values():
                by_output_key[spec.output_key] = spec
            self._flattened = tuple(by_output_key.values())
        return self._flattened

    @property
    def root_config(self) -> RootConfig | None:
        if self._root_config is not None:
            return self._root_config
        return self._parent.root_config if self._parent is not None else None

    @property
    def key_format(self) -> KeyFormat:
        if self._key_format is not None:
            return self._key_format
        return self._parent.key_format if self._parent is not None else KeyFormat.NONE
