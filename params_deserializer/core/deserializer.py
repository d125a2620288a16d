"""Base class for declarative params deserializers.

A deserializer is a subclass of ParamsDeserializer that lists its
declarations in a ``declarations`` class attribute:

    class UserDeserializer(ParamsDeserializer):
        declarations = (
            root("user", discard=True),
            attributes("id", "email"),
            attribute("name", rename_to="full_name"),
            has_many("addresses", each_deserializer=AddressDeserializer),
            format_keys("lower_camel"),
        )

        def email(self):
            return self.params["email"].lower()

Declarations are turned into a SchemaRegistry when the class statement
completes. Every plain attribute gets a default accessor method returning the
input value; a method of the same name written by the class author always
takes precedence over it.
"""

import keyword
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, ClassVar

from params_deserializer.core import root as root_key
from params_deserializer.core.exceptions import TypeMismatch
from params_deserializer.core.key_format import KeyFormat, format_mapping_keys
from params_deserializer.core.root import RootConfig
from params_deserializer.core.schema import AttributeSpec, SchemaRegistry

logger = logging.getLogger(__name__)


def _default_accessor(name: str) -> Any:
    def accessor(self: "ParamsDeserializer") -> Any:
        return self.params.get(name)

    accessor.__name__ = name
    accessor.__doc__ = f"Return the {name!r} input value."
    return accessor


class ParamsDeserializer:
    """Transforms one params mapping into another according to declarations.

    Instances are cheap and single-use: bind an input mapping, call
    ``deserialize()``. The input is never mutated and the class registry is
    read-only, so concurrent use from several threads is safe.
    """

    declarations: ClassVar[Sequence[Any]] = ()
    _registry: ClassVar[SchemaRegistry] = SchemaRegistry()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        parent = next(
            base.__dict__["_registry"]
            for base in cls.__mro__[1:]
            if "_registry" in base.__dict__
        )
        registry = SchemaRegistry.from_declarations(
            cls.__dict__.get("declarations", ()), parent=parent
        )
        cls._registry = registry

        for spec in registry.own_specs:
            if spec.is_collection or not _can_be_method(spec.name):
                continue
            if _defines(cls, spec.name):
                continue
            setattr(cls, spec.name, _default_accessor(spec.name))

        logger.debug(
            f"Registered deserializer {cls.__qualname__} with {len(registry.own_specs)} own attributes"
        )

    def __init__(self, params: Mapping[Any, Any]) -> None:
        if not isinstance(params, Mapping):
            raise TypeMismatch("params", "a mapping", params)
        self._raw_params = params

    def __repr__(self) -> str:
        return f"{type(self).__name__}(params={dict(self._raw_params)!r})"

    @property
    def raw_params(self) -> Mapping[Any, Any]:
        """The mapping this instance was constructed with."""
        return self._raw_params

    @property
    def params(self) -> Mapping[Any, Any]:
        """Read-only view of the input, unwrapped from the root key if declared."""
        return MappingProxyType(root_key.unwrap(self._raw_params, self.root_config()))

    @classmethod
    def attribute_specs(cls) -> tuple[AttributeSpec, ...]:
        return cls._registry.specs

    @classmethod
    def root_config(cls) -> RootConfig | None:
        return cls._registry.root_config

    @classmethod
    def key_format(cls) -> KeyFormat:
        return cls._registry.key_format

    @classmethod
    def deserialize_params(cls, params: Mapping[Any, Any]) -> dict[Any, Any]:
        """Shorthand for ``cls(params).deserialize()``."""
        return cls(params).deserialize()

    def deserialize(self) -> dict[Any, Any]:
        """Build the output mapping.

        Returns:
            A new dict. Calling this again returns an equal dict.

        Raises:
            TypeMismatch: If the root value or a collection has the wrong shape.
            Exception: Anything raised by an accessor or ``present_if``
                predicate, unchanged.
        """
        registry = type(self)._registry
        name = type(self).__name__
        logger.debug(f"Deserializing with {name}: {len(registry.specs)} attributes")

        try:
            params = self.params
            result: dict[Any, Any] = {}
            for spec in registry.specs:
                if not self._is_present(spec, params):
                    continue
                if spec.is_collection:
                    result[spec.output_key] = self._deserialize_collection(spec, params)
                else:
                    result[spec.output_key] = self._read_attribute(spec, params)
        except Exception as e:
            logger.debug(f"Deserializer {name} failed: {e}")
            raise

        key_format = registry.key_format
        result = format_mapping_keys(result, key_format)
        return root_key.wrap(result, registry.root_config, key_format)

    def _is_present(self, spec: AttributeSpec, params: Mapping[Any, Any]) -> bool:
        if spec.present_if is not None:
            return bool(spec.present_if(self))
        return spec.name in params

    def _read_attribute(self, spec: AttributeSpec, params: Mapping[Any, Any]) -> Any:
        if _can_be_method(spec.name) and _defines(type(self), spec.name):
            member = getattr(self, spec.name)
            return member() if callable(member) else member
        return params.get(spec.name)

    def _deserialize_collection(
        self, spec: AttributeSpec, params: Mapping[Any, Any]
    ) -> list[Any]:
        items = params.get(spec.name)
        if items is None:
            return []
        if isinstance(items, (str, bytes, bytearray, Mapping)) or not isinstance(items, Sequence):
            raise TypeMismatch(spec.name, "a list of mappings", items)

        deserialized: list[Any] = []
        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                raise TypeMismatch(f"{spec.name}[{index}]", "a mapping", item)
            if spec.each_deserializer is None:
                deserialized.append(item)
            else:
                deserialized.append(spec.each_deserializer(item).deserialize())
        return deserialized


_RESERVED_NAMES = frozenset(dir(ParamsDeserializer))


def _can_be_method(name: str) -> bool:
    """Whether an input key can be served by an accessor method."""
    return name.isidentifier() and not keyword.iskeyword(name) and name not in _RESERVED_NAMES


def _defines(cls: type, name: str) -> bool:
    return any(name in klass.__dict__ for klass in cls.__mro__)
