"""params_deserializer

Declarative transformation of request params: copy, rename, filter and
restructure an incoming mapping according to a schema declared on a class.
"""

from dotenv import load_dotenv

from params_deserializer.core.deserializer import ParamsDeserializer
from params_deserializer.core.exceptions import (
    ConfigurationError,
    ParamsDeserializerError,
    TypeMismatch,
)
from params_deserializer.core.key_format import (
    KeyFormat,
    to_lower_camel_case,
    to_pascal_case,
    to_snake_case,
)
from params_deserializer.core.root import RootConfig
from params_deserializer.core.schema import (
    AttributeSpec,
    SchemaRegistry,
    attribute,
    attributes,
    format_keys,
    has_many,
    root,
)

# Load environment variables from .env file
load_dotenv()

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("params-deserializer")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "AttributeSpec",
    "ConfigurationError",
    "KeyFormat",
    "ParamsDeserializer",
    "ParamsDeserializerError",
    "RootConfig",
    "SchemaRegistry",
    "TypeMismatch",
    "attribute",
    "attributes",
    "format_keys",
    "has_many",
    "root",
    "to_lower_camel_case",
    "to_pascal_case",
    "to_snake_case",
]
