"""Scaffold a new, empty deserializer module for a resource.

Given a resource name such as "line_item" or "LineItem", produces
``line_item_deserializer.py`` defining ``LineItemDeserializer``.
"""

import keyword
import logging
from dataclasses import dataclass
from pathlib import Path

from params_deserializer.core.exceptions import ConfigurationError
from params_deserializer.core.key_format import to_snake_case

logger = logging.getLogger(__name__)

TEMPLATE = '''"""Deserializer for {resource} params."""

from {base_import} import ParamsDeserializer


class {class_name}(ParamsDeserializer):
    declarations = ()
'''


@dataclass(frozen=True, slots=True)
class DeserializerScaffold:
    """Names derived from a resource name.

    Attributes:
        resource: Normalized snake_case resource name
        class_name: Name of the generated class
        file_name: Name of the generated module file
    """

    resource: str
    class_name: str
    file_name: str

    @classmethod
    def for_resource(cls, resource: str) -> "DeserializerScaffold":
        """Derive class and file names.

        Raises:
            ConfigurationError: If the name cannot form a Python identifier.
        """
        snake = to_snake_case("_".join(resource.split())).strip("_")
        if not snake.isidentifier() or keyword.iskeyword(snake):
            raise ConfigurationError("resource", resource, "must form a Python identifier")

        words = [word for word in snake.split("_") if word]
        pascal = "".join(word[:1].upper() + word[1:] for word in words)
        return cls(
            resource=snake,
            class_name=f"{pascal}Deserializer",
            file_name=f"{snake}_deserializer.py",
        )


def render_deserializer(resource: str, base_import: str = "params_deserializer") -> str:
    """Return the source of an empty deserializer subclass for ``resource``."""
    scaffold = DeserializerScaffold.for_resource(resource)
    return TEMPLATE.format(
        resource=scaffold.resource,
        base_import=base_import,
        class_name=scaffold.class_name,
    )


def generate_deserializer(
    resource: str,
    directory: Path,
    base_import: str = "params_deserializer",
    force: bool = False,
) -> Path:
    """Write the deserializer module for ``resource`` into ``directory``.

    Returns:
        Path of the written file.

    Raises:
        FileExistsError: If the file exists and ``force`` is False.
        ConfigurationError: If the resource name is not usable.
    """
    scaffold = DeserializerScaffold.for_resource(resource)
    path = Path(directory) / scaffold.file_name
    if path.exists() and not force:
        raise FileExistsError(f"{path} already exists (use force to overwrite)")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_deserializer(resource, base_import=base_import), encoding="utf-8")
    logger.info(f"Created {scaffold.class_name} in {path}")
    return path
