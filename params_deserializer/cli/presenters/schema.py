"""Presenter for deserializer schema display in CLI."""

from rich.console import Console
from rich.table import Table

from params_deserializer.core.deserializer import ParamsDeserializer
from params_deserializer.core.key_format import KeyFormat


class SchemaPresenter:
    """Renders the flattened schema of a deserializer class.

    Contains no deserialization logic - only presentation.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def present(self, deserializer_cls: type[ParamsDeserializer]) -> None:
        """Print one row per attribute, followed by root and key format options."""
        table = Table(title=f"{deserializer_cls.__name__} schema")
        table.add_column("Input key", style="cyan")
        table.add_column("Output key", style="green")
        table.add_column("Kind", style="yellow")
        table.add_column("Options")

        for spec in deserializer_cls.attribute_specs():
            options = []
            if spec.present_if is not None:
                options.append("present_if")
            if spec.each_deserializer is not None:
                options.append(f"each: {spec.each_deserializer.__name__}")
            table.add_row(
                spec.name,
                spec.output_key,
                "has_many" if spec.is_collection else "attribute",
                ", ".join(options),
            )

        self.console.print(table)

        root_config = deserializer_cls.root_config()
        if root_config is not None:
            mode = "discarded" if root_config.discard else "kept"
            self.console.print(f"Root key: [cyan]{root_config.key}[/cyan] ({mode})")

        key_format = deserializer_cls.key_format()
        if key_format is not KeyFormat.NONE:
            self.console.print(f"Key format: [cyan]{key_format.value}[/cyan]")
