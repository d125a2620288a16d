"""Deserialize command for the pdz CLI."""

import importlib
import json
import os
import sys
from pathlib import Path

import typer
from rich.console import Console

from params_deserializer.cli.presenters.schema import SchemaPresenter
from params_deserializer.core.deserializer import ParamsDeserializer
from params_deserializer.core.exceptions import ParamsDeserializerError


def load_deserializer(target: str) -> type[ParamsDeserializer]:
    """Import ``module:Class`` and check it is a deserializer class.

    Raises:
        typer.BadParameter: If the target cannot be imported or is not a
            ParamsDeserializer subclass.
    """
    module_name, _, class_name = target.partition(":")
    if not module_name or not class_name:
        raise typer.BadParameter(f"expected module:Class, got {target!r}")

    # Deserializers usually live in the project being worked on
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"cannot import {module_name!r}: {e}") from e

    deserializer_cls = getattr(module, class_name, None)
    if not (isinstance(deserializer_cls, type) and issubclass(deserializer_cls, ParamsDeserializer)):
        raise typer.BadParameter(f"{target!r} is not a ParamsDeserializer subclass")
    return deserializer_cls


def deserialize(
    target: str = typer.Argument(..., help="Deserializer class as module:Class"),
    input_file: Path = typer.Argument(
        None, help="JSON file with the params (reads stdin when omitted)"
    ),
    show_schema: bool = typer.Option(
        False, "--show-schema", help="Print the flattened schema before the result"
    ),
) -> None:
    """Run a deserializer over JSON params and print the result."""
    console = Console()
    deserializer_cls = load_deserializer(target)

    if show_schema:
        SchemaPresenter(console=console).present(deserializer_cls)

    try:
        raw = input_file.read_text(encoding="utf-8") if input_file else sys.stdin.read()
        params = json.loads(raw)
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]❌ Cannot read params: {e}[/red]")
        raise typer.Exit(1)

    try:
        result = deserializer_cls(params).deserialize()
    except ParamsDeserializerError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    console.print_json(json.dumps(result))
