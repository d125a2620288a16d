"""Generate command for the pdz CLI."""

from pathlib import Path

import typer
from rich.console import Console

from params_deserializer.core.config import Settings
from params_deserializer.core.exceptions import ConfigurationError
from params_deserializer.generators.scaffold import generate_deserializer


def generate(
    resource: str = typer.Argument(..., help="Resource name, e.g. user or LineItem"),
    directory: Path = typer.Option(
        None, "--dir", "-d", help="Output directory (defaults to PD_DESERIALIZERS_DIR)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
    skip: bool = typer.Option(
        False, "--skip", help="Do nothing; lets resource generators turn the hook off"
    ),
) -> None:
    """Scaffold an empty deserializer for a resource."""
    console = Console()

    if skip:
        console.print(f"[yellow]Skipped deserializer for {resource}[/yellow]")
        return

    settings = Settings.load()
    target_dir = directory or settings.deserializers_dir

    try:
        path = generate_deserializer(
            resource, target_dir, base_import=settings.base_import, force=force
        )
    except (ConfigurationError, FileExistsError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ create[/green] {path}")
