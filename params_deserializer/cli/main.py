"""Main CLI entry point for params_deserializer."""

import os

import typer
from rich.console import Console

from params_deserializer.cli.commands import config
from params_deserializer.cli.commands.deserialize import deserialize
from params_deserializer.cli.commands.generate import generate
from params_deserializer.core.logging import configure_root_logging

app = typer.Typer(
    name="pdz",
    help="params_deserializer CLI - scaffold and run params deserializers",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(config.app, name="config", help="Configuration management")
app.command()(generate)
app.command()(deserialize)


@app.command()
def version() -> None:
    """Show version information."""
    from params_deserializer import __version__

    console = Console()
    console.print(f"[bold cyan]pdz[/bold cyan] version [green]{__version__}[/green]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """params_deserializer CLI."""
    # Invalid LOG_LEVEL values fall back to INFO here; "pdz config validate" reports them
    configure_root_logging("DEBUG" if verbose else os.environ.get("LOG_LEVEL"))


if __name__ == "__main__":
    app()
