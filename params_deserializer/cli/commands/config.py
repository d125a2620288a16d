"""Config commands for the pdz CLI."""

import typer
from rich.console import Console
from rich.table import Table

from params_deserializer.core.config import ConfigError, ConfigSchema, load_env_var, validate_all

app = typer.Typer(help="Configuration management")


@app.command()
def show() -> None:
    """Show every setting with its current value."""
    console = Console()

    table = Table(title="params_deserializer configuration")
    table.add_column("Variable", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Description")

    for name, spec in ConfigSchema.all_specs().items():
        try:
            value = str(load_env_var(spec))
        except ConfigError as e:
            value = f"[red]{e.message}[/red]"
        table.add_row(name, value, spec.description)

    console.print(table)


@app.command()
def validate() -> None:
    """Validate all environment variables."""
    console = Console()

    errors = validate_all()
    if errors:
        for error in errors:
            console.print(f"[red]❌ {error}[/red]")
        raise typer.Exit(1)

    console.print("[green]✅ Configuration is valid[/green]")
