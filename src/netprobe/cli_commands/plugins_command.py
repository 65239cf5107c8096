"""Plugin listing command."""

from rich.table import Table

from .deps import cli_module
from .shared import app, console


@app.command()
def plugins() -> None:
    """List available vulnerability plugins."""
    cli = cli_module()
    registry = cli.get_default_registry()

    table = Table(title="Available plugins")
    table.add_column("Name", style="bold cyan")
    table.add_column("Description")
    for plugin in registry.plugins():
        table.add_row(plugin.name, plugin.description)
    console.print(table)
