"""Shared CLI app objects."""

import typer
from rich.console import Console

app = typer.Typer(
    name="netprobe",
    help="Concurrent TCP port scanner with service detection and security plugins",
    no_args_is_help=True,
)
console = Console()
