"""Scan CLI command entrypoint."""

import time
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from netprobe.errors import PluginError
from netprobe.scanner.models import validate_port
from netprobe.utils.logging import setup_logging

from .deps import cli_module
from .scan_display import (
    render_open_ports,
    render_plugin_result,
    render_security_check,
    render_statistics,
)
from .scan_helpers import normalize_mode, resolve_settings
from .shared import app, console


@app.command()
def scan(
    host: str = typer.Option("localhost", "--host", "-H", help="Hostname or IP address to scan"),
    ports: str = typer.Option("1-100", "--ports", "-p", help="Ports, e.g. 80,443 or 1-1000"),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="Connect timeout in seconds"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", help="Number of concurrent workers"
    ),
    mode: str = typer.Option(
        "normal", "--mode", "-m", help="Scan mode: normal or security (runs plugins)"
    ),
    report: Optional[Path] = typer.Option(
        None, "--report", "-r", help="Write an HTML report to this file"
    ),
    plugin: Optional[str] = typer.Option(
        None, "--plugin", "-P", help="Run a single plugin instead of a port scan"
    ),
    plugin_port: Optional[int] = typer.Option(
        None, "--plugin-port", help="Port for --plugin (defaults to the plugin's usual port)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also log to this file"),
) -> None:
    """Scan a host's TCP ports, optionally running security plugins."""
    cli = cli_module()
    try:
        settings = resolve_settings(cli.load_scan_settings(), timeout, workers, verbose)
        scan_mode = normalize_mode(mode)
    except ValueError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1) from None
    setup_logging(settings.verbose, log_file)

    registry = cli.get_default_registry()
    target = cli.normalize_host(host)

    if plugin:
        run_single_plugin(cli, registry, target, plugin, plugin_port, settings.timeout)
        return

    port_list = cli.parse_ports(ports)
    if not port_list:
        console.print("[red]Error: no valid ports to scan[/red]")
        raise typer.Exit(1)

    console.print(f"[bold cyan]Scanning[/] [bold]{target}[/] ({len(port_list)} ports)")
    console.print(
        f"[dim]mode={scan_mode} timeout={settings.timeout}s workers={settings.workers}[/]\n"
    )

    scanner = cli.TCPScanner(
        timeout=settings.timeout,
        max_workers=settings.workers,
        banner_timeout=settings.banner_timeout,
    )
    started_at = datetime.now()
    started = time.perf_counter()
    results = scanner.scan_ports(target, port_list)
    elapsed = time.perf_counter() - started
    finished_at = datetime.now()

    render_open_ports(console, results)

    checks = None
    if scan_mode == "security":
        console.print("\n[bold]Security checks:[/bold]")
        checks = cli.run_security_checks(
            registry,
            target,
            results,
            settings.timeout,
            progress=lambda check: render_security_check(console, check),
        )
        if not checks:
            console.print("[dim]No open services matched a plugin[/]")

    render_statistics(console, results, elapsed)

    if report is not None:
        path = cli.write_html_report(report, target, started_at, finished_at, results, checks)
        console.print(f"\n[green]✓[/] HTML report written to {path}")

    console.print(f"\n[green]✓[/] Scan complete in {elapsed:.2f}s")


def run_single_plugin(
    cli,
    registry,
    target: str,
    name: str,
    port: int | None,
    timeout: float,
) -> None:
    """Run one named plugin against the target and print its outcome."""
    selected = registry.get(name)
    if selected is None:
        available = ", ".join(registry.list()) or "none"
        console.print(f"[red]Error: unknown plugin {name}[/red] (available: {available})")
        console.print("[dim]Run 'netprobe plugins' to list plugins.[/dim]")
        raise typer.Exit(1)

    effective_port = port if port is not None else cli.default_port_for_plugin(name)
    try:
        validate_port(effective_port)
    except ValueError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1) from None

    console.print(f"[cyan]●[/] Running [bold]{name}[/] against {target}:{effective_port}")
    try:
        result = selected.scan(target, effective_port, timeout)
    except PluginError as exc:
        console.print(f"[red]✗ Check failed: {escape(exc.message)}[/red]")
        raise typer.Exit(1) from None

    render_plugin_result(console, result)
