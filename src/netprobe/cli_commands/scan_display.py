"""Console rendering for scan and plugin results."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from netprobe.plugins.models import PluginResult, SecurityCheck
from netprobe.scanner.models import IPV6, ScanResult

from .scan_helpers import truncate

SEVERITY_STYLES = {
    "low": "cyan",
    "medium": "yellow",
    "high": "red",
    "critical": "bold red",
}


def render_open_ports(console: Console, results: list[ScanResult]) -> None:
    """Print a table of open ports ordered by port number."""
    open_results = sorted((r for r in results if r.is_open), key=lambda r: r.port)
    if not open_results:
        console.print("[yellow]○[/] No open ports found")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Port", justify="right", style="bold")
    table.add_column("State", style="green")
    table.add_column("Service", style="cyan")
    table.add_column("IP", style="magenta")
    table.add_column("Banner", style="dim")
    for result in open_results:
        table.add_row(
            str(result.port),
            result.state,
            escape(result.service),
            result.ip_version,
            escape(truncate(result.banner)),
        )
    console.print(table)


def render_statistics(console: Console, results: list[ScanResult], elapsed: float) -> None:
    """Print total, open, closed and IPv6 port counts."""
    open_count = sum(1 for r in results if r.is_open)
    ipv6_count = sum(1 for r in results if r.is_open and r.ip_version == IPV6)
    console.print("\n[bold]Statistics:[/bold]")
    console.print(f"  Total ports:  {len(results)}")
    console.print(f"  Open ports:   [green]{open_count}[/]")
    console.print(f"  Closed ports: {len(results) - open_count}")
    if ipv6_count:
        console.print(f"  IPv6 ports:   [magenta]{ipv6_count}[/]")
    console.print(f"  Elapsed:      {elapsed:.2f}s")


def render_plugin_result(console: Console, result: PluginResult, indent: str = "  ") -> None:
    """Print one plugin outcome."""
    if result.vulnerable:
        style = SEVERITY_STYLES.get(result.severity or "", "yellow")
        console.print(f"{indent}[red]● Vulnerable[/] [{style}]({result.severity})[/]")
        console.print(f"{indent}  {escape(result.details)}")
    else:
        console.print(f"{indent}[green]✓ Not vulnerable[/] [dim]{escape(result.details)}[/]")


def render_security_check(console: Console, check: SecurityCheck) -> None:
    """Print the outcome of a plugin dispatched during a security scan."""
    service = escape(check.service)
    console.print(f"[cyan]●[/] {check.plugin} on port [bold]{check.port}[/] ({service})")
    if check.error is not None:
        console.print(f"    [yellow]! Check failed:[/] {escape(check.error)}")
    elif check.result is not None:
        render_plugin_result(console, check.result, indent="    ")
