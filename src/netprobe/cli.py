"""netprobe CLI - concurrent TCP port scanner."""

from netprobe.config import load_scan_settings
from netprobe.plugins import (
    default_port_for_plugin,
    get_default_registry,
    run_security_checks,
)
from netprobe.report import write_html_report
from netprobe.scanner import TCPScanner, normalize_host, parse_ports

from .cli_commands import plugins_command as _plugins_command  # noqa: F401
from .cli_commands import scan_command as _scan_command  # noqa: F401
from .cli_commands.shared import app, console

__all__ = [
    "TCPScanner",
    "app",
    "console",
    "default_port_for_plugin",
    "get_default_registry",
    "load_scan_settings",
    "main",
    "normalize_host",
    "parse_ports",
    "run_security_checks",
    "version",
    "write_html_report",
]


@app.command()
def version() -> None:
    """Show the installed netprobe version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as pkg_version

    try:
        current_version = pkg_version("netprobe")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"netprobe {current_version}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
