"""Match open ports to plugins by service name and run them."""

import logging
from collections.abc import Callable, Iterable

from netprobe.errors import PluginError
from netprobe.scanner.models import ScanResult

from .models import SecurityCheck
from .registry import PluginRegistry

logger = logging.getLogger(__name__)

SERVICE_PLUGINS: dict[str, str] = {
    "ftp": "ftp-weakpass",
    "http": "http-security",
    "https": "http-security",
    "http-proxy": "http-security",
}

PLUGIN_DEFAULT_PORTS: dict[str, int] = {
    "ftp-weakpass": 21,
    "http-security": 80,
}


def plugin_for_service(service: str) -> str | None:
    """Return the plugin name that handles a service, if any."""
    return SERVICE_PLUGINS.get(service.lower())


def default_port_for_plugin(name: str) -> int:
    """Port a plugin targets when run on its own."""
    return PLUGIN_DEFAULT_PORTS.get(name, 21)


def run_security_checks(
    registry: PluginRegistry,
    host: str,
    results: Iterable[ScanResult],
    timeout: float,
    progress: Callable[[SecurityCheck], None] | None = None,
) -> list[SecurityCheck]:
    """Run the matching plugin against every open port, ordered by port."""
    checks: list[SecurityCheck] = []
    for result in sorted(results, key=lambda item: item.port):
        if not result.is_open:
            continue
        plugin_name = plugin_for_service(result.service)
        if plugin_name is None:
            continue
        plugin = registry.get(plugin_name)
        if plugin is None:
            logger.warning("No plugin registered for %s (port %d)", plugin_name, result.port)
            continue

        logger.info("Running %s against %s:%d", plugin_name, host, result.port)
        try:
            outcome = plugin.scan(host, result.port, timeout)
            check = SecurityCheck(
                port=result.port, service=result.service, plugin=plugin_name, result=outcome
            )
        except PluginError as exc:
            logger.info("%s failed on port %d: %s", plugin_name, result.port, exc.message)
            check = SecurityCheck(
                port=result.port, service=result.service, plugin=plugin_name, error=exc.message
            )
        checks.append(check)
        if progress:
            progress(check)
    return checks
