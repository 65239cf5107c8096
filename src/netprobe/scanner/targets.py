"""Port specification parsing and host normalization."""

import logging

from .models import PORT_MAX, PORT_MIN

logger = logging.getLogger(__name__)


def normalize_host(host: str) -> str:
    """Strip whitespace and IPv6 brackets from a host string."""
    host = host.strip()
    if host.startswith("[") and host.endswith("]"):
        return host[1:-1]
    return host


def _parse_port(value: str) -> int | None:
    value = value.strip()
    if not value.isdigit():
        return None
    port = int(value)
    if PORT_MIN <= port <= PORT_MAX:
        return port
    return None


def parse_ports(spec: str) -> list[int]:
    """Parse "80,443,1000-1010" into a sorted list of unique ports.

    Pieces that are malformed or fall outside 1-65535 are skipped.
    """
    ports: set[int] = set()
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            bounds = part.split("-")
            if len(bounds) != 2:
                logger.warning("Ignoring malformed port range: %s", part)
                continue
            low, high = _parse_port(bounds[0]), _parse_port(bounds[1])
            if low is None or high is None or low > high:
                logger.warning("Ignoring invalid port range: %s", part)
                continue
            ports.update(range(low, high + 1))
        else:
            port = _parse_port(part)
            if port is None:
                logger.warning("Ignoring invalid port: %s", part)
                continue
            ports.add(port)
    return sorted(ports)
