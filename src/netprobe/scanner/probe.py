"""Single-port TCP connect prober with best-effort banner capture."""

import ipaddress
import logging
import socket

from .models import IPV4, IPV6, STATE_CLOSED, STATE_OPEN, ScanResult
from .services import identify
from .targets import normalize_host

logger = logging.getLogger(__name__)

BANNER_READ_SIZE = 1024
DEFAULT_BANNER_TIMEOUT = 1.0


def ip_version(host: str) -> str:
    """Return "IPv6" for IPv6 literals, "IPv4" for IPv4 literals and hostnames."""
    try:
        address = ipaddress.ip_address(normalize_host(host))
    except ValueError:
        return IPV4
    if address.version == 6 and address.ipv4_mapped is None:
        return IPV6
    return IPV4


def read_banner(sock: socket.socket, timeout: float = DEFAULT_BANNER_TIMEOUT) -> str:
    """Read whatever the service volunteers right after connect.

    Services that wait for the client to speak first simply time out here,
    which yields an empty banner.
    """
    try:
        sock.settimeout(timeout)
        data = sock.recv(BANNER_READ_SIZE)
    except OSError:
        return ""
    return data.decode("utf-8", errors="replace").strip()


def probe(
    host: str,
    port: int,
    timeout: float,
    banner_timeout: float = DEFAULT_BANNER_TIMEOUT,
) -> ScanResult:
    """Connect to one port and classify it as open or closed."""
    address = normalize_host(host)
    version = ip_version(address)
    try:
        sock = socket.create_connection((address, port), timeout=timeout)
    except (OSError, UnicodeError) as exc:
        logger.debug("%s:%d closed (%s)", address, port, exc)
        return ScanResult(port=port, state=STATE_CLOSED, ip_version=version)

    with sock:
        banner = read_banner(sock, banner_timeout)

    logger.debug("%s:%d open, banner=%r", address, port, banner[:60])
    return ScanResult(
        port=port,
        state=STATE_OPEN,
        service=identify(port, banner),
        banner=banner,
        ip_version=version,
    )
