"""Data models for port scan targets and results."""

from dataclasses import dataclass

PORT_MIN = 1
PORT_MAX = 65535

STATE_OPEN = "open"
STATE_CLOSED = "closed"

IPV4 = "IPv4"
IPV6 = "IPv6"

UNKNOWN_SERVICE = "unknown"


def validate_port(port: int) -> int:
    """Return port when it is a valid TCP port number, else raise ValueError."""
    if isinstance(port, bool) or not isinstance(port, int):
        raise ValueError(f"Port must be an integer, got {port!r}")
    if not PORT_MIN <= port <= PORT_MAX:
        raise ValueError(f"Port out of range ({PORT_MIN}-{PORT_MAX}): {port}")
    return port


@dataclass(frozen=True)
class ScanTarget:
    """One (host, port) pair queued for probing."""

    host: str
    port: int

    def __post_init__(self) -> None:
        validate_port(self.port)


@dataclass(frozen=True)
class ScanResult:
    """Outcome of probing one TCP port."""

    port: int
    state: str
    service: str = UNKNOWN_SERVICE
    banner: str = ""
    ip_version: str = IPV4

    @property
    def is_open(self) -> bool:
        return self.state == STATE_OPEN
