"""TCP port scanning engine."""

from .models import (
    IPV4,
    IPV6,
    STATE_CLOSED,
    STATE_OPEN,
    UNKNOWN_SERVICE,
    ScanResult,
    ScanTarget,
    validate_port,
)
from .probe import ip_version, probe
from .services import identify
from .targets import normalize_host, parse_ports
from .tcp import DEFAULT_TIMEOUT, DEFAULT_WORKERS, TCPScanner, scan_ports, unique_ports

__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_WORKERS",
    "IPV4",
    "IPV6",
    "STATE_CLOSED",
    "STATE_OPEN",
    "UNKNOWN_SERVICE",
    "ScanResult",
    "ScanTarget",
    "TCPScanner",
    "identify",
    "ip_version",
    "normalize_host",
    "parse_ports",
    "probe",
    "scan_ports",
    "unique_ports",
    "validate_port",
]
