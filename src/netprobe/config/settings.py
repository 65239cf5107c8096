"""Scan settings resolved from configuration sources."""

from dataclasses import dataclass

from netprobe.scanner.probe import DEFAULT_BANNER_TIMEOUT
from netprobe.scanner.tcp import DEFAULT_TIMEOUT, DEFAULT_WORKERS

from .getters import get_bool, get_float, get_int


@dataclass
class ScanSettings:
    """Runtime defaults for a scan."""

    timeout: float = DEFAULT_TIMEOUT
    workers: int = DEFAULT_WORKERS
    banner_timeout: float = DEFAULT_BANNER_TIMEOUT
    verbose: bool = False


def load_scan_settings() -> ScanSettings:
    """Resolve scan settings from the environment and ~/.netprobe/config.yml."""
    return ScanSettings(
        timeout=get_float("NETPROBE_TIMEOUT", DEFAULT_TIMEOUT),
        workers=get_int("NETPROBE_WORKERS", DEFAULT_WORKERS),
        banner_timeout=get_float("NETPROBE_BANNER_TIMEOUT", DEFAULT_BANNER_TIMEOUT),
        verbose=get_bool("NETPROBE_VERBOSE", False),
    )
