"""Helpers for scan-related CLI commands."""

from netprobe.config import ScanSettings

SCAN_MODES = ("normal", "security")
BANNER_DISPLAY_WIDTH = 30


def normalize_mode(mode: str | None, default: str = "normal") -> str:
    """Normalize and validate the scan mode."""
    mode_name = mode.strip().lower() if isinstance(mode, str) else default
    if mode_name not in SCAN_MODES:
        raise ValueError(f"Unknown scan mode: {mode}. Use one of: {', '.join(SCAN_MODES)}")
    return mode_name


def coerce_positive_int(value: int | None, default: int, option: str = "--workers") -> int:
    """Return value when given, default when missing; reject values below 1."""
    if value is None:
        return default
    if value < 1:
        raise ValueError(f"{option} must be at least 1, got {value}")
    return int(value)


def coerce_positive_float(
    value: float | None, default: float, option: str = "--timeout"
) -> float:
    """Return value when given, default when missing; reject non-positive values."""
    if value is None:
        return default
    if value <= 0:
        raise ValueError(f"{option} must be positive, got {value}")
    return float(value)


def resolve_settings(
    settings: ScanSettings,
    timeout: float | None,
    workers: int | None,
    verbose: bool,
) -> ScanSettings:
    """Overlay CLI flags on configured settings.

    Raises ValueError for a non-positive timeout or worker count.
    """
    return ScanSettings(
        timeout=coerce_positive_float(timeout, settings.timeout),
        workers=coerce_positive_int(workers, settings.workers),
        banner_timeout=settings.banner_timeout,
        verbose=verbose or settings.verbose,
    )


def truncate(text: str, width: int = BANNER_DISPLAY_WIDTH) -> str:
    """Shorten text to width characters, marking the cut with an ellipsis."""
    text = " ".join(text.split())
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."
