"""Configuration getter functions."""

import logging
import os
from typing import Any

from .env_loader import load_global_config

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Global config file
    3. Default value
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    return default


def get_float(key: str, default: float) -> float:
    """Get a positive float setting, falling back to default when invalid."""
    value = get_config(key, default)
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        logger.warning("Invalid value for %s: %r (using %s)", key, value, default)
        return default
    if parsed <= 0:
        logger.warning("%s must be positive, got %s (using %s)", key, parsed, default)
        return default
    return parsed


def get_int(key: str, default: int) -> int:
    """Get a positive integer setting, falling back to default when invalid."""
    value = get_config(key, default)
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid value for %s: %r (using %s)", key, value, default)
        return default
    if parsed < 1:
        logger.warning("%s must be at least 1, got %s (using %s)", key, parsed, default)
        return default
    return parsed


def get_bool(key: str, default: bool = False) -> bool:
    """Get a boolean setting."""
    value = get_config(key, default)
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY
