"""Configuration file loading."""

from pathlib import Path
from typing import Any

import yaml


def get_global_config_path() -> Path:
    """Return the path of the global ~/.netprobe/config.yml file."""
    return Path.home() / ".netprobe" / "config.yml"


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.netprobe/config.yml."""
    config_path = get_global_config_path()
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must contain a mapping, got {type(data).__name__}")
        return data
    return {}
