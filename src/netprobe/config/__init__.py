"""
Configuration management for netprobe.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Global config file (~/.netprobe/config.yml)
3. Default values (lowest priority)
"""

from .env_loader import get_global_config_path, load_global_config
from .getters import get_bool, get_config, get_float, get_int
from .settings import ScanSettings, load_scan_settings

__all__ = [
    "ScanSettings",
    "get_bool",
    "get_config",
    "get_float",
    "get_global_config_path",
    "get_int",
    "load_global_config",
    "load_scan_settings",
]
