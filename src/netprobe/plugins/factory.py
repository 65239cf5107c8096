"""Default plugin set and the process-wide registry."""

import threading

from .base import VulnPlugin
from .builtin import FTPWeakPassPlugin, HTTPSecurityPlugin
from .registry import PluginRegistry

_default_registry: PluginRegistry | None = None
_default_lock = threading.Lock()


def create_default_plugins() -> list[VulnPlugin]:
    """Return the builtin plugins."""
    return [
        FTPWeakPassPlugin(),
        HTTPSecurityPlugin(),
    ]


def get_default_registry() -> PluginRegistry:
    """Return the shared registry, building it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = PluginRegistry(create_default_plugins())
    return _default_registry
