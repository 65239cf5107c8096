"""Vulnerability check plugins and their registry."""

from .base import VulnPlugin
from .builtin import FTPWeakPassPlugin, HTTPSecurityPlugin
from .dispatch import (
    default_port_for_plugin,
    plugin_for_service,
    run_security_checks,
)
from .factory import create_default_plugins, get_default_registry
from .models import SEVERITIES, PluginResult, SecurityCheck
from .registry import PluginRegistry

__all__ = [
    "FTPWeakPassPlugin",
    "HTTPSecurityPlugin",
    "PluginRegistry",
    "PluginResult",
    "SEVERITIES",
    "SecurityCheck",
    "VulnPlugin",
    "create_default_plugins",
    "default_port_for_plugin",
    "get_default_registry",
    "plugin_for_service",
    "run_security_checks",
]
