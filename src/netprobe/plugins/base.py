"""Base contract for vulnerability check plugins."""

from abc import ABC, abstractmethod

from .models import PluginResult


class VulnPlugin(ABC):
    """Plugin interface for protocol-specific vulnerability checks.

    ``scan`` returns a PluginResult when the probe ran, and raises
    PluginError when it could not run at all.
    """

    name: str
    description: str

    @abstractmethod
    def scan(self, target: str, port: int, timeout: float) -> PluginResult:
        """Run the check against one host and port."""
