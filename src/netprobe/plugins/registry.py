"""Name-keyed registry of vulnerability plugins."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .base import VulnPlugin

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Holds plugins by name for lookup and enumeration."""

    def __init__(self, plugins: Iterable[VulnPlugin] | None = None):
        self._plugins: dict[str, VulnPlugin] = {}
        for plugin in plugins or []:
            self.register(plugin)

    def register(self, plugin: VulnPlugin) -> None:
        """Register or replace a plugin by name."""
        if plugin.name in self._plugins:
            logger.debug("Replacing plugin %s", plugin.name)
        self._plugins[plugin.name] = plugin
        logger.debug("Registered plugin %s - %s", plugin.name, plugin.description)

    def get(self, name: str) -> VulnPlugin | None:
        """Return the plugin registered under name, if any."""
        return self._plugins.get(name)

    def list(self) -> list[str]:
        """Return sorted plugin names."""
        return sorted(self._plugins.keys())

    def plugins(self) -> list[VulnPlugin]:
        """Return plugins ordered by name."""
        return [self._plugins[name] for name in self.list()]

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)
