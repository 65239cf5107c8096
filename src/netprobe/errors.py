"""Exception types raised by netprobe."""


class NetprobeError(Exception):
    """Base class for netprobe errors."""


class PluginError(NetprobeError):
    """A vulnerability plugin could not run its probe."""

    def __init__(self, plugin: str, message: str):
        super().__init__(f"{plugin}: {message}")
        self.plugin = plugin
        self.message = message
