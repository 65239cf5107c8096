"""Data models for vulnerability plugin results."""

from dataclasses import dataclass

SEVERITIES = ("low", "medium", "high", "critical")


@dataclass(frozen=True)
class PluginResult:
    """Outcome of one plugin run against one port."""

    vulnerable: bool
    details: str = ""
    severity: str | None = None

    def __post_init__(self) -> None:
        if self.severity is not None and self.severity not in SEVERITIES:
            raise ValueError(f"Unknown severity: {self.severity}")
        if not self.vulnerable and self.severity is not None:
            raise ValueError("Severity is only set on vulnerable results")


@dataclass(frozen=True)
class SecurityCheck:
    """A plugin dispatched against an open port, with its result or error."""

    port: int
    service: str
    plugin: str
    result: PluginResult | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
