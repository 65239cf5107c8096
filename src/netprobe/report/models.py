"""Report data models."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from netprobe.scanner.models import IPV6, ScanResult


@dataclass
class ReportSummary:
    """Aggregate counts for one scan."""

    target: str
    started_at: datetime
    finished_at: datetime
    total_ports: int
    open_ports: int
    closed_ports: int
    ipv6_ports: int

    @property
    def duration(self) -> timedelta:
        return self.finished_at - self.started_at

    @property
    def has_ipv6(self) -> bool:
        return self.ipv6_ports > 0


def build_report_summary(
    target: str,
    started_at: datetime,
    finished_at: datetime,
    results: list[ScanResult],
) -> ReportSummary:
    """Count open, closed and IPv6 ports in a result set."""
    open_results = [result for result in results if result.is_open]
    return ReportSummary(
        target=target,
        started_at=started_at,
        finished_at=finished_at,
        total_ports=len(results),
        open_ports=len(open_results),
        closed_ports=len(results) - len(open_results),
        ipv6_ports=sum(1 for result in open_results if result.ip_version == IPV6),
    )
