"""HTML report rendering."""

from datetime import datetime
from html import escape
from pathlib import Path

from netprobe.plugins.models import SecurityCheck
from netprobe.scanner.models import ScanResult

from .models import ReportSummary, build_report_summary

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_STYLE = """
body { font-family: 'Segoe UI', Arial, sans-serif; color: #333; background: #f4f6fb; margin: 0; padding: 20px; }
.container { max-width: 1100px; margin: 0 auto; }
.header, .section { background: #fff; border-radius: 8px; padding: 24px; margin-bottom: 20px;
  box-shadow: 0 4px 12px rgba(0,0,0,0.08); }
.header h1 { margin: 0 0 8px; border-bottom: 2px solid #3498db; padding-bottom: 8px; }
.cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 16px; margin-bottom: 20px; }
.card { background: #fff; border-radius: 8px; padding: 16px; text-align: center; box-shadow: 0 2px 8px rgba(0,0,0,0.08); }
.card.total { border-top: 4px solid #3498db; }
.card.open { border-top: 4px solid #2ecc71; }
.card.closed { border-top: 4px solid #e74c3c; }
.card.ipv6 { border-top: 4px solid #9b59b6; }
.card h3 { font-size: 13px; color: #7f8c8d; text-transform: uppercase; margin: 0 0 8px; }
.card .number { font-size: 32px; font-weight: bold; }
table { width: 100%; border-collapse: collapse; }
th, td { text-align: left; padding: 8px 10px; border-bottom: 1px solid #eee; }
th { background: #34495e; color: #fff; }
code { font-family: monospace; font-size: 12px; color: #555; }
.severity-low { color: #2980b9; }
.severity-medium { color: #e67e22; }
.severity-high, .severity-critical { color: #c0392b; font-weight: bold; }
.empty { color: #7f8c8d; }
"""


def _card(css_class: str, title: str, value: int) -> str:
    return (
        f'<div class="card {css_class}"><h3>{escape(title)}</h3>'
        f'<div class="number">{value}</div></div>'
    )


def _render_ports(results: list[ScanResult]) -> str:
    open_results = sorted((r for r in results if r.is_open), key=lambda r: r.port)
    if not open_results:
        return '<p class="empty">No open ports found.</p>'
    rows = "\n".join(
        "<tr>"
        f"<td>{result.port}</td>"
        f"<td>{escape(result.state)}</td>"
        f"<td>{escape(result.service)}</td>"
        f"<td>{escape(result.ip_version)}</td>"
        f"<td><code>{escape(result.banner)}</code></td>"
        "</tr>"
        for result in open_results
    )
    return (
        "<table><thead><tr><th>Port</th><th>State</th><th>Service</th>"
        "<th>IP version</th><th>Banner</th></tr></thead>"
        f"<tbody>\n{rows}\n</tbody></table>"
    )


def _render_check(check: SecurityCheck) -> str:
    if check.error is not None:
        status = "error"
        severity = "-"
        details = check.error
    elif check.result is not None and check.result.vulnerable:
        status = "vulnerable"
        severity = check.result.severity or "-"
        details = check.result.details
    else:
        status = "ok"
        severity = "-"
        details = check.result.details if check.result else ""
    return (
        "<tr>"
        f"<td>{check.port}</td>"
        f"<td>{escape(check.plugin)}</td>"
        f"<td>{escape(status)}</td>"
        f'<td class="severity-{escape(severity)}">{escape(severity)}</td>'
        f"<td>{escape(details)}</td>"
        "</tr>"
    )


def _render_checks(checks: list[SecurityCheck]) -> str:
    rows = "\n".join(_render_check(check) for check in checks)
    return (
        '<div class="section"><h2>Security checks</h2>'
        "<table><thead><tr><th>Port</th><th>Plugin</th><th>Status</th>"
        "<th>Severity</th><th>Details</th></tr></thead>"
        f"<tbody>\n{rows}\n</tbody></table></div>"
    )


def render_html_report(
    summary: ReportSummary,
    results: list[ScanResult],
    checks: list[SecurityCheck] | None = None,
) -> str:
    """Render a self-contained HTML document for one scan."""
    cards = [
        _card("total", "Total ports", summary.total_ports),
        _card("open", "Open ports", summary.open_ports),
        _card("closed", "Closed ports", summary.closed_ports),
    ]
    if summary.has_ipv6:
        cards.append(_card("ipv6", "IPv6 ports", summary.ipv6_ports))

    seconds = summary.duration.total_seconds()
    target = escape(summary.target)
    checks_html = _render_checks(checks) if checks else ""
    cards_html = "".join(cards)
    started = summary.started_at.strftime(TIME_FORMAT)
    finished = summary.finished_at.strftime(TIME_FORMAT)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Port scan report - {target}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="container">
<div class="header">
<h1>Port scan report</h1>
<p><strong>Target:</strong> {target}</p>
<p><strong>Started:</strong> {started}
 &middot; <strong>Finished:</strong> {finished}
 &middot; <strong>Duration:</strong> {seconds:.2f}s</p>
</div>
<div class="cards">
{cards_html}
</div>
<div class="section">
<h2>Open ports</h2>
{_render_ports(results)}
</div>
{checks_html}
</div>
</body>
</html>
"""


def write_html_report(
    path: Path,
    target: str,
    started_at: datetime,
    finished_at: datetime,
    results: list[ScanResult],
    checks: list[SecurityCheck] | None = None,
) -> Path:
    """Write the HTML report for a scan and return its path."""
    path = Path(path)
    summary = build_report_summary(target, started_at, finished_at, results)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_html_report(summary, results, checks), encoding="utf-8")
    return path
