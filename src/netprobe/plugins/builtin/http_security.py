"""HTTP security header audit plugin."""

import ipaddress
import logging

import httpx

from netprobe.errors import PluginError
from netprobe.scanner.targets import normalize_host

from ..base import VulnPlugin
from ..models import PluginResult

logger = logging.getLogger(__name__)

# Header name -> recommended value
SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


def build_url(target: str, port: int) -> str:
    """Return the root URL for host and port, bracketing IPv6 literals."""
    host = normalize_host(target)
    try:
        if ipaddress.ip_address(host).version == 6:
            host = f"[{host}]"
    except ValueError:
        pass
    return f"http://{host}:{port}/"


def frame_options_ok(value: str) -> bool:
    upper = value.strip().upper()
    return upper == "DENY" or "SAMEORIGIN" in upper


def audit_headers(headers: httpx.Headers) -> tuple[list[str], list[str]]:
    """Return (missing header names, recommendation lines) for a response."""
    missing: list[str] = []
    recommendations: list[str] = []
    for header, expected in SECURITY_HEADERS.items():
        value = headers.get(header, "")
        if not value:
            missing.append(header)
            recommendations.append(f"add {header} (recommended: {expected})")
        elif header == "X-Frame-Options" and not frame_options_ok(value):
            recommendations.append(f"{header} is insecure: {value} (recommended: {expected})")
    return missing, recommendations


class HTTPSecurityPlugin(VulnPlugin):
    """Check an HTTP service for missing or weak security headers."""

    name = "http-security"
    description = "Audit HTTP security response headers"

    def scan(self, target: str, port: int, timeout: float) -> PluginResult:
        url = build_url(target, port)
        try:
            with httpx.Client(timeout=timeout, follow_redirects=False) as client:
                response = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            raise PluginError(self.name, f"request to {url} failed: {exc}") from exc

        logger.debug("GET %s -> %d", url, response.status_code)
        missing, recommendations = audit_headers(response.headers)

        if missing:
            return PluginResult(
                vulnerable=True,
                details=(
                    f"Missing security headers: {', '.join(missing)}. "
                    f"Recommendations: {'; '.join(recommendations)}"
                ),
                severity="low",
            )
        if recommendations:
            return PluginResult(
                vulnerable=True,
                details=f"Security headers need improvement: {'; '.join(recommendations)}",
                severity="low",
            )
        return PluginResult(vulnerable=False, details="Security headers are configured correctly")
