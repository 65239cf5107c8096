"""Service identification from banners and well-known ports."""

from .models import UNKNOWN_SERVICE

# Checked in this order; the first token found in the banner wins.
BANNER_SIGNATURES: tuple[tuple[str, str], ...] = (
    ("ssh", "ssh"),
    ("ftp", "ftp"),
    ("smtp", "smtp"),
    ("http", "http"),
    ("mysql", "mysql"),
    ("redis", "redis"),
    ("postgresql", "postgresql"),
    ("mongodb", "mongodb"),
    ("pop3", "pop3"),
    ("imap", "imap"),
    ("telnet", "telnet"),
    ("rdp", "rdp"),
)

WELL_KNOWN_PORTS: dict[int, str] = {
    21: "ftp",
    22: "ssh",
    23: "telnet",
    25: "smtp",
    53: "dns",
    80: "http",
    110: "pop3",
    143: "imap",
    443: "https",
    465: "smtps",
    587: "smtp",
    993: "imaps",
    995: "pop3s",
    3306: "mysql",
    3389: "rdp",
    5432: "postgresql",
    6379: "redis",
    8080: "http-proxy",
    8443: "https-alt",
    27017: "mongodb",
}


def identify_from_banner(banner: str) -> str | None:
    """Return the service named by a banner, or None when nothing matches."""
    if not banner:
        return None
    lowered = banner.lower()
    for token, service in BANNER_SIGNATURES:
        if token in lowered:
            return service
    return None


def identify(port: int, banner: str = "") -> str:
    """Guess the service behind a port, preferring banner evidence over the port number."""
    return identify_from_banner(banner) or WELL_KNOWN_PORTS.get(port, UNKNOWN_SERVICE)
