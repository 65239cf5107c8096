"""FTP weak credential plugin."""

import contextlib
import logging
import socket
from typing import BinaryIO

from netprobe.errors import PluginError
from netprobe.scanner.targets import normalize_host

from ..base import VulnPlugin
from ..models import PluginResult

logger = logging.getLogger(__name__)

# Tried in order over a single control connection.
WEAK_CREDENTIALS: list[tuple[str, str]] = [
    ("admin", "admin"),
    ("admin", "123456"),
    ("admin", "password"),
    ("root", "root"),
    ("root", "123456"),
    ("ftp", "ftp"),
    ("anonymous", ""),
    ("anonymous", "anonymous"),
]

MAX_REPLY_LINES = 50


def read_reply(stream: BinaryIO) -> str:
    """Read one FTP reply, following ``ddd-`` continuation lines to the final ``ddd `` line."""
    first = stream.readline()
    if not first:
        raise ConnectionError("connection closed by server")
    lines = [first.decode("utf-8", errors="replace").rstrip("\r\n")]
    code = lines[0][:3]
    if lines[0][3:4] == "-":
        for _ in range(MAX_REPLY_LINES):
            raw = stream.readline()
            if not raw:
                break
            line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
            lines.append(line)
            if line.startswith(f"{code} "):
                break
    return "\n".join(lines)


def _format_credential(username: str, password: str) -> str:
    return f"{username}/{password or '<empty>'}"


class FTPWeakPassPlugin(VulnPlugin):
    """Try a short list of common FTP logins."""

    name = "ftp-weakpass"
    description = "Detect weak or anonymous FTP logins"

    def __init__(self, credentials: list[tuple[str, str]] | None = None):
        self.credentials = list(credentials) if credentials is not None else WEAK_CREDENTIALS

    def scan(self, target: str, port: int, timeout: float) -> PluginResult:
        host = normalize_host(target)
        try:
            sock = socket.create_connection((host, port), timeout=timeout)
        except (OSError, UnicodeError) as exc:
            raise PluginError(self.name, f"connection to {host}:{port} failed: {exc}") from exc

        with sock, sock.makefile("rb") as stream:
            try:
                greeting = read_reply(stream)
            except OSError as exc:
                raise PluginError(self.name, f"no greeting from {host}:{port}: {exc}") from exc

            if "ftp" not in greeting.lower():
                raise PluginError(self.name, "not an FTP service")

            for username, password in self.credentials:
                if self._try_login(sock, stream, username, password):
                    with contextlib.suppress(OSError):
                        sock.sendall(b"QUIT\r\n")
                    return PluginResult(
                        vulnerable=True,
                        details=f"Weak credentials found: {_format_credential(username, password)}",
                        severity="medium",
                    )

        return PluginResult(vulnerable=False, details="No common weak credentials found")

    def _try_login(
        self, sock: socket.socket, stream: BinaryIO, username: str, password: str
    ) -> bool:
        try:
            sock.sendall(f"USER {username}\r\n".encode())
            reply = read_reply(stream)
            if not reply.startswith("331"):
                logger.debug("USER %s rejected: %s", username, reply)
                return False
            sock.sendall(f"PASS {password}\r\n".encode())
            reply = read_reply(stream)
        except TimeoutError as exc:
            # A timed-out socket file refuses every later read.
            raise PluginError(self.name, f"no reply to login as {username}: {exc}") from exc
        except OSError as exc:
            logger.debug("Login attempt %s failed: %s", username, exc)
            return False
        return reply.startswith("230")
