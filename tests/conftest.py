"""Test configuration and fixtures for netprobe."""

import socket
import socketserver
import threading
from collections.abc import Callable, Generator

import pytest


class _ThreadedServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


def _start(server: socketserver.TCPServer) -> threading.Thread:
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return thread


@pytest.fixture
def tcp_listener() -> Generator[Callable[[bytes], int], None, None]:
    """Start local TCP listeners that optionally send a banner on connect.

    Returns a factory taking the banner bytes and returning the bound port.
    """
    servers: list[socketserver.TCPServer] = []

    def factory(banner: bytes = b"") -> int:
        class Handler(socketserver.BaseRequestHandler):
            def handle(self) -> None:
                if banner:
                    self.request.sendall(banner)
                self.request.settimeout(2.0)
                try:
                    self.request.recv(1024)
                except OSError:
                    pass

        server = _ThreadedServer(("127.0.0.1", 0), Handler)
        _start(server)
        servers.append(server)
        return server.server_address[1]

    yield factory

    for server in servers:
        server.shutdown()
        server.server_close()


@pytest.fixture
def closed_port() -> int:
    """Return a local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class FakeFTPServer:
    """Scripted FTP control-channel server for plugin tests."""

    def __init__(
        self,
        greeting: str,
        accounts: set[tuple[str, str]],
        silent_commands: set[str] | None = None,
    ):
        self.greeting = greeting
        self.accounts = accounts
        self.silent_commands = silent_commands or set()
        self.attempts: list[tuple[str, str]] = []
        self.connections = 0
        outer = self

        class Handler(socketserver.StreamRequestHandler):
            def handle(self) -> None:
                outer.connections += 1
                self.wfile.write(f"{outer.greeting}\r\n".encode())
                user = None
                for raw in self.rfile:
                    line = raw.decode().rstrip("\r\n")
                    command, _, arg = line.partition(" ")
                    command = command.upper()
                    if command == "USER":
                        user = arg
                        if command in outer.silent_commands:
                            continue
                        self.wfile.write(b"331 Password required\r\n")
                    elif command == "PASS":
                        outer.attempts.append((user or "", arg))
                        if command in outer.silent_commands:
                            continue
                        if (user, arg) in outer.accounts:
                            self.wfile.write(b"230 Login successful\r\n")
                        else:
                            self.wfile.write(b"530 Login incorrect\r\n")
                    elif command == "QUIT":
                        self.wfile.write(b"221 Goodbye\r\n")
                        return
                    else:
                        self.wfile.write(b"502 Command not implemented\r\n")

        self._server = _ThreadedServer(("127.0.0.1", 0), Handler)
        self.port = self._server.server_address[1]
        _start(self._server)

    def close(self) -> None:
        self._server.shutdown()
        self._server.server_close()


@pytest.fixture
def ftp_server() -> Generator[Callable[..., FakeFTPServer], None, None]:
    """Factory for scripted FTP servers."""
    servers: list[FakeFTPServer] = []

    def factory(
        greeting: str = "220 ProFTPD ready",
        accounts: set[tuple[str, str]] | None = None,
        silent_commands: set[str] | None = None,
    ) -> FakeFTPServer:
        server = FakeFTPServer(greeting, accounts or set(), silent_commands)
        servers.append(server)
        return server

    yield factory

    for server in servers:
        server.close()
