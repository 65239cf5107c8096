"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from netprobe import cli
from netprobe.cli import app
from netprobe.errors import PluginError
from netprobe.plugins import PluginRegistry, PluginResult, VulnPlugin

runner = CliRunner()


class StubPlugin(VulnPlugin):
    """Plugin returning a fixed result."""

    description = "stub plugin"

    def __init__(self, name: str, result: PluginResult | None = None, error: str | None = None):
        self.name = name
        self._result = result
        self._error = error
        self.calls: list[tuple[str, int, float]] = []

    def scan(self, target: str, port: int, timeout: float) -> PluginResult:
        self.calls.append((target, port, timeout))
        if self._error:
            raise PluginError(self.name, self._error)
        return self._result


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in ("NETPROBE_TIMEOUT", "NETPROBE_WORKERS", "NETPROBE_BANNER_TIMEOUT", "NETPROBE_VERBOSE"):
        monkeypatch.delenv(key, raising=False)


class TestScanCommand:
    """Test `netprobe scan`."""

    def test_scan_reports_open_port(self, tcp_listener, closed_port):
        port = tcp_listener(b"SSH-2.0-OpenSSH_9.3\r\n")

        result = runner.invoke(
            app, ["scan", "-H", "127.0.0.1", "-p", f"{port},{closed_port}", "-t", "1", "-w", "2"]
        )

        assert result.exit_code == 0, result.output
        assert str(port) in result.output
        assert "ssh" in result.output
        assert "Open ports:" in result.output
        assert "Scan complete" in result.output

    def test_scan_without_valid_ports(self):
        result = runner.invoke(app, ["scan", "-H", "127.0.0.1", "-p", "0,99999"])

        assert result.exit_code == 1
        assert "no valid ports" in result.output

    def test_scan_rejects_unknown_mode(self):
        result = runner.invoke(app, ["scan", "-p", "80", "-m", "stealth"])

        assert result.exit_code == 1
        assert "Unknown scan mode" in result.output

    @pytest.mark.parametrize(
        ("flags", "message"),
        [
            (["-w", "0"], "--workers must be at least 1"),
            (["-t", "0"], "--timeout must be positive"),
        ],
    )
    def test_scan_rejects_non_positive_flags(self, monkeypatch, flags, message):
        def fail(**kwargs):
            raise AssertionError("scanner should not be built")

        monkeypatch.setattr(cli, "TCPScanner", fail)

        result = runner.invoke(app, ["scan", "-H", "127.0.0.1", "-p", "80", *flags])

        assert result.exit_code == 1
        assert message in result.output

    def test_scan_writes_report(self, tcp_listener, tmp_path: Path):
        port = tcp_listener(b"")
        report = tmp_path / "report.html"

        result = runner.invoke(
            app, ["scan", "-H", "127.0.0.1", "-p", str(port), "-t", "1", "-r", str(report)]
        )

        assert result.exit_code == 0, result.output
        assert report.exists()
        assert str(port) in report.read_text(encoding="utf-8")

    def test_security_mode_dispatches_plugins(self, tcp_listener, monkeypatch):
        port = tcp_listener(b"220 ProFTPD ready\r\n")
        ftp = StubPlugin(
            "ftp-weakpass", PluginResult(True, "Weak credentials found: anonymous/<empty>", "medium")
        )
        monkeypatch.setattr(cli, "get_default_registry", lambda: PluginRegistry([ftp]))

        result = runner.invoke(
            app, ["scan", "-H", "127.0.0.1", "-p", str(port), "-t", "1", "-m", "security"]
        )

        assert result.exit_code == 0, result.output
        assert ftp.calls == [("127.0.0.1", port, 1.0)]
        assert "Vulnerable" in result.output
        assert "anonymous" in result.output

    def test_workers_and_timeout_from_environment(self, monkeypatch):
        created = {}

        class RecordingScanner:
            def __init__(self, timeout, max_workers, banner_timeout):
                created.update(timeout=timeout, workers=max_workers)

            def scan_ports(self, host, ports):
                return []

        monkeypatch.setenv("NETPROBE_WORKERS", "12")
        monkeypatch.setenv("NETPROBE_TIMEOUT", "0.75")
        monkeypatch.setattr(cli, "TCPScanner", RecordingScanner)

        result = runner.invoke(app, ["scan", "-H", "10.0.0.1", "-p", "80"])

        assert result.exit_code == 0, result.output
        assert created == {"timeout": 0.75, "workers": 12}
        assert "No open ports found" in result.output

    def test_flags_override_environment(self, monkeypatch):
        created = {}

        class RecordingScanner:
            def __init__(self, timeout, max_workers, banner_timeout):
                created.update(timeout=timeout, workers=max_workers)

            def scan_ports(self, host, ports):
                created["host"] = host
                return []

        monkeypatch.setenv("NETPROBE_WORKERS", "12")
        monkeypatch.setattr(cli, "TCPScanner", RecordingScanner)

        result = runner.invoke(app, ["scan", "-H", "[::1]", "-p", "80", "-w", "3", "-t", "4"])

        assert result.exit_code == 0, result.output
        assert created == {"timeout": 4.0, "workers": 3, "host": "::1"}


class TestPluginMode:
    """Test `netprobe scan --plugin`."""

    def test_runs_plugin_on_default_port(self, monkeypatch):
        http = StubPlugin("http-security", PluginResult(False, "all good"))
        monkeypatch.setattr(cli, "get_default_registry", lambda: PluginRegistry([http]))

        result = runner.invoke(app, ["scan", "-H", "example.com", "-P", "http-security"])

        assert result.exit_code == 0, result.output
        assert http.calls == [("example.com", 80, 2.0)]
        assert "Not vulnerable" in result.output

    def test_plugin_port_override(self, monkeypatch):
        ftp = StubPlugin("ftp-weakpass", PluginResult(False, "none"))
        monkeypatch.setattr(cli, "get_default_registry", lambda: PluginRegistry([ftp]))

        result = runner.invoke(
            app, ["scan", "-H", "h", "-P", "ftp-weakpass", "--plugin-port", "2121"]
        )

        assert result.exit_code == 0, result.output
        assert ftp.calls[0][1] == 2121

    def test_out_of_range_plugin_port(self, monkeypatch):
        ftp = StubPlugin("ftp-weakpass", PluginResult(False, "none"))
        monkeypatch.setattr(cli, "get_default_registry", lambda: PluginRegistry([ftp]))

        result = runner.invoke(
            app, ["scan", "-H", "127.0.0.1", "-P", "ftp-weakpass", "--plugin-port", "70000"]
        )

        assert result.exit_code == 1
        assert "Port out of range" in result.output
        assert ftp.calls == []

    def test_unknown_plugin(self):
        result = runner.invoke(app, ["scan", "-H", "h", "-P", "smb-null"])

        assert result.exit_code == 1
        assert "unknown plugin smb-null" in result.output

    def test_plugin_failure(self, monkeypatch):
        ftp = StubPlugin("ftp-weakpass", error="not an FTP service")
        monkeypatch.setattr(cli, "get_default_registry", lambda: PluginRegistry([ftp]))

        result = runner.invoke(app, ["scan", "-H", "h", "-P", "ftp-weakpass"])

        assert result.exit_code == 1
        assert "not an FTP service" in result.output


def test_plugins_command_lists_builtins():
    result = runner.invoke(app, ["plugins"])

    assert result.exit_code == 0, result.output
    assert "ftp-weakpass" in result.output
    assert "http-security" in result.output


def test_version_command():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.output.startswith("netprobe ")
