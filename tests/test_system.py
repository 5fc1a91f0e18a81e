"""Tests for status and log retrieval."""

import httpx
import pytest

from oidfed_admin import LogSeverity
from oidfed_admin.services.system import clamp_log_limit, log_path


@pytest.fixture
def logs_server(server):
    entries = [{"id": 1, "severity": "Error", "message": "boom", "tag": "x"}]
    for path in ("/logs", "/logs/severity/Error", "/logs/severity/Info", "/logs/tag/x"):
        server.route("GET", path, httpx.Response(200, json=entries))
    return server


class TestClampLogLimit:
    @pytest.mark.parametrize(
        ("limit", "expected"),
        [(1500, 1000), (1000, 1000), (-5, 100), (0, 100), (None, 100), ("abc", 100), ("50", 50), (1, 1)],
    )
    def test_clamp(self, limit, expected) -> None:
        assert clamp_log_limit(limit) == expected


class TestLogPath:
    def test_known_severity(self) -> None:
        assert log_path(severity="Error") == "/logs/severity/Error"

    def test_enum_severity(self) -> None:
        assert log_path(severity=LogSeverity.WARN) == "/logs/severity/Warn"

    def test_severity_wins_over_tag(self) -> None:
        assert log_path(severity="Debug", tag="x") == "/logs/severity/Debug"

    def test_unknown_severity_falls_back_to_tag(self) -> None:
        assert log_path(severity="Fatal", tag="x") == "/logs/tag/x"

    def test_unknown_severity_without_tag(self) -> None:
        assert log_path(severity="error") == "/logs"

    def test_no_filter(self) -> None:
        assert log_path() == "/logs"


class TestLogs:
    def test_severity_filter(self, client, logs_server) -> None:
        entries = client.system.logs(50, severity="Error")

        assert logs_server.last.url.raw_path == b"/logs/severity/Error?limit=50"
        assert entries[0].message == "boom"

    def test_tag_filter(self, client, logs_server) -> None:
        client.system.logs(50, tag="x")

        assert logs_server.last.url.raw_path == b"/logs/tag/x?limit=50"

    def test_no_filter(self, client, logs_server) -> None:
        client.system.logs(50)

        assert logs_server.last.url.raw_path == b"/logs?limit=50"

    def test_limit_is_clamped_on_the_wire(self, client, logs_server) -> None:
        client.system.logs(1500)
        assert logs_server.last.url.raw_path == b"/logs?limit=1000"

        client.system.logs(-5)
        assert logs_server.last.url.raw_path == b"/logs?limit=100"

        client.system.logs(None)
        assert logs_server.last.url.raw_path == b"/logs?limit=100"

    def test_default_limit(self, client, logs_server) -> None:
        client.system.logs(severity=LogSeverity.INFO)

        assert logs_server.last.url.raw_path == b"/logs/severity/Info?limit=100"


class TestStatus:
    def test_status(self, client, server) -> None:
        server.route("GET", "/status", httpx.Response(200, json={"status": "OK", "version": "1.0"}))

        status = client.system.status()

        assert status.status == "OK"
        assert status.model_extra == {"version": "1.0"}

    def test_non_list_payload_is_returned_as_is(self, client, server) -> None:
        envelope = {"logs": [{"id": 1}], "total": 1}
        server.route("GET", "/logs", httpx.Response(200, json=envelope))

        assert client.system.logs() == envelope

    def test_text_payload_is_returned_as_is(self, client, server) -> None:
        server.route("GET", "/logs", httpx.Response(200, text="no logs"))

        assert client.system.logs() == "no logs"
