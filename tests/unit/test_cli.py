# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
import json

import pytest

from httpprobe.cli.main import build_parser, main
from httpprobe.http import HttpResponse, StubTransport
from httpprobe.probe import READY_BANNER

STATUS_URL = "http://192.168.1.5:8080/status"


@pytest.fixture
def stub(monkeypatch):
    transport = StubTransport(
        {
            STATUS_URL: HttpResponse(
                status_code=200,
                url=STATUS_URL,
                headers={"content-type": "application/json"},
                data={"ok": True},
            )
        }
    )
    captured = {}

    def fake_factory(settings=None):
        captured["settings"] = settings
        return transport

    monkeypatch.setattr("httpprobe.cli.main.create_default_transport", fake_factory)
    transport.captured = captured
    return transport


def test_build_parser_defaults_and_options():
    parser = build_parser()
    args = parser.parse_args(["192.168.1.5", "-p", "8080", "-X", "post", "-H", "X-Trace: 1", "--json"])
    assert args.host == "192.168.1.5"
    assert args.port == "8080"
    assert args.path == "/"
    assert args.method == "POST"
    assert args.headers == [("X-Trace", "1")]
    assert args.json is True
    assert args.interactive is False


def test_build_parser_rejects_malformed_header():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["h", "-H", "no-colon"])
    assert excinfo.value.code == 2


def test_main_success_prints_status_and_transcript(stub):
    out = io.StringIO()
    code = main(["192.168.1.5", "--port", "8080", "--path", "/status"], out=out)

    output = out.getvalue()
    assert code == 0
    assert output.startswith("[httpprobe] Status: Success (200)")
    assert '"ok": true' in output
    assert stub.closed is True


def test_main_invalid_port_exits_nonzero_without_request(stub):
    out = io.StringIO()
    code = main(["192.168.1.5", "--port", "70000"], out=out)

    assert code == 1
    assert "Status: Error" in out.getvalue()
    assert "Valid port number (1-65535) is required" in out.getvalue()
    assert stub.requests == []


def test_main_json_output(stub):
    out = io.StringIO()
    code = main(["192.168.1.5", "-p", "8080", "--path", "/status", "--json"], out=out)

    payload = json.loads(out.getvalue())
    assert code == 0
    assert payload["status"] == "success"
    assert payload["label"] == "Success (200)"
    assert payload["result"]["kind"] == "success"
    assert payload["result"]["status_code"] == 200
    assert payload["transcript"][-1].endswith("Making GET request to: http://192.168.1.5:8080/status (10s timeout)")


def test_main_timeout_flag_applies_to_all_phases(stub):
    main(["192.168.1.5", "-p", "8080", "--path", "/status", "--timeout-ms", "1500"], out=io.StringIO())

    settings = stub.captured["settings"]
    assert settings.race_timeout_ms == 1500
    assert settings.connect_timeout_ms == 1500
    assert stub.requests[0].read_timeout_ms == 1500


def test_main_interactive_runs_one_probe_per_line(stub):
    stdin = io.StringIO("192.168.1.5 8080 /status\n\n# comment\n10.0.0.1 0\nquit\n192.168.1.5 8080 /status\n")
    out = io.StringIO()

    code = main(["--interactive"], stdin=stdin, out=out)

    output = out.getvalue()
    assert code == 1
    assert READY_BANNER in output
    assert "Success (200)" in output
    assert "Valid port number (1-65535) is required" in output
    assert len(stub.requests) == 1


def test_main_without_port_is_usage_error(stub, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["192.168.1.5"], out=io.StringIO())
    assert excinfo.value.code == 2
    assert "-p/--port" in capsys.readouterr().err
    assert stub.requests == []
