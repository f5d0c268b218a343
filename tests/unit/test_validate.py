# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from httpprobe.config import ProbeSettings
from httpprobe.errors import ProbeValidationError
from httpprobe.probe.validate import (
    HOST_INVALID,
    HOST_REQUIRED,
    PORT_REQUIRED,
    build_request_spec,
    normalize_path,
    parse_host,
    parse_method,
    parse_port,
)


@pytest.mark.parametrize("value, expected", [("1", 1), ("65535", 65535), (" 8080 ", 8080), (443, 443), ("0080", 80)])
def test_parse_port_accepts_exact_range(value, expected):
    assert parse_port(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "0", "65536", "-5", "+80", "1e3", "80.0", 0, 70000, True, None])
def test_parse_port_rejects_everything_else(value):
    with pytest.raises(ProbeValidationError) as excinfo:
        parse_port(value)
    assert excinfo.value.field == "port"
    assert excinfo.value.message == PORT_REQUIRED


def test_parse_host_trims_and_brackets_ipv6():
    assert parse_host("  192.168.1.5 ") == "192.168.1.5"
    assert parse_host("device.local") == "device.local"
    assert parse_host("fe80::1") == "[fe80::1]"
    assert parse_host("[::1]") == "[::1]"
    with pytest.raises(ProbeValidationError, match=HOST_REQUIRED):
        parse_host("  ")


def test_normalize_path():
    assert normalize_path("") == "/"
    assert normalize_path(None) == "/"
    assert normalize_path(" /status ") == "/status"
    assert normalize_path("status") == "/status"


def test_parse_method():
    assert parse_method("get") == "GET"
    assert parse_method(" delete ") == "DELETE"
    assert parse_method("") == "GET"
    with pytest.raises(ProbeValidationError) as excinfo:
        parse_method("BREW")
    assert excinfo.value.field == "method"


def test_build_request_spec_uses_settings_timeouts():
    settings = ProbeSettings(connect_timeout_ms=1000, read_timeout_ms=2000)
    spec = build_request_spec("10.0.0.1", "9999", "", "put", headers={"X-A": "1"}, body="{}", settings=settings)

    assert spec.url == "http://10.0.0.1:9999/"
    assert spec.method == "PUT"
    assert spec.headers == {"X-A": "1", "Content-Type": "application/json"}
    assert spec.connect_timeout_ms == 1000
    assert spec.read_timeout_ms == 2000
    assert spec.body == "{}"


def test_build_request_spec_checks_host_before_port():
    with pytest.raises(ProbeValidationError) as excinfo:
        build_request_spec("", "70000", settings=ProbeSettings())
    assert excinfo.value.field == "host"


def test_request_spec_url_is_never_https():
    spec = build_request_spec("example.com", 443, "/", settings=ProbeSettings())
    assert spec.url == "http://example.com:443/"
    ipv6 = build_request_spec("::1", "8080", "/x", settings=ProbeSettings())
    assert ipv6.url == "http://[::1]:8080/x"


def test_parse_host_keeps_bracketed_and_scoped_ipv6():
    assert parse_host("[fe80::1]") == "[fe80::1]"
    assert parse_host("fe80::1%eth0") == "[fe80::1%eth0]"


@pytest.mark.parametrize("value", ["example.com:8080", "192.168.1.5:80", "http://device.local", "[device.local]", "[::1"])
def test_parse_host_rejects_port_or_scheme(value):
    with pytest.raises(ProbeValidationError) as excinfo:
        parse_host(value)
    assert excinfo.value.field == "host"
    assert excinfo.value.message.startswith(HOST_INVALID)
