# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Input validation and RequestSpec construction."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Mapping

from ..config import ProbeSettings, load_probe_settings
from ..errors import ProbeValidationError
from ..models.probe import CONTENT_TYPE_HEADER, DEFAULT_CONTENT_TYPE, HTTP_METHODS, RequestSpec

HOST_REQUIRED = "Host is required"
HOST_INVALID = "Host must be a name or IP address without scheme or port"
PORT_REQUIRED = "Valid port number (1-65535) is required"
MIN_PORT = 1
MAX_PORT = 65535

_PORT_RE = re.compile(r"[0-9]+")


def _ipv6_literal(host: str) -> str | None:
    inner = host[1:-1] if host.startswith("[") and host.endswith("]") else host
    try:
        address = ipaddress.ip_address(inner.split("%", 1)[0])
    except ValueError:
        return None
    return inner if address.version == 6 else None


def parse_host(value: str | None) -> str:
    host = (value or "").strip()
    if not host:
        raise ProbeValidationError("host", HOST_REQUIRED)
    if ":" in host or host.startswith("["):
        # Only IPv6 literals may contain ':'; they need brackets to sit in front of ":port".
        literal = _ipv6_literal(host)
        if literal is None:
            raise ProbeValidationError("host", f"{HOST_INVALID}: {host}")
        host = f"[{literal}]"
    return host


def parse_port(value: int | str | None) -> int:
    """Accept exactly the integers 1..65535, given as ``int`` or decimal text."""
    if isinstance(value, bool):
        raise ProbeValidationError("port", PORT_REQUIRED)
    if isinstance(value, int):
        port = value
    else:
        text = (value or "").strip()
        if not _PORT_RE.fullmatch(text):
            raise ProbeValidationError("port", PORT_REQUIRED)
        port = int(text)
    if port < MIN_PORT or port > MAX_PORT:
        raise ProbeValidationError("port", PORT_REQUIRED)
    return port


def normalize_path(value: str | None) -> str:
    path = (value or "").strip()
    if not path:
        return "/"
    if not path.startswith("/"):
        path = f"/{path}"
    return path


def parse_method(value: str | None) -> str:
    method = (value or "GET").strip().upper() or "GET"
    if method not in HTTP_METHODS:
        raise ProbeValidationError("method", f"Unsupported HTTP method: {method} (expected one of {', '.join(HTTP_METHODS)})")
    return method


def build_headers(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    """Caller headers plus the fixed JSON content type."""
    headers = {
        str(key): str(value)
        for key, value in (extra or {}).items()
        if str(key).strip() and str(key).strip().lower() != CONTENT_TYPE_HEADER.lower()
    }
    headers[CONTENT_TYPE_HEADER] = DEFAULT_CONTENT_TYPE
    return headers


def build_request_spec(
    host: str | None,
    port: int | str | None,
    path: str | None = "",
    method: str | None = "GET",
    *,
    headers: Mapping[str, str] | None = None,
    body: str | None = None,
    settings: ProbeSettings | None = None,
) -> RequestSpec:
    """
    Validate raw probe input and build a RequestSpec.

    Host is checked before port; the first failure raises ``ProbeValidationError``.
    """
    settings = settings or load_probe_settings()
    return RequestSpec(
        host=parse_host(host),
        port=parse_port(port),
        path=normalize_path(path),
        method=parse_method(method),
        headers=build_headers(headers),
        connect_timeout_ms=settings.connect_timeout_ms,
        read_timeout_ms=settings.read_timeout_ms,
        body=body,
    )


__all__ = [
    "HOST_INVALID",
    "HOST_REQUIRED",
    "PORT_REQUIRED",
    "build_headers",
    "build_request_spec",
    "normalize_path",
    "parse_host",
    "parse_method",
    "parse_port",
]
