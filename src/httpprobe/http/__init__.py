# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport exports."""

from .adapters import StubTransport
from .client import Transport, create_default_transport
from .headers import header_value, normalize_headers
from .httpx_client import HttpxTransport, payload_from_response
from .models import Headers, HttpRequest, HttpResponse

__all__ = [
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "StubTransport",
    "Transport",
    "create_default_transport",
    "header_value",
    "normalize_headers",
    "payload_from_response",
]
