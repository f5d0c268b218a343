# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpprobe package entrypoint.

A manual, single-shot HTTP probe: one plain-HTTP request per trigger, raced against a
fixed timeout, with the raw response or error rendered into a newest-first transcript
and a tri-state status. Network I/O sits behind an injectable transport interface and
results are modeled with typed dataclasses.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import ErrorCategory, ProbeValidationError, RaceTimeout, TransportFailure
from .http import (
    HttpRequest,
    HttpResponse,
    HttpxTransport,
    StubTransport,
    Transport,
    create_default_transport,
)
from .log import setup_logging
from .models import (
    ProbeInvalid,
    ProbeResult,
    ProbeSuccess,
    ProbeTimeout,
    ProbeTransportError,
    RequestSpec,
    Status,
    StatusIndicator,
)
from .probe import ProbeRunner, build_request_spec, decode_body
from .transcript import Transcript
from .version import __version__

__all__ = [
    "ErrorCategory",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "ProbeInvalid",
    "ProbeResult",
    "ProbeRunner",
    "ProbeSettings",
    "ProbeSuccess",
    "ProbeTimeout",
    "ProbeTransportError",
    "ProbeValidationError",
    "RaceTimeout",
    "RequestSpec",
    "Status",
    "StatusIndicator",
    "StubTransport",
    "Transcript",
    "Transport",
    "TransportFailure",
    "build_request_spec",
    "create_default_transport",
    "decode_body",
    "load_probe_settings",
    "setup_logging",
    "__version__",
]
