# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for httpprobe."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import (
    HTTP_METHODS,
    ProbeInvalid,
    ProbeResult,
    ProbeSuccess,
    ProbeTimeout,
    ProbeTransportError,
    RequestSpec,
)
from .status import Status, StatusIndicator

__all__ = [
    "HTTP_METHODS",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeInvalid",
    "ProbeResult",
    "ProbeSuccess",
    "ProbeTimeout",
    "ProbeTransportError",
    "RequestSpec",
    "Status",
    "StatusIndicator",
]
