# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models exchanged with transports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..config import DEFAULT_TIMEOUT_MS

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by Transport implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    connect_timeout_ms: int = DEFAULT_TIMEOUT_MS
    read_timeout_ms: int = DEFAULT_TIMEOUT_MS
    allow_redirects: bool = True


@dataclass
class HttpResponse:
    """
    Settled transport response.

    ``data`` is whatever the transport produced for the payload: text, raw bytes,
    or an already-parsed structured value.
    """

    status_code: int
    url: str
    headers: Headers = field(default_factory=dict)
    data: Any = None
