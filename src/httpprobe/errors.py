# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import asyncio
import socket
from enum import Enum
from typing import Any

import httpx


class ProbeValidationError(ValueError):
    """Raised when probe input is rejected before any network I/O."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class TransportFailure(Exception):
    """
    Failure surfaced by a transport.

    ``status_code`` and ``data`` are only present when the failure carried a response
    (e.g. an HTTP error status); connection-level failures carry neither.
    """

    def __init__(self, message: str, *, status_code: int | None = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data


class RaceTimeout(Exception):
    """Raised when the race timer settles before the raced operation."""

    def __init__(self, timeout: float):
        super().__init__(f"Request timeout after {timeout:g} seconds")
        self.timeout = timeout


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    HTTP_STATUS = "HTTP_STATUS"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def _exception_chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map transport exceptions (httpx, socket, TransportFailure) to ErrorCategory.
    """
    chain = _exception_chain(exc)

    if any(isinstance(item, (socket.gaierror, socket.herror)) for item in chain):
        return ErrorCategory.DNS_ERROR

    for item in chain:
        if isinstance(item, TransportFailure) and item.status_code is not None:
            return ErrorCategory.HTTP_STATUS
        if isinstance(item, (httpx.TimeoutException, asyncio.TimeoutError)):
            return ErrorCategory.TIMEOUT
        if isinstance(item, httpx.HTTPStatusError):
            return ErrorCategory.HTTP_STATUS
        if isinstance(item, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError)):
            return ErrorCategory.CONNECTION_ERROR
        if isinstance(item, (httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.UnsupportedProtocol)):
            return ErrorCategory.PROTOCOL_ERROR
        if isinstance(item, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
            return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Transport timed out",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "Host name could not be resolved",
        ErrorCategory.HTTP_STATUS: "Server answered with an error status",
        ErrorCategory.PROTOCOL_ERROR: "Malformed HTTP exchange",
        ErrorCategory.UNKNOWN_ERROR: "Request failed",
        None: "",
    }
    return mapping.get(category, "Request failed")


__all__ = [
    "ErrorCategory",
    "ProbeValidationError",
    "RaceTimeout",
    "TransportFailure",
    "categorize_exception",
    "error_category_to_reason",
]
