# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transcript lines for probe events."""

from __future__ import annotations

from ..errors import error_category_to_reason
from ..models.probe import (
    ProbeInvalid,
    ProbeResult,
    ProbeSuccess,
    ProbeTimeout,
    ProbeTransportError,
    RequestSpec,
)

REACHABILITY_HINT = "This may indicate the host is not reachable on the current network."
READY_BANNER = "HTTP probe ready. Use this to test whether traffic routes through the connected network."


def _seconds(ms: int) -> str:
    return f"{ms / 1000:g}"


def describe_start(spec: RequestSpec, timeout_ms: int) -> list[str]:
    return [f"Making {spec.method} request to: {spec.url} ({_seconds(timeout_ms)}s timeout)"]


def _describe_success(result: ProbeSuccess) -> list[str]:
    lines = [
        "=== Response Details ===",
        f"Status: {result.status_code}",
        f"Duration: {result.duration_ms}ms",
        f"URL: {result.url}",
        "=== Headers ===",
    ]
    lines.extend(f"{key}: {value}" for key, value in result.headers.items())
    lines.append("=== Response Body (as text) ===")
    lines.append(result.body_text)
    return lines


def _describe_timeout(result: ProbeTimeout) -> list[str]:
    return [
        "=== Timeout ===",
        f"Timeout: Request exceeded {_seconds(result.timeout_ms)} second timeout (gave up after {result.elapsed_ms}ms)",
        REACHABILITY_HINT,
    ]


def _describe_transport_error(result: ProbeTransportError) -> list[str]:
    lines = ["=== Transport Error ===", f"Message: {result.message}"]
    reason = error_category_to_reason(result.category)
    if reason:
        lines.append(f"Reason: {reason}")
    if result.status_code is not None:
        lines.append(f"Status: {result.status_code}")
    if result.body_text:
        lines.append(f"Response: {result.body_text}")
    return lines


def _describe_invalid(result: ProbeInvalid) -> list[str]:
    return ["=== Validation Error ===", f"Error: {result.message}"]


def describe_result(result: ProbeResult) -> list[str]:
    """Return transcript lines for a settled probe, in the order they are logged."""
    if isinstance(result, ProbeSuccess):
        return _describe_success(result)
    if isinstance(result, ProbeTimeout):
        return _describe_timeout(result)
    if isinstance(result, ProbeTransportError):
        return _describe_transport_error(result)
    if isinstance(result, ProbeInvalid):
        return _describe_invalid(result)
    raise TypeError(f"Unknown probe result: {type(result).__name__}")


__all__ = ["READY_BANNER", "REACHABILITY_HINT", "describe_result", "describe_start"]
