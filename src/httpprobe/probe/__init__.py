# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe runner exports."""

from .body import decode_body
from .race import race_with_timeout
from .render import READY_BANNER, REACHABILITY_HINT, describe_result, describe_start
from .runner import ProbeRunner
from .validate import HOST_REQUIRED, PORT_REQUIRED, build_request_spec

__all__ = [
    "HOST_REQUIRED",
    "PORT_REQUIRED",
    "READY_BANNER",
    "REACHABILITY_HINT",
    "ProbeRunner",
    "build_request_spec",
    "decode_body",
    "describe_result",
    "describe_start",
    "race_with_timeout",
]
