# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for httpprobe."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("HTTPPROBE_LOG_LEVEL", "WARNING").upper()

# httpx/httpcore log every exchange at INFO; that duplicates the transcript.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> int:
    """Configure standard logging for CLI/library use and return the effective level."""
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    if not isinstance(effective_level, int):
        effective_level = logging.WARNING
    logging.basicConfig(
        level=effective_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    transport_level = effective_level if effective_level <= logging.DEBUG else max(effective_level, logging.WARNING)
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return effective_level


__all__ = ["setup_logging"]
