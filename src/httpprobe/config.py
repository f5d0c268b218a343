# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpprobe."""

import os
from dataclasses import dataclass, replace

from .version import __version__

DEFAULT_USER_AGENT = f"httpprobe/{__version__}"
DEFAULT_TIMEOUT_MS = 10_000


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _positive_int_env(name: str, default: int) -> int:
    parsed = _int_env(name, default)
    return parsed if parsed > 0 else default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ProbeSettings:
    """Probe defaults. All durations are in milliseconds."""

    connect_timeout_ms: int = DEFAULT_TIMEOUT_MS
    read_timeout_ms: int = DEFAULT_TIMEOUT_MS
    race_timeout_ms: int = DEFAULT_TIMEOUT_MS
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    fail_on_status: bool = False
    cancel_abandoned: bool = True

    @property
    def race_timeout(self) -> float:
        """Race timer duration in seconds."""
        return self.race_timeout_ms / 1000.0

    def with_timeout(self, timeout_ms: int) -> "ProbeSettings":
        """Return a copy that uses one duration for the race, connect and read timeouts."""
        if timeout_ms <= 0:
            return self
        return replace(self, connect_timeout_ms=timeout_ms, read_timeout_ms=timeout_ms, race_timeout_ms=timeout_ms)

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            connect_timeout_ms=_positive_int_env("HTTPPROBE_CONNECT_TIMEOUT_MS", cls.connect_timeout_ms),
            read_timeout_ms=_positive_int_env("HTTPPROBE_READ_TIMEOUT_MS", cls.read_timeout_ms),
            race_timeout_ms=_positive_int_env("HTTPPROBE_TIMEOUT_MS", cls.race_timeout_ms),
            user_agent=os.getenv("HTTPPROBE_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("HTTPPROBE_REDIRECTS", cls.allow_redirects),
            fail_on_status=_bool_env("HTTPPROBE_FAIL_ON_STATUS", cls.fail_on_status),
            cancel_abandoned=_bool_env("HTTPPROBE_CANCEL_ABANDONED", cls.cancel_abandoned),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
