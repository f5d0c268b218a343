# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe status indicator."""

from __future__ import annotations

from collections import deque
from enum import Enum

HISTORY_LIMIT = 32


class Status(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


class StatusIndicator:
    """Holds the single current status and its display label."""

    def __init__(self, history_limit: int = HISTORY_LIMIT) -> None:
        self.state = Status.IDLE
        self.label = "Ready"
        self._history: deque[Status] = deque(maxlen=history_limit)

    @property
    def history(self) -> list[Status]:
        """Most recent transitions, oldest first."""
        return list(self._history)

    def update(self, state: Status, label: str) -> None:
        self.state = state
        self.label = label
        self._history.append(state)

    def pending(self) -> None:
        self.update(Status.PENDING, "Requesting...")

    def success(self, status_code: int) -> None:
        self.update(Status.SUCCESS, f"Success ({status_code})")

    def error(self) -> None:
        self.update(Status.ERROR, "Error")

    def __str__(self) -> str:
        return self.label
