# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Append-only, newest-first transcript of timestamped diagnostic lines."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from datetime import datetime

Clock = Callable[[], datetime]


class Transcript:
    """
    Running log shown to the user.

    Every entry is prefixed with a local ``[HH:MM:SS]`` timestamp and inserted at the
    front, so iteration yields the newest entry first and the oldest last.
    """

    def __init__(self, clock: Clock | None = None):
        self._clock = clock or datetime.now
        self._entries: deque[str] = deque()

    def log(self, message: str) -> str:
        entry = f"[{self._clock().strftime('%H:%M:%S')}] {message}"
        self._entries.appendleft(entry)
        return entry

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def text(self) -> str:
        return "\n".join(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, needle: object) -> bool:
        return isinstance(needle, str) and any(needle in entry for entry in self._entries)
