# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""First-settle-wins race between an operation and a timer."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from ..errors import RaceTimeout, TransportFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _discard_result(task: asyncio.Future) -> None:
    # Consume the late outcome so asyncio does not report it as never retrieved.
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Abandoned operation finished with %s: %s", type(exc).__name__, exc)
    else:
        logger.debug("Abandoned operation finished after the race was lost")


async def race_with_timeout(operation: Awaitable[T], timeout: float, *, cancel_abandoned: bool = True) -> T:
    """
    Await ``operation`` against an independent timer of ``timeout`` seconds.

    Returns the operation's result (or re-raises its exception) when it settles first.
    Raises ``RaceTimeout`` when the timer settles first; the operation's eventual
    outcome is then never consumed by the caller. With ``cancel_abandoned`` the losing
    operation is also cancelled so its connection is released.
    """
    task = asyncio.ensure_future(operation)
    timer = asyncio.ensure_future(asyncio.sleep(timeout))
    try:
        done, _ = await asyncio.wait({task, timer}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        task.cancel()
        timer.cancel()
        raise

    if task in done:
        timer.cancel()
        if task.cancelled():
            # The operation cancelled itself; only the caller's own cancellation propagates.
            raise TransportFailure("Request was cancelled")
        return task.result()

    if cancel_abandoned:
        task.cancel()
    task.add_done_callback(_discard_result)
    raise RaceTimeout(timeout)
