# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio

import pytest

from httpprobe.errors import RaceTimeout, TransportFailure
from httpprobe.probe.race import race_with_timeout


async def _settle_after(delay: float, value=None, exc: BaseException | None = None):
    await asyncio.sleep(delay)
    if exc is not None:
        raise exc
    return value


@pytest.mark.asyncio
async def test_operation_settling_first_wins():
    assert await race_with_timeout(_settle_after(0, "done"), 1.0) == "done"


@pytest.mark.asyncio
async def test_operation_exception_is_reraised():
    with pytest.raises(ValueError, match="boom"):
        await race_with_timeout(_settle_after(0, exc=ValueError("boom")), 1.0)


@pytest.mark.asyncio
async def test_timer_settling_first_raises_race_timeout():
    with pytest.raises(RaceTimeout) as excinfo:
        await race_with_timeout(_settle_after(1.0, "late"), 0.01)
    assert excinfo.value.timeout == 0.01


@pytest.mark.asyncio
async def test_abandoned_operation_is_cancelled():
    state = {"cancelled": False}

    async def slow():
        try:
            await asyncio.sleep(1.0)
        except asyncio.CancelledError:
            state["cancelled"] = True
            raise

    with pytest.raises(RaceTimeout):
        await race_with_timeout(slow(), 0.01)
    await asyncio.sleep(0)
    assert state["cancelled"] is True


@pytest.mark.asyncio
async def test_abandoned_operation_can_be_left_running():
    state = {"finished": False}

    async def slow():
        await asyncio.sleep(0.05)
        state["finished"] = True
        raise RuntimeError("late failure is never surfaced")

    with pytest.raises(RaceTimeout):
        await race_with_timeout(slow(), 0.01, cancel_abandoned=False)
    await asyncio.sleep(0.1)
    assert state["finished"] is True


@pytest.mark.asyncio
async def test_cancelling_the_caller_cancels_both_sides():
    state = {"cancelled": False}

    async def slow():
        try:
            await asyncio.sleep(1.0)
        except asyncio.CancelledError:
            state["cancelled"] = True
            raise

    waiter = asyncio.create_task(race_with_timeout(slow(), 5.0))
    await asyncio.sleep(0.01)
    waiter.cancel()
    with pytest.raises(asyncio.CancelledError):
        await waiter
    await asyncio.sleep(0)
    assert state["cancelled"] is True


@pytest.mark.asyncio
async def test_operation_cancelling_itself_becomes_transport_failure():
    with pytest.raises(TransportFailure, match="Request was cancelled"):
        await race_with_timeout(_settle_after(0, exc=asyncio.CancelledError()), 1.0)
