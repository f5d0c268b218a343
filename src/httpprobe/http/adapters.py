# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable transports used for tests and offline runs."""

from __future__ import annotations

import asyncio

from ..errors import TransportFailure
from .client import Transport
from .models import HttpRequest, HttpResponse


class StubTransport(Transport):
    """
    Deterministic, programmable Transport.

    Outcomes are keyed by URL and may be an ``HttpResponse`` or an exception to raise.
    ``settle_after`` delays every exchange by that many seconds; ``None`` means the
    exchange never settles.
    """

    def __init__(
        self,
        responses: dict[str, HttpResponse | BaseException] | None = None,
        *,
        settle_after: float | None = 0.0,
    ):
        self._responses: dict[str, HttpResponse | BaseException] = dict(responses or {})
        self.settle_after = settle_after
        self.requests: list[HttpRequest] = []
        self.completed = 0
        self.closed = False

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    def fail(self, url: str, exc: BaseException) -> None:
        self._responses[url] = exc

    async def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if self.settle_after is None:
            await asyncio.Event().wait()
        elif self.settle_after > 0:
            await asyncio.sleep(self.settle_after)
        self.completed += 1

        outcome = self._responses.get(request.url)
        if outcome is None:
            raise TransportFailure("No stubbed response configured")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True
