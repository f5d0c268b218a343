# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and factory."""

from typing import Protocol

from ..config import ProbeSettings, load_probe_settings
from .models import HttpRequest, HttpResponse


class Transport(Protocol):
    """
    Minimal protocol for performing one HTTP exchange.

    ``request`` resolves with the settled response or raises (ideally
    ``TransportFailure``) when the exchange fails.
    """

    async def request(self, request: HttpRequest) -> HttpResponse: ...

    async def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_transport(settings: ProbeSettings | None = None) -> Transport:
    """Factory for the default httpx-backed transport."""
    from .httpx_client import HttpxTransport

    return HttpxTransport(settings or load_probe_settings())
