# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementation."""

from __future__ import annotations

from typing import Any

import httpx

from ..config import ProbeSettings, load_probe_settings
from ..errors import TransportFailure
from .client import Transport
from .headers import header_value, normalize_headers
from .models import HttpRequest, HttpResponse

_TEXT_CONTENT_TYPES = (
    "application/javascript",
    "application/x-www-form-urlencoded",
    "application/xml",
)


def _media_type(response: httpx.Response) -> str:
    return header_value(response.headers, "content-type").split(";", 1)[0].strip().lower()


def payload_from_response(response: httpx.Response) -> Any:
    """
    Pick the payload shape for a response body.

    JSON media types are parsed into structured values (falling back to text when the
    body does not parse), textual media types are returned as ``str`` and everything
    else is handed back as raw bytes.
    """
    if not response.content:
        return ""
    media_type = _media_type(response)
    if media_type == "application/json" or media_type.endswith("+json"):
        try:
            return response.json()
        except ValueError:
            return response.text
    if media_type.startswith("text/") or media_type.endswith("+xml") or media_type in _TEXT_CONTENT_TYPES:
        return response.text
    return response.content


class HttpxTransport(Transport):
    """Asynchronous httpx client wrapper."""

    def __init__(self, settings: ProbeSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_probe_settings()
        self._client = client or httpx.AsyncClient(follow_redirects=self.settings.allow_redirects)

    @staticmethod
    def _timeout_for(request: HttpRequest) -> httpx.Timeout:
        connect = request.connect_timeout_ms / 1000.0
        read = request.read_timeout_ms / 1000.0
        return httpx.Timeout(connect=connect, read=read, write=read, pool=connect)

    async def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)

        try:
            resp = await self._client.request(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=self._timeout_for(request),
                follow_redirects=request.allow_redirects,
            )
        except httpx.HTTPError as exc:
            raise TransportFailure(str(exc) or type(exc).__name__) from exc

        data = payload_from_response(resp)
        if self.settings.fail_on_status and resp.is_error:
            reason = resp.reason_phrase or "error"
            raise TransportFailure(
                f"HTTP {resp.status_code} {reason}",
                status_code=resp.status_code,
                data=data,
            )

        return HttpResponse(
            status_code=resp.status_code,
            url=str(resp.url),
            headers=normalize_headers(resp.headers),
            data=data,
        )

    async def close(self) -> None:
        await self._client.aclose()
