# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Probe runner.

Validates user input, fires one plain-HTTP request through the configured transport,
races it against the probe timeout and renders whatever settles first into the
transcript. Every failure is converted into a result at this boundary; nothing is
retried and nothing is raised to the caller.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from contextlib import suppress
from dataclasses import replace

from ..config import ProbeSettings, load_probe_settings
from ..errors import ProbeValidationError, RaceTimeout, TransportFailure, categorize_exception
from ..http.client import Transport, create_default_transport
from ..http.headers import normalize_headers
from ..http.models import HttpRequest, HttpResponse
from ..models.probe import (
    ProbeInvalid,
    ProbeResult,
    ProbeSuccess,
    ProbeTimeout,
    ProbeTransportError,
    RequestSpec,
)
from ..models.status import StatusIndicator
from ..transcript import Transcript
from .body import decode_body
from .race import race_with_timeout
from .render import READY_BANNER, describe_result, describe_start
from .validate import build_headers, build_request_spec, normalize_path, parse_host, parse_method, parse_port

logger = logging.getLogger(__name__)


def _failure_status(exc: BaseException) -> int | None:
    status = getattr(exc, "status_code", None)
    if status is None:
        status = getattr(getattr(exc, "response", None), "status_code", None)
    return status if isinstance(status, int) else None


class ProbeRunner:
    """Runs one probe at a time and owns the transcript and status it reports to."""

    def __init__(
        self,
        transport: Transport | None = None,
        settings: ProbeSettings | None = None,
        *,
        transcript: Transcript | None = None,
        status: StatusIndicator | None = None,
        timer: Callable[[], float] = time.monotonic,
        banner: bool = False,
    ):
        self.settings = settings if settings is not None else load_probe_settings()
        self.transport = transport if transport is not None else create_default_transport(self.settings)
        self.transcript = transcript if transcript is not None else Transcript()
        self.status = status if status is not None else StatusIndicator()
        self._timer = timer
        self._busy = False
        if banner:
            self.transcript.log(READY_BANNER)

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def trigger_enabled(self) -> bool:
        return not self._busy

    async def submit(
        self,
        host: str | None,
        port: int | str | None,
        path: str | None = "",
        method: str | None = "GET",
        *,
        headers: Mapping[str, str] | None = None,
        body: str | None = None,
    ) -> ProbeResult | None:
        """Validate raw input and run it. Returns ``None`` while another probe is in flight."""
        if self._busy:
            logger.debug("Probe already in flight; ignoring submit")
            return None
        try:
            spec = build_request_spec(host, port, path, method, headers=headers, body=body, settings=self.settings)
        except ProbeValidationError as exc:
            return self._reject(exc)
        return await self.run_probe(spec)

    async def run_probe(self, spec: RequestSpec) -> ProbeResult | None:
        if self._busy:
            logger.debug("Probe already in flight; ignoring run_probe")
            return None
        try:
            spec = replace(
                spec,
                host=parse_host(spec.host),
                port=parse_port(spec.port),
                path=normalize_path(spec.path),
                method=parse_method(spec.method),
                headers=build_headers(spec.headers),
            )
        except ProbeValidationError as exc:
            return self._reject(exc)

        self._busy = True
        try:
            return await self._execute(spec)
        finally:
            self._busy = False

    async def _execute(self, spec: RequestSpec) -> ProbeResult:
        timeout_ms = self.settings.race_timeout_ms
        self.transcript.log(describe_start(spec, timeout_ms)[0])
        self.status.pending()
        logger.info("Probing %s %s", spec.method, spec.url)

        request = HttpRequest(
            url=spec.url,
            method=spec.method,
            headers=dict(spec.headers),
            body=spec.body,
            connect_timeout_ms=spec.connect_timeout_ms,
            read_timeout_ms=spec.read_timeout_ms,
            allow_redirects=self.settings.allow_redirects,
        )

        start = self._timer()
        result: ProbeResult
        try:
            response = await race_with_timeout(
                self.transport.request(request),
                self.settings.race_timeout,
                cancel_abandoned=self.settings.cancel_abandoned,
            )
        except RaceTimeout:
            result = ProbeTimeout(elapsed_ms=self._elapsed_ms(start), timeout_ms=timeout_ms)
            logger.warning("Probe to %s timed out after %sms", spec.url, result.elapsed_ms)
        except TransportFailure as exc:
            result = ProbeTransportError(
                message=exc.message or type(exc).__name__,
                status_code=exc.status_code,
                body_text=None if exc.data is None else decode_body(exc.data),
                duration_ms=self._elapsed_ms(start),
                category=categorize_exception(exc),
            )
            logger.warning("Probe to %s failed: %s", spec.url, result.message)
        except Exception as exc:  # noqa: BLE001
            data = getattr(exc, "data", None)
            result = ProbeTransportError(
                message=str(exc) or type(exc).__name__,
                status_code=_failure_status(exc),
                body_text=None if data is None else decode_body(data),
                duration_ms=self._elapsed_ms(start),
                category=categorize_exception(exc),
            )
            logger.warning("Probe to %s raised %s: %s", spec.url, type(exc).__name__, exc)
        else:
            result = self._success(spec, response, self._elapsed_ms(start))
            logger.info("Probe to %s answered %s in %sms", spec.url, result.status_code, result.duration_ms)

        self._settle(result)
        return result

    def _elapsed_ms(self, start: float) -> int:
        return int(round((self._timer() - start) * 1000))

    @staticmethod
    def _success(spec: RequestSpec, response: HttpResponse, duration_ms: int) -> ProbeSuccess:
        return ProbeSuccess(
            status_code=response.status_code,
            url=response.url or spec.url,
            headers=normalize_headers(response.headers),
            body_text=decode_body(response.data),
            duration_ms=duration_ms,
        )

    def _reject(self, exc: ProbeValidationError) -> ProbeInvalid:
        logger.info("Rejected probe input (%s): %s", exc.field, exc.message)
        result = ProbeInvalid(message=exc.message, field=exc.field)
        self._settle(result)
        return result

    def _settle(self, result: ProbeResult) -> None:
        for line in describe_result(result):
            self.transcript.log(line)
        if isinstance(result, ProbeSuccess):
            self.status.success(result.status_code)
        else:
            self.status.error()

    async def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is None:
            return
        with suppress(Exception):
            await close()

    async def __aenter__(self) -> ProbeRunner:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.close()
