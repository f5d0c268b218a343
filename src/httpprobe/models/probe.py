# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request and result models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Union

from ..config import DEFAULT_TIMEOUT_MS
from ..errors import ErrorCategory

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")
CONTENT_TYPE_HEADER = "Content-Type"
DEFAULT_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class RequestSpec:
    """A validated probe target. Built fresh per invocation and never mutated."""

    host: str
    port: int
    path: str = "/"
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    connect_timeout_ms: int = DEFAULT_TIMEOUT_MS
    read_timeout_ms: int = DEFAULT_TIMEOUT_MS
    body: str | None = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}{self.path}"


@dataclass
class _ResultBase:
    kind: ClassVar[str] = ""
    ok: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind
        data["ok"] = self.ok
        return data


@dataclass
class ProbeSuccess(_ResultBase):
    kind: ClassVar[str] = "success"
    ok: ClassVar[bool] = True

    status_code: int
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body_text: str = ""
    duration_ms: int = 0


@dataclass
class ProbeTimeout(_ResultBase):
    kind: ClassVar[str] = "timeout"

    elapsed_ms: int
    timeout_ms: int = DEFAULT_TIMEOUT_MS


@dataclass
class ProbeTransportError(_ResultBase):
    kind: ClassVar[str] = "transport_error"

    message: str
    status_code: int | None = None
    body_text: str | None = None
    duration_ms: int = 0
    category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["category"] = self.category.value
        return data


@dataclass
class ProbeInvalid(_ResultBase):
    kind: ClassVar[str] = "validation_error"

    message: str
    field: str = ""


ProbeResult = Union[ProbeSuccess, ProbeTimeout, ProbeTransportError, ProbeInvalid]
