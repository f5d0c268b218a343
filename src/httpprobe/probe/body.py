# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response payload to text."""

from __future__ import annotations

import json
from typing import Any


def decode_body(data: Any) -> str:
    """
    Render a transport payload as human-readable text.

    Text is returned as-is, binary buffers are decoded as UTF-8 and any other value is
    serialized to indented JSON. Used for both successful and error responses.
    """
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("utf-8", errors="replace")
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


__all__ = ["decode_body"]
