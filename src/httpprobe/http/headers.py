# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def _iter_header_items(headers: object) -> Iterable[tuple[object, object]]:
    multi_items = getattr(headers, "multi_items", None)
    if callable(multi_items):
        return multi_items()
    if isinstance(headers, Mapping):
        return headers.items()
    items = getattr(headers, "items", None)
    if callable(items):
        return items()
    return headers  # type: ignore[return-value]


def normalize_headers(headers: object | None) -> dict[str, str]:
    """
    Return a plain ``str -> str`` copy of a header collection.

    Accepts mappings, ``httpx.Headers`` or ``(name, value)`` pairs. Keys are unique;
    when the source repeats a name the last value wins. Key casing is preserved.
    """
    if not headers:
        return {}
    out: dict[str, str] = {}
    try:
        pairs = list(_iter_header_items(headers))
    except TypeError:
        return {}
    for pair in pairs:
        try:
            key, value = pair
        except (TypeError, ValueError):
            continue
        if key is None:
            continue
        name = str(key).strip()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default
    lower = name.lower()
    for key, value in headers.items():
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()
    return default


__all__ = ["header_value", "normalize_headers"]
