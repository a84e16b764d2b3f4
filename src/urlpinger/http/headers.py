# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header selection utilities.

HTTP header field names are case-insensitive (RFC 9110). Responses are stored with
lowercase keys and only the first value of a repeated field, so lookups here are a
lowercase dict access.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def parse_header_names(raw: str) -> tuple[str, ...]:
    """
    Split a comma-delimited header list.

    Whitespace is kept as part of the name, and an empty string yields a single
    empty name, so `""` still produces one (empty) column entry.
    """
    return tuple(raw.split(","))


def first_values(items: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Collapse raw (name, value) pairs into a lowercase-keyed dict, first value wins."""
    out: dict[str, str] = {}
    for key, value in items:
        out.setdefault(key.lower(), value)
    return out


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default
    value = headers.get(name.lower())
    if value is None:
        # Caller-built mappings may not be lowercased.
        lower = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lower:
                return candidate
        return default
    return value


def select_headers(headers: Mapping[str, str] | None, names: Iterable[str]) -> dict[str, str]:
    """Build an ordered name -> value mapping in the configured order."""
    return {name: header_value(headers, name) for name in names}


__all__ = ["first_values", "header_value", "parse_header_names", "select_headers"]
