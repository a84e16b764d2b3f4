# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers."""

from __future__ import annotations

SCHEME_SEPARATOR = "://"


def normalize_url(url: str, *, use_http: bool = False) -> str:
    """
    Return `url` with a scheme guaranteed.

    Anything already containing `://` (anywhere, not only as a prefix) is left
    untouched; bad URLs are reported by the HTTP client, not here.

    Example:
      example.com -> https://example.com
      example.com (use_http) -> http://example.com
    """
    if SCHEME_SEPARATOR in url:
        return url
    scheme = "http" if use_http else "https"
    return f"{scheme}{SCHEME_SEPARATOR}{url}"


__all__ = ["normalize_url"]
