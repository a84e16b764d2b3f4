# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import first_values, header_value, parse_header_names, select_headers
from .models import Headers, HttpRequest, HttpResponse
from .url import normalize_url

__all__ = [
    "Headers",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "create_default_http_client",
    "first_values",
    "header_value",
    "normalize_url",
    "parse_header_names",
    "select_headers",
]
