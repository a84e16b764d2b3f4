# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import ErrorCategory

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    `headers` is lowercase-keyed and holds the first value of each field. The body is
    never captured. Failed requests come back with `ok=False` and the error fields set
    instead of raising.
    """

    ok: bool
    status_code: int | None = None
    reason_phrase: str = ""
    headers: Headers = field(default_factory=dict)
    url: str | None = None
    elapsed_ms: int = 0
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE

    @property
    def status_line(self) -> str:
        """Status as shown by the server, e.g. `200 OK`."""
        if self.status_code is None:
            return ""
        return f"{self.status_code} {self.reason_phrase}".strip()
