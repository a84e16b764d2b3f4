# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-probe execution: one GET, one ProbeRecord."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import ProbeError
from .http.client import HttpClient
from .http.headers import header_value, select_headers
from .http.models import HttpRequest
from .models import ProbeRecord


class Prober:
    """Issues a GET through an HttpClient and extracts the selected headers."""

    def __init__(self, http_client: HttpClient, selected_headers: Sequence[str] = ("",)):
        self.http_client = http_client
        self.selected_headers = tuple(selected_headers)

    def probe(self, url: str) -> ProbeRecord:
        """Probe `url` once. Raises ProbeError on any client failure."""
        response = self.http_client.request(HttpRequest(url=url))
        if not response.ok:
            raise ProbeError(
                response.error_message or "request failed",
                url=url,
                category=response.error_category,
            )
        return ProbeRecord(
            status_line=response.status_line,
            latency_ms=max(0, response.elapsed_ms),
            host=header_value(response.headers, "Host"),
            headers=select_headers(response.headers, self.selected_headers),
            url=response.url,
        )


__all__ = ["Prober"]
