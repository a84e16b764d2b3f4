# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
import time

import httpx

from ..config import HttpSettings
from ..errors import categorize_exception
from .client import HttpClient
from .headers import first_values
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper that times each request up to the response headers."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or HttpSettings()
        limits = httpx.Limits() if self.settings.keepalive else httpx.Limits(max_keepalive_connections=0)
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            max_redirects=self.settings.max_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
            limits=limits,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        try:
            start = time.perf_counter()
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=timeout,
            ) as resp:
                # stream() returns once the headers are in; the body is never read.
                elapsed_ms = max(0, int((time.perf_counter() - start) * 1000))
                response = HttpResponse(
                    ok=True,
                    status_code=resp.status_code,
                    reason_phrase=resp.reason_phrase,
                    headers=first_values(resp.headers.multi_items()),
                    url=str(resp.url),
                    elapsed_ms=elapsed_ms,
                )
            logger.debug("%s %s -> %s in %dms", request.method, request.url, response.status_line, elapsed_ms)
            return response
        except Exception as exc:  # noqa: BLE001
            logger.debug("%s %s failed: %r", request.method, request.url, exc)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                error_category=categorize_exception(exc),
            )

    def close(self) -> None:
        self._client.close()
