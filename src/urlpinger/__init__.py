# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
url-pinger package entrypoint.

This package repeatedly probes a single URL with HTTP GET requests and prints one
aligned table row per response: timestamp, counter, URL, status line, latency and
a chosen set of response headers. HTTP behavior is abstracted behind an injectable
client interface, and domain objects are modeled with typed dataclasses.
"""

from .config import HttpSettings, PingerConfig
from .errors import ErrorCategory, ProbeError, UrlPingerError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    StubHttpClient,
    create_default_http_client,
    normalize_url,
)
from .http.httpx_client import HttpxClient
from .log import setup_logging
from .models import ProbeRecord
from .output import TabWriter
from .prober import Prober
from .runtime import LoopState, ProbeLoop, UrlPinger
from .signals import Terminated
from .version import __version__

__all__ = [
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "LoopState",
    "PingerConfig",
    "ProbeError",
    "ProbeLoop",
    "ProbeRecord",
    "Prober",
    "StubHttpClient",
    "TabWriter",
    "Terminated",
    "UrlPinger",
    "UrlPingerError",
    "__version__",
    "create_default_http_client",
    "normalize_url",
    "setup_logging",
]
