# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for url-pinger."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import ProbeRecord

__all__ = [
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeRecord",
]
