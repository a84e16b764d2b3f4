# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration values for url-pinger."""

from __future__ import annotations

from dataclasses import dataclass, field

from .http.headers import parse_header_names
from .http.url import normalize_url
from .version import __version__

DEFAULT_USER_AGENT = f"url-pinger/{__version__}"


@dataclass(frozen=True)
class HttpSettings:
    """HTTP client defaults.

    Certificates and hostnames are never verified. Keep-alive is off, so every
    probe opens its own connection and its latency includes the handshake.
    """

    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    max_redirects: int = 10
    verify_ssl: bool = False
    keepalive: bool = False


@dataclass(frozen=True)
class PingerConfig:
    """Process-wide settings, fixed before the probe loop starts."""

    target: str
    use_http: bool = False
    delay_seconds: int = 0
    selected_headers: tuple[str, ...] = ("",)
    http: HttpSettings = field(default_factory=HttpSettings)

    def __post_init__(self) -> None:
        if self.delay_seconds < 0:
            raise ValueError(f"delay must be non-negative, got {self.delay_seconds}")

    @property
    def url(self) -> str:
        """The target with a scheme guaranteed."""
        return normalize_url(self.target, use_http=self.use_http)

    @classmethod
    def from_options(
        cls,
        target: str,
        *,
        use_http: bool = False,
        delay: int = 0,
        response_headers: str = "",
        timeout: float | None = None,
    ) -> PingerConfig:
        """Build a config from raw command-line option values."""
        http = HttpSettings(timeout=timeout if timeout and timeout > 0 else None)
        return cls(
            target=target,
            use_http=use_http,
            delay_seconds=delay,
            selected_headers=parse_header_names(response_headers),
            http=http,
        )


__all__ = ["DEFAULT_USER_AGENT", "HttpSettings", "PingerConfig"]
