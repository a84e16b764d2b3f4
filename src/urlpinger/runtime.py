# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe loop and the high-level UrlPinger facade."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum
from typing import TextIO

from .config import PingerConfig
from .errors import ProbeError
from .http.client import HttpClient, create_default_http_client
from .output import TabWriter, create_writer, format_row, write_header
from .prober import Prober
from .signals import Terminated, deferred_signals, ignore_signals, print_summary, terminate_on_signals

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now(timezone.utc).astimezone()


class LoopState(str, Enum):
    PROBING = "PROBING"
    WAITING = "WAITING"


class ProbeLoop:
    """
    Probe the same URL forever, one row per response.

    Each cycle probes, writes the row with the current count, bumps the count,
    sleeps `delay_seconds` and flushes the table. The only way out is a
    termination signal (summary, exit 0) or a ProbeError, which propagates.
    """

    def __init__(
        self,
        url: str,
        prober: Prober,
        writer: TabWriter,
        *,
        delay_seconds: int = 0,
        summary_stream: TextIO | None = None,
        clock: Callable[[], datetime] = _local_now,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.url = url
        self.prober = prober
        self.writer = writer
        self.delay_seconds = delay_seconds
        self.summary_stream = summary_stream
        self.clock = clock
        self.sleep = sleep
        self.count = 0
        self.state = LoopState.PROBING

    def step(self) -> None:
        """Run one probe cycle."""
        self.state = LoopState.PROBING
        record = self.prober.probe(self.url)
        # a row is never buffered without its count
        with deferred_signals():
            self.writer.write(format_row(self.count, self.url, record, self.clock()))
            self.count += 1
        self.state = LoopState.WAITING
        if self.delay_seconds > 0:
            self.sleep(self.delay_seconds)
        self.writer.flush()

    def run(self) -> int:
        """Loop until interrupted. Returns the process exit code."""
        with terminate_on_signals():
            try:
                write_header(self.writer)
                while True:
                    self.step()
            except Terminated as exc:
                ignore_signals()
                logger.debug("stopping after signal %s with %d rows", exc.signum, self.count)
                self.writer.flush()
                print_summary(self.count, self.summary_stream or sys.stdout)
                return 0
            except ProbeError:
                self.writer.flush()
                raise


class UrlPinger:
    """
    Convenience wrapper that wires the HTTP client, prober and table writer.

    The HTTP client is closed on exit, including clients injected by callers.
    """

    def __init__(
        self,
        config: PingerConfig,
        http_client: HttpClient | None = None,
        output: TextIO | None = None,
    ):
        self.config = config
        self.output = output or sys.stdout
        self.http_client = http_client or create_default_http_client(config.http)
        self.prober = Prober(self.http_client, config.selected_headers)
        self.writer = create_writer(self.output)
        self.loop = ProbeLoop(
            config.url,
            self.prober,
            self.writer,
            delay_seconds=config.delay_seconds,
            summary_stream=self.output,
        )

    def run(self) -> int:
        return self.loop.run()

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> UrlPinger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["LoopState", "ProbeLoop", "UrlPinger"]
