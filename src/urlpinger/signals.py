# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Interrupt handling for the probe loop.

Python runs signal handlers on the main thread between bytecodes, so raising from
the handler unwinds the loop out of a blocked request or sleep right away.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TextIO

TERMINATION_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class Terminated(BaseException):
    """
    Raised inside the probe loop when a termination signal arrives.

    Derives from BaseException, like KeyboardInterrupt, so `except Exception`
    blocks in the HTTP layer let it through.
    """

    def __init__(self, signum: int):
        super().__init__(f"terminated by signal {signum}")
        self.signum = signum


_held: list[int] | None = None


def _raise_terminated(signum, frame):  # noqa: ARG001
    if _held is not None:
        _held.append(signum)
        return
    raise Terminated(signum)


@contextmanager
def deferred_signals() -> Iterator[None]:
    """Hold termination signals until the block ends, then raise the first one."""
    global _held
    if _held is not None:
        yield
        return
    _held = []
    try:
        yield
    finally:
        pending, _held = _held, None
    if pending:
        raise Terminated(pending[0])


@contextmanager
def terminate_on_signals(signals: Sequence[signal.Signals] = TERMINATION_SIGNALS) -> Iterator[None]:
    """Turn `signals` into Terminated for the duration of the block."""
    previous = {signum: signal.signal(signum, _raise_terminated) for signum in signals}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def ignore_signals(signals: Sequence[signal.Signals] = TERMINATION_SIGNALS) -> None:
    """Stop a repeated signal from interrupting shutdown."""
    for signum in signals:
        signal.signal(signum, signal.SIG_IGN)


def print_summary(count: int, stream: TextIO) -> None:
    stream.write(f"Total Requests: {count}\n")
    stream.flush()


__all__ = [
    "TERMINATION_SIGNALS",
    "Terminated",
    "deferred_signals",
    "ignore_signals",
    "print_summary",
    "terminate_on_signals",
]
