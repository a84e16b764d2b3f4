# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Row rendering for the probe table."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import TextIO

from ..models import ProbeRecord
from .tabwriter import TabWriter

HEADER_ROWS = (
    "Time\tCount\tUrl\tResult\tTime\tHeaders\n",
    "-----\t-----\t---\t------\t----\t-------\n",
)


def create_writer(output: TextIO) -> TabWriter:
    """Tab writer configured for the probe table."""
    return TabWriter(output, minwidth=0, tabwidth=8, padding=1, padchar="\t", align_right=True)


def format_timestamp(moment: datetime) -> str:
    """RFC 3339 at second precision; naive datetimes are taken as local time."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def render_headers(headers: Mapping[str, str]) -> str:
    """
    Render selected headers for the last column.

    A single entry renders as ` name:value `, several as ` {name:value} ` each.
    """
    if len(headers) > 1:
        return "".join(f" {{{name}:{value}}} " for name, value in headers.items())
    return "".join(f" {name}:{value} " for name, value in headers.items())


def format_row(count: int, url: str, record: ProbeRecord, now: datetime) -> str:
    return (
        f"[{format_timestamp(now)}]\t[{count}]\t[{url}]\t[{record.status_line}]\t"
        f"[{record.latency_ms}ms]\t[{render_headers(record.headers)}]\n"
    )


def write_header(writer: TabWriter) -> None:
    for row in HEADER_ROWS:
        writer.write(row)


__all__ = ["HEADER_ROWS", "create_writer", "format_row", "format_timestamp", "render_headers", "write_header"]
