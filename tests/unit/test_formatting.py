# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
from datetime import datetime, timedelta, timezone

from urlpinger.models import ProbeRecord
from urlpinger.output import HEADER_ROWS, create_writer, format_row, format_timestamp, render_headers, write_header

NOON_UTC = datetime(2025, 1, 2, 12, 4, 5, 987654, tzinfo=timezone.utc)


def test_format_timestamp_is_rfc3339_seconds():
    assert format_timestamp(NOON_UTC) == "2025-01-02T12:04:05Z"
    plus_two = NOON_UTC.astimezone(timezone(timedelta(hours=2)))
    assert format_timestamp(plus_two) == "2025-01-02T14:04:05+02:00"
    minus = NOON_UTC.astimezone(timezone(timedelta(hours=-5, minutes=-30)))
    assert format_timestamp(minus) == "2025-01-02T06:34:05-05:30"


def test_render_headers_single_entry():
    assert render_headers({"Server": "nginx"}) == " Server:nginx "
    assert render_headers({"": ""}) == " : "


def test_render_headers_multiple_entries_in_order():
    rendered = render_headers({"Content-Type": "text/html", "Server": "nginx"})
    assert rendered == " {Content-Type:text/html}  {Server:nginx} "
    assert render_headers({"B": "2", "A": "1", "C": ""}) == " {B:2}  {A:1}  {C:} "


def test_render_headers_empty_mapping():
    assert render_headers({}) == ""


def test_format_row_layout():
    record = ProbeRecord(status_line="200 OK", latency_ms=12, headers={"Server": "nginx"})
    row = format_row(7, "https://example.com", record, NOON_UTC)
    assert row == "[2025-01-02T12:04:05Z]\t[7]\t[https://example.com]\t[200 OK]\t[12ms]\t[ Server:nginx ]\n"


def test_header_rows_and_writer_alignment():
    out = io.StringIO()
    writer = create_writer(out)
    write_header(writer)
    record = ProbeRecord(status_line="200 OK", latency_ms=3, headers={"": ""})
    writer.write(format_row(0, "https://x", record, NOON_UTC))
    writer.flush()

    lines = out.getvalue().split("\n")
    assert len(lines) == 4 and lines[-1] == ""
    assert [line.replace("\t", " ").split() for line in lines[:2]] == [
        ["Time", "Count", "Url", "Result", "Time", "Headers"],
        ["-----", "-----", "---", "------", "----", "-------"],
    ]
    assert lines[2].startswith("\t[2025-01-02T12:04:05Z]\t[0]")
    assert lines[2].endswith("[3ms][ : ]")
    assert HEADER_ROWS[0].count("\t") == 5
