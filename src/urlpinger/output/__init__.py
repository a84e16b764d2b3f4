# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terminal output helpers."""

from .formatting import HEADER_ROWS, create_writer, format_row, format_timestamp, render_headers, write_header
from .tabwriter import TabWriter

__all__ = [
    "HEADER_ROWS",
    "TabWriter",
    "create_writer",
    "format_row",
    "format_timestamp",
    "render_headers",
    "write_header",
]
