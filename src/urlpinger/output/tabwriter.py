# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Elastic tabstop writer.

Text is buffered until `flush()`. Each line is split into tab-terminated cells;
the text after the last tab is a trailing cell that is written as-is. A column
block is a run of consecutive lines that all have a cell in a given column, and
every cell in the block is padded to the widest cell plus `padding`.

When `padchar` is a tab, widths are rounded up to a multiple of `tabwidth` and the
padding is emitted as tabs, so the output lines up in any terminal that uses the
same tab width. With `align_right` the padding goes before the cell text.
"""

from __future__ import annotations

from typing import TextIO


class TabWriter:
    """Buffered, column-aligning writer."""

    def __init__(
        self,
        output: TextIO,
        minwidth: int = 0,
        tabwidth: int = 8,
        padding: int = 1,
        padchar: str = "\t",
        align_right: bool = False,
    ):
        if len(padchar) != 1:
            raise ValueError("padchar must be a single character")
        self.output = output
        self.minwidth = minwidth
        self.tabwidth = tabwidth
        self.padding = padding
        self.padchar = padchar
        self.align_right = align_right
        self._buffer: list[str] = []
        self._line = ""

    def write(self, text: str) -> int:
        """
        Buffer `text`.

        A completed line with no tab cannot affect the layout of later lines, so it
        flushes everything buffered so far.
        """
        parts = text.split("\n")
        for part in parts[:-1]:
            self._buffer.append(part + "\n")
            line, self._line = self._line + part, ""
            if "\t" not in line:
                self.flush()
        self._buffer.append(parts[-1])
        self._line += parts[-1]
        return len(text)

    def flush(self) -> None:
        """Format and write all buffered lines."""
        text = "".join(self._buffer)
        self._buffer = []
        self._line = ""
        if not text:
            self.output.flush()
            return

        segments = text.split("\n")
        lines = [segment.split("\t") for segment in segments[:-1]]
        tail = segments[-1].split("\t")
        if tail and tail[-1] == "":
            tail.pop()
        lines.append(tail)

        chunks: list[str] = []
        self._format(chunks, lines, 0, len(lines), [])
        self.output.write("".join(chunks))
        self.output.flush()

    def _format(self, out: list[str], lines: list[list[str]], line0: int, line1: int, widths: list[int]) -> None:
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(lines[this]) - 1:
                this += 1
                continue
            # this line opens a block in `column`; emit what precedes it
            self._write_lines(out, lines, line0, this, widths)
            line0 = this
            width = self.minwidth
            while this < line1 and column < len(lines[this]) - 1:
                width = max(width, len(lines[this][column]) + self.padding)
                this += 1
            self._format(out, lines, line0, this, widths + [width])
            line0 = this
        self._write_lines(out, lines, line0, line1, widths)

    def _write_lines(self, out: list[str], lines: list[list[str]], line0: int, line1: int, widths: list[int]) -> None:
        for index in range(line0, line1):
            for j, cell in enumerate(lines[index]):
                aligned = j < len(widths)
                if not cell:
                    if aligned:
                        out.append(self._padding(0, widths[j]))
                elif self.align_right:
                    if aligned:
                        out.append(self._padding(len(cell), widths[j]))
                    out.append(cell)
                else:
                    out.append(cell)
                    if aligned:
                        out.append(self._padding(len(cell), widths[j]))
            # the last buffered line has no newline of its own
            if index + 1 < len(lines):
                out.append("\n")

    def _padding(self, textw: int, cellw: int) -> str:
        if self.padchar == "\t":
            if self.tabwidth == 0:
                return ""
            cellw = (cellw + self.tabwidth - 1) // self.tabwidth * self.tabwidth
            n = cellw - textw
            return "\t" * ((n + self.tabwidth - 1) // self.tabwidth)
        return self.padchar * (cellw - textw)


__all__ = ["TabWriter"]
