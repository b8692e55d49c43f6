"""Terminal output: coloured text, tables and a simple UI."""

from __future__ import annotations

import re
import sys
import unicodedata
from typing import Any, Iterable, TextIO

BOLD = 1
FG_RED = 31
FG_GREEN = 32
FG_YELLOW = 33
FG_CYAN = 36

_ANSI = re.compile(r"\x1b\[[0-9;]*m")
_COLUMN_GAP = "   "


def colorize(text: str, *args: int) -> str:
    """Wrap text in the given SGR codes; unchanged when no codes are given."""
    if not args:
        return text
    codes = ";".join(str(int(code)) for code in args)
    return f"\x1b[{codes}m{text}\x1b[0m"


def decolorize(text: str) -> str:
    """Strip ANSI colour sequences from text."""
    return _ANSI.sub("", text)


def command_color(text: str) -> str:
    """Highlight a command the user should type."""
    return colorize(text, FG_YELLOW, BOLD)


def _display_width(text: str) -> int:
    width = 0
    for char in decolorize(text):
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


class Table:
    """A text table with aligned columns; cells may span several lines."""

    def __init__(self, headers: Iterable[str], stream: TextIO | None = None) -> None:
        self.headers = [str(h) for h in headers]
        self.stream = stream
        self.rows: list[list[str]] = []

    def add(self, *args: Any) -> None:
        self.rows.append([str(cell) for cell in args])

    def render(self) -> str:
        rows = [self.headers, *self.rows]
        columns = max(len(row) for row in rows)
        lines: list[list[str]] = []
        for row in rows:
            cells = [cell.split("\n") for cell in row]
            cells += [[""]] * (columns - len(cells))
            height = max(len(parts) for parts in cells)
            for line_no in range(height):
                lines.append([parts[line_no] if line_no < len(parts) else "" for parts in cells])

        widths = [max(_display_width(line[col]) for line in lines) for col in range(columns)]
        rendered = []
        for line in lines:
            padded = [
                piece + " " * (widths[col] - _display_width(piece))
                for col, piece in enumerate(line)
            ]
            rendered.append(_COLUMN_GAP.join(padded).rstrip())
        return "\n".join(rendered)

    def print(self) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(self.render() + "\n")


class UI:
    """Writes messages and tables to an output and an error stream."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.color = False

    def _emit(self, stream: TextIO, text: str) -> None:
        if not self.color:
            text = decolorize(text)
        stream.write(text + "\n")

    def say(self, message: str) -> None:
        self._emit(self.out, message)

    def failed(self, message: str) -> None:
        self._emit(self.err, colorize("FAILED", FG_RED, BOLD))
        self._emit(self.err, message)
        self._emit(self.err, "")

    def table(self, headers: Iterable[str]) -> Table:
        return Table(headers, self.out)