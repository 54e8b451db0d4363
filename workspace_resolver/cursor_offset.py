"""Conversion of editor line/column cursors into linear character offsets."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CursorPosition:
    """Zero-based cursor location in a document."""

    line: int
    ch: int


class LineSource(Protocol):
    """Editor surface exposing its cursor and per-line text."""

    def get_cursor(self) -> CursorPosition:
        """Return the current cursor position."""
        ...

    def get_line(self, index: int) -> str:
        """Return the text of line ``index`` without its terminator."""
        ...


class CursorOffset:
    """Absolute character offset of a cursor, computed once at construction."""

    def __init__(self, get_line: Callable[[int], str], cursor: CursorPosition) -> None:
        """Compute the offset of ``cursor`` from the lines before it."""
        self.cursor = cursor
        # +1 per line for the terminator dropped by line splitting
        previous_lines_size = sum(len(get_line(index)) + 1 for index in range(cursor.line))
        self.offset = previous_lines_size + cursor.ch

    @classmethod
    def from_editor(cls, editor: LineSource) -> "CursorOffset":
        """Build the offset for the editor's current cursor."""
        return cls(editor.get_line, editor.get_cursor())

    def get_offset(self) -> int:
        """Return the cached offset."""
        return self.offset


class TextBuffer:
    """Line source over a plain string with a fixed cursor."""

    def __init__(self, text: str, cursor: CursorPosition | None = None) -> None:
        """Initialize the buffer; the cursor defaults to the start of the text."""
        self.lines = text.split("\n")
        self.cursor = cursor or CursorPosition(0, 0)

    def get_cursor(self) -> CursorPosition:
        """Return the buffer cursor."""
        return self.cursor

    def get_line(self, index: int) -> str:
        """Return line ``index``; lines past the end are empty."""
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return ""
