"""
Row renderer with box-drawing borders.

This module provides a RowRenderer class that turns cell texts into
fixed-width table lines using frozen column widths.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class TextSink(Protocol):
    """Anything text lines can be written to (``sys.stdout``, ``io.StringIO``)."""

    def write(self, s: str, /) -> object: ...


class RowRenderer:
    """Render rows of cell text as bordered, fixed-width lines.

    Example output (borders and padding on):
        +--------+-------+
        | Name   | Count |
        +--------+-------+
        | item-1 | 10    |
        +--------+-------+

    Every cell is left-aligned and occupies exactly its column width:
    short text is padded with spaces and long text is truncated. Widths
    are counted in characters; wide glyphs (CJK, emoji) will misalign.
    """

    def __init__(self, widths: Sequence[int], borders: bool = True, padding: bool = True) -> None:
        """Initialize the renderer.

        Args:
            widths: Final width of every column
            borders: Draw outer ``|`` borders and ``+`` rule junctions
            padding: Surround column dividers with a space on each side
        """
        self._widths = tuple(widths)
        self._borders = borders
        self._padding = padding

        self._divider = " | " if padding else "|"
        if borders:
            self._left, self._right = ("| ", " |") if padding else ("|", "|")
        else:
            self._left = self._right = ""

        self._width = sum(self._widths) + self.overhead(len(self._widths), borders, padding)
        self._rule = self._build_rule()

    @staticmethod
    def overhead(num_columns: int, borders: bool = True, padding: bool = True) -> int:
        """Characters per line spent on borders, dividers and padding."""
        pad = 1 if padding else 0
        dividers = max(num_columns - 1, 0) * (1 + 2 * pad)
        edges = 2 * (1 + pad) if borders else 0
        return dividers + edges

    @property
    def widths(self) -> tuple[int, ...]:
        """Final width of every column."""
        return self._widths

    @property
    def width(self) -> int:
        """Total length of every rendered line."""
        return self._width

    @staticmethod
    def format_cell(text: str, width: int) -> str:
        """Pad or truncate ``text`` to exactly ``width`` characters."""
        if len(text) > width:
            return text[:width]
        return text.ljust(width)

    def format_row(self, cells: Sequence[str]) -> str:
        """Render one line from a row's cell texts."""
        body = self._divider.join(
            self.format_cell(text, width) for text, width in zip(cells, self._widths)
        )
        return f"{self._left}{body}{self._right}"

    def format_banner(self, text: str) -> str:
        """Render a single cell spanning the whole table (titles, footers)."""
        inner = self._width - len(self._left) - len(self._right)
        return f"{self._left}{self.format_cell(text, inner)}{self._right}"

    def rule(self) -> str:
        """Horizontal rule matching the column layout."""
        return self._rule

    def _build_rule(self) -> str:
        if not self._borders:
            return "-" * self._width
        if self._padding:
            return "+-" + "-+-".join("-" * w for w in self._widths) + "-+"
        return "+" + "+".join("-" * w for w in self._widths) + "+"

    def write_row(self, sink: TextSink, cells: Sequence[str]) -> None:
        sink.write(self.format_row(cells) + "\n")

    def write_banner(self, sink: TextSink, text: str) -> None:
        sink.write(self.format_banner(text) + "\n")

    def write_rule(self, sink: TextSink) -> None:
        sink.write(self._rule + "\n")
