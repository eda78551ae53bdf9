# cell_buffer.py
# Description: Reference grid of styled character cells that effects draw into
#
"""
A minimal styled-cell buffer built on Rich types.

Effects only need ``area``, ``get(x, y)`` and ``set(x, y, cell)``; any object
offering those works with the engine. This implementation exists so the
engine can be used (and tested) without a full terminal backend, and so the
Textual integration widget can turn the result into Rich segments.
"""
#
# Imports
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional
#
# Third-Party Imports
from rich.color import Color
from rich.segment import Segment
from rich.style import Style
from rich.text import Text
#
# Local Imports
from .geometry import Rect
#
#######################################################################################################################
#
# Classes:


@dataclass(frozen=True)
class Cell:
    """One terminal cell: a single symbol and its Rich style."""
    symbol: str = " "
    style: Style = field(default_factory=Style.null)

    @property
    def fg(self) -> Optional[Color]:
        return self.style.color

    @property
    def bg(self) -> Optional[Color]:
        return self.style.bgcolor

    def with_symbol(self, symbol: str) -> "Cell":
        return replace(self, symbol=symbol)

    def with_style(self, style: Style) -> "Cell":
        return replace(self, style=style)

    def with_colors(self, fg: Optional[Color], bg: Optional[Color]) -> "Cell":
        """Replace both colors, keeping attributes (bold, italic, ...)."""
        return replace(self, style=self.style.without_color + Style(color=fg, bgcolor=bg))

    def with_fg(self, color: Optional[Color]) -> "Cell":
        return self.with_colors(color, self.bg)

    def with_bg(self, color: Optional[Color]) -> "Cell":
        return self.with_colors(self.fg, color)

    def has_text(self) -> bool:
        return self.symbol.strip() != ""


class CellBuffer:
    """A rectangular, mutable grid of :class:`Cell` values."""

    def __init__(self, width: int, height: int, *, x: int = 0, y: int = 0, fill: Optional[Cell] = None):
        self.area = Rect(x, y, width, height)
        blank = fill or Cell()
        self._rows: List[List[Cell]] = [[blank] * width for _ in range(height)]

    @classmethod
    def from_lines(cls, lines: Iterable[str], style: Optional[Style] = None) -> "CellBuffer":
        """Build a buffer sized to fit ``lines``, padding short lines with blanks."""
        lines = list(lines)
        width = max((len(line) for line in lines), default=0)
        base_style = style or Style.null()
        buffer = cls(width, len(lines), fill=Cell(" ", base_style))
        for row, line in enumerate(lines):
            buffer.draw_text(0, row, line, base_style)
        return buffer

    # --- Cell access ------------------------------------------------------------------------------------------------

    def _index(self, x: int, y: int):
        if not (self.area.x <= x < self.area.right and self.area.y <= y < self.area.bottom):
            raise IndexError(f"Cell ({x}, {y}) is outside buffer area {self.area}")
        return y - self.area.y, x - self.area.x

    def get(self, x: int, y: int) -> Cell:
        row, col = self._index(x, y)
        return self._rows[row][col]

    def set(self, x: int, y: int, cell: Cell) -> None:
        row, col = self._index(x, y)
        self._rows[row][col] = cell

    def __getitem__(self, position) -> Cell:
        return self.get(*position)

    def __setitem__(self, position, cell: Cell) -> None:
        self.set(*position, cell)

    # --- Bulk drawing -----------------------------------------------------------------------------------------------

    def fill(self, cell: Cell, area: Optional[Rect] = None) -> None:
        target = self.area if area is None else area.intersection(self.area)
        for x, y in target.positions():
            self.set(x, y, cell)

    def draw_text(self, x: int, y: int, text: str, style: Optional[Style] = None) -> None:
        """Write ``text`` starting at (x, y), clipping at the buffer edge."""
        cell_style = style or Style.null()
        for offset, char in enumerate(text):
            px = x + offset
            if self.area.x <= px < self.area.right and self.area.y <= y < self.area.bottom:
                self.set(px, y, Cell(char, cell_style))

    def blit(self, other: "CellBuffer") -> None:
        """Copy every overlapping cell of ``other`` into this buffer."""
        for x, y in other.area.intersection(self.area).positions():
            self.set(x, y, other.get(x, y))

    def copy(self) -> "CellBuffer":
        clone = CellBuffer.__new__(CellBuffer)
        clone.area = self.area
        clone._rows = [list(row) for row in self._rows]
        return clone

    # --- Rendering --------------------------------------------------------------------------------------------------

    def row_segments(self, y: int) -> List[Segment]:
        """Rich segments for one buffer row, merging runs of identical style."""
        row = self._rows[y - self.area.y]
        segments: List[Segment] = []
        run_text = ""
        run_style: Optional[Style] = None
        for cell in row:
            if run_style is not None and cell.style != run_style:
                segments.append(Segment(run_text, run_style))
                run_text = ""
            run_text += cell.symbol
            run_style = cell.style
        if run_text:
            segments.append(Segment(run_text, run_style))
        return segments

    def to_text(self) -> Text:
        text = Text()
        for index, y in enumerate(range(self.area.y, self.area.bottom)):
            if index:
                text.append("\n")
            for segment in self.row_segments(y):
                text.append(segment.text, segment.style)
        return text

    def symbols(self) -> List[str]:
        """Plain text content, one string per row."""
        return ["".join(cell.symbol for cell in row) for row in self._rows]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CellBuffer):
            return NotImplemented
        return self.area == other.area and self._rows == other._rows

    __hash__ = None

    def __repr__(self) -> str:
        return f"CellBuffer({self.area.width}x{self.area.height} at {self.area.x},{self.area.y})"

#
# End of cell_buffer.py
#######################################################################################################################
