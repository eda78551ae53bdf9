"""Eighth-block glyphs used to draw partially covered cells."""

from typing import Optional

from rich.color import Color
from rich.style import Style

from ...Utils.cell_buffer import Cell

# Left-aligned blocks, 1/8 .. 7/8 wide
LEFT_BLOCKS = "▏▎▍▌▋▊▉"
# Bottom-aligned blocks, 1/8 .. 7/8 tall
LOWER_BLOCKS = "▁▂▃▄▅▆▇"


def coverage_level(coverage: float) -> int:
    """Quantize a coverage fraction to eighths (0..8)."""
    return max(0, min(8, int(coverage * 8.0 + 0.5)))


def partial_block(
    level: int,
    horizontal: bool,
    from_start: bool,
    covered: Optional[Color],
    uncovered: Optional[Color],
) -> Cell:
    """
    A cell covered ``level`` eighths of the way.

    ``from_start`` puts the covered part on the left (horizontal) or top
    (vertical) edge. Unicode only ships left and lower partial blocks, so the
    right/top cases draw the complementary glyph with the colors swapped.
    """
    if level <= 0:
        return Cell(" ", Style(bgcolor=uncovered))
    if level >= 8:
        return Cell(" ", Style(bgcolor=covered))
    blocks = LEFT_BLOCKS if horizontal else LOWER_BLOCKS
    # Left blocks grow from the start edge, lower blocks from the end edge
    natural = from_start if horizontal else not from_start
    if natural:
        return Cell(blocks[level - 1], Style(color=covered, bgcolor=uncovered))
    return Cell(blocks[8 - level - 1], Style(color=uncovered, bgcolor=covered))
