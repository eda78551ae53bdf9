# geometry.py
# Description: Cell-coordinate geometry (positions, rectangles, margins)
#
# Imports
from dataclasses import dataclass
from typing import Iterator, NamedTuple
#
#######################################################################################################################
#
# Classes:


class Position(NamedTuple):
    """An integer cell coordinate."""
    x: int
    y: int


@dataclass(frozen=True)
class Margin:
    """Horizontal and vertical insets, in cells."""
    horizontal: int = 0
    vertical: int = 0

    @classmethod
    def uniform(cls, value: int) -> "Margin":
        return cls(value, value)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned region in cell coordinates. Zero-area rects carry no cells."""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rect dimensions cannot be negative: {self.width}x{self.height}")

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, position: Position) -> bool:
        px, py = position
        return self.x <= px < self.right and self.y <= py < self.bottom

    def intersection(self, other: "Rect") -> "Rect":
        """Overlap of two rects; an empty Rect when they do not overlap."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return Rect(left, top, 0, 0)
        return Rect(left, top, right - left, bottom - top)

    def inner(self, margin: Margin) -> "Rect":
        """This rect shrunk by ``margin`` on every side (empty if the margin swallows it)."""
        width = self.width - 2 * margin.horizontal
        height = self.height - 2 * margin.vertical
        if width <= 0 or height <= 0:
            return Rect(self.x + margin.horizontal, self.y + margin.vertical, 0, 0)
        return Rect(self.x + margin.horizontal, self.y + margin.vertical, width, height)

    def positions(self) -> Iterator[Position]:
        """Row-major iteration over every cell position in the rect."""
        for y in range(self.y, self.bottom):
            for x in range(self.x, self.right):
                yield Position(x, y)

#
# End of geometry.py
#######################################################################################################################
