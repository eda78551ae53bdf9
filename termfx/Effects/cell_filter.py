# cell_filter.py
# Description: Predicates selecting which cells an effect may touch
#
"""
Cell filters.

A filter is an immutable predicate over ``(position, cell, area)`` where
``area`` is the effect's resolved target rectangle. Filters are evaluated for
every cell of the target on every tick, so they must stay cheap and must not
touch the buffer.

Usage:
    text_only = CellFilter.text()
    border = CellFilter.outer(Margin.uniform(1))
    effect = fx.fade_to_fg(color, 500).with_filter(text_only & ~border)
"""
#
# Imports
from typing import Callable, Iterable, Optional, Tuple
#
# Third-Party Imports
from rich.color import Color
#
# Local Imports
from ..Utils.cell_buffer import Cell
from ..Utils.geometry import Margin, Position, Rect
#
#######################################################################################################################
#
# Classes:

Predicate = Callable[[Position, Cell, Rect], bool]


class CellFilter:
    """An immutable, composable cell predicate."""

    __slots__ = ("_predicate", "name", "_children")

    def __init__(self, predicate: Predicate, name: str = "where", children: Tuple["CellFilter", ...] = ()):
        self._predicate = predicate
        self.name = name
        self._children = children

    def matches(self, position: Position, cell: Cell, area: Rect) -> bool:
        return self._predicate(position, cell, area)

    __call__ = matches

    # --- Built-ins --------------------------------------------------------------------------------------------------

    @classmethod
    def where(cls, predicate: Predicate, name: str = "where") -> "CellFilter":
        """Wrap an arbitrary ``(position, cell, area) -> bool`` callable."""
        return cls(predicate, name)

    @classmethod
    def text(cls) -> "CellFilter":
        """Cells whose symbol is not blank."""
        return cls(lambda position, cell, area: cell.has_text(), "text")

    @classmethod
    def fg_color(cls, color: Color) -> "CellFilter":
        return cls(lambda position, cell, area: cell.fg == color, f"fg_color({color.name})")

    @classmethod
    def bg_color(cls, color: Color) -> "CellFilter":
        return cls(lambda position, cell, area: cell.bg == color, f"bg_color({color.name})")

    @classmethod
    def inner(cls, margin: Margin) -> "CellFilter":
        """Cells inside the area once ``margin`` is trimmed from every side."""
        def predicate(position: Position, cell: Cell, area: Rect) -> bool:
            return area.inner(margin).contains(position)
        return cls(predicate, f"inner({margin.horizontal},{margin.vertical})")

    @classmethod
    def outer(cls, margin: Margin) -> "CellFilter":
        """Cells within ``margin`` of the area's edge."""
        def predicate(position: Position, cell: Cell, area: Rect) -> bool:
            return area.contains(position) and not area.inner(margin).contains(position)
        return cls(predicate, f"outer({margin.horizontal},{margin.vertical})")

    # --- Combinators ------------------------------------------------------------------------------------------------

    @classmethod
    def all_of(cls, filters: Iterable["CellFilter"]) -> "CellFilter":
        children = tuple(filters)

        def predicate(position: Position, cell: Cell, area: Rect) -> bool:
            return all(f.matches(position, cell, area) for f in children)
        return cls(predicate, "all_of", children)

    @classmethod
    def any_of(cls, filters: Iterable["CellFilter"]) -> "CellFilter":
        children = tuple(filters)

        def predicate(position: Position, cell: Cell, area: Rect) -> bool:
            return any(f.matches(position, cell, area) for f in children)
        return cls(predicate, "any_of", children)

    def and_(self, other: "CellFilter") -> "CellFilter":
        return CellFilter.all_of((self, other))

    def or_(self, other: "CellFilter") -> "CellFilter":
        return CellFilter.any_of((self, other))

    def negate(self) -> "CellFilter":
        inner = self
        return CellFilter(lambda position, cell, area: not inner.matches(position, cell, area), "not", (self,))

    __and__ = and_
    __or__ = or_
    __invert__ = negate

    def __repr__(self) -> str:
        if self._children:
            return f"{self.name}({', '.join(repr(c) for c in self._children)})"
        return self.name


ALL = CellFilter(lambda position, cell, area: True, "all")


def resolve_filter(cell_filter: Optional[CellFilter]) -> CellFilter:
    return ALL if cell_filter is None else cell_filter

#
# End of cell_filter.py
#######################################################################################################################
