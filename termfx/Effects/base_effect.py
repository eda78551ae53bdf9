"""
Base class for effects.

Everything the manager and the composites handle (a single shader-driven
Effect, a SequentialEffect or a ParallelEffect) implements this interface.
Decoration methods never mutate the receiver; they return a new effect.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from .cell_filter import CellFilter
from .color_space import ColorSpace
from .duration import Duration
from .motion import LoopMode
from .patterns import Pattern
from ..Utils.cell_buffer import CellBuffer
from ..Utils.geometry import Rect


DeltaLike = Union[Duration, int, float]


class BaseEffect(ABC):
    """Base class for animation effects."""

    @abstractmethod
    def process(self, delta: DeltaLike, buffer: CellBuffer, area: Optional[Rect] = None) -> None:
        """Advance by ``delta`` and render into ``buffer`` within ``area``."""

    @abstractmethod
    def done(self) -> bool:
        """True once the effect has finished; done effects never resume."""

    def running(self) -> bool:
        return not self.done()

    @abstractmethod
    def name(self) -> str:
        """Short kind name, e.g. "fade" or "sequence"."""

    @abstractmethod
    def duration(self) -> Duration:
        """Time the effect takes to finish once (ignoring loop modes)."""

    @abstractmethod
    def copy(self) -> "BaseEffect":
        """An independent effect with its own timer state."""

    # --- Decoration -------------------------------------------------------------------------------------------------

    @abstractmethod
    def with_filter(self, cell_filter: CellFilter) -> "BaseEffect":
        ...

    @abstractmethod
    def with_pattern(self, pattern: Pattern) -> "BaseEffect":
        ...

    @abstractmethod
    def with_color_space(self, color_space: ColorSpace) -> "BaseEffect":
        ...

    @abstractmethod
    def with_area(self, area: Optional[Rect]) -> "BaseEffect":
        ...

    @abstractmethod
    def with_loop_mode(self, loop_mode: LoopMode) -> "BaseEffect":
        ...

    @abstractmethod
    def reversed(self) -> "BaseEffect":
        """The same effect with its progress output flipped."""

    def loop(self) -> "BaseEffect":
        """Restart from the beginning each time the effect completes."""
        return self.with_loop_mode(LoopMode.LOOP)

    def ping_pong(self) -> "BaseEffect":
        """Alternate forward and backward runs forever."""
        return self.with_loop_mode(LoopMode.PING_PONG)

    def __repr__(self) -> str:
        state = "done" if self.done() else "running"
        return f"<{type(self).__name__} {self.name()} {state}>"
