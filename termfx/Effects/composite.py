# composite.py
# Description: Sequential and parallel composition of effects
#
# Imports
from typing import Callable, Iterable, List, Optional
#
# Local Imports
from .base_effect import BaseEffect, DeltaLike
from .cell_filter import CellFilter
from .color_space import ColorSpace
from .duration import Duration, ZERO
from .fx_errors import EffectConfigurationError, EmptyCompositeError
from .motion import LoopMode
from .patterns import Pattern
from ..Utils.cell_buffer import CellBuffer
from ..Utils.geometry import Rect
#
#######################################################################################################################
#
# Classes:


class CompositeEffect(BaseEffect):
    """
    Shared plumbing for effects that own a list of child effects.

    Decorations (filter, pattern, color space, area, reversal) are pushed
    down to every child. The loop mode belongs to the composite itself: when
    a cycle completes, the children are replaced with fresh copies of the
    ones the composite was built from and the cycle starts over.
    """

    kind = "composite"

    def __init__(self, effects: Iterable[BaseEffect], *, loop_mode: LoopMode = LoopMode.ONCE):
        self.effects: List[BaseEffect] = list(effects)
        if not self.effects:
            raise EmptyCompositeError.for_kind(self.kind)
        # Untouched copies to restart each loop cycle from
        self._pristine: List[BaseEffect] = [effect.copy() for effect in self.effects]
        # Ping-pong: True while running the backward half
        self._backward = False
        self.loop_mode = loop_mode
        if loop_mode is not LoopMode.ONCE:
            self._check_loopable(loop_mode)

    def _check_loopable(self, loop_mode: LoopMode) -> None:
        if self.duration().is_zero():
            raise EffectConfigurationError(
                f"Cannot use loop mode '{loop_mode.value}' on a zero-duration {self.kind}",
                suggestion="Give at least one child effect a positive duration"
            )

    def _map_children(self, transform: Callable[[BaseEffect], BaseEffect]) -> "CompositeEffect":
        clone = type(self)((transform(effect) for effect in self.effects), loop_mode=self.loop_mode)
        clone._pristine = [transform(effect) for effect in self._pristine]
        clone._backward = self._backward
        return clone

    def _fresh_children(self) -> List[BaseEffect]:
        children = [effect.copy() for effect in self._pristine]
        if self._backward:
            children = [effect.reversed() for effect in children]
        return children

    def _restart(self) -> None:
        """Begin the next loop cycle."""
        if self.loop_mode is LoopMode.PING_PONG:
            self._backward = not self._backward
        self.effects = self._fresh_children()

    def name(self) -> str:
        return self.kind

    def copy(self) -> "CompositeEffect":
        return self._map_children(lambda effect: effect.copy())

    def with_filter(self, cell_filter: CellFilter) -> "CompositeEffect":
        return self._map_children(lambda effect: effect.with_filter(cell_filter))

    def with_pattern(self, pattern: Pattern) -> "CompositeEffect":
        return self._map_children(lambda effect: effect.with_pattern(pattern))

    def with_color_space(self, color_space: ColorSpace) -> "CompositeEffect":
        return self._map_children(lambda effect: effect.with_color_space(color_space))

    def with_area(self, area: Optional[Rect]) -> "CompositeEffect":
        return self._map_children(lambda effect: effect.with_area(area))

    def with_loop_mode(self, loop_mode: LoopMode) -> "CompositeEffect":
        clone = self.copy()
        clone.loop_mode = loop_mode
        if loop_mode is not LoopMode.ONCE:
            clone._check_loopable(loop_mode)
        return clone

    def reversed(self) -> "CompositeEffect":
        return self._map_children(lambda effect: effect.reversed())

    def __len__(self) -> int:
        return len(self.effects)


class SequentialEffect(CompositeEffect):
    """
    Runs its children one after another.

    Only the current child is processed on a tick. When it reports done the
    sequence moves on, but the next child first sees time on the following
    tick; leftover time from the finishing tick is not carried over. A
    ping-pong sequence runs its children in reverse order on the way back.
    """

    kind = "sequence"

    def __init__(self, effects: Iterable[BaseEffect], *, loop_mode: LoopMode = LoopMode.ONCE):
        super().__init__(effects, loop_mode=loop_mode)
        self.current = 0

    def copy(self) -> "SequentialEffect":
        clone = super().copy()
        clone.current = self.current
        return clone

    def _fresh_children(self) -> List[BaseEffect]:
        children = super()._fresh_children()
        return children[::-1] if self._backward else children

    def _restart(self) -> None:
        super()._restart()
        self.current = 0

    def process(self, delta: DeltaLike, buffer: CellBuffer, area: Optional[Rect] = None) -> None:
        if self.done():
            return
        effect = self.effects[self.current]
        effect.process(delta, buffer, area)
        if effect.done():
            self.current += 1
            if self.current >= len(self.effects) and self.loop_mode is not LoopMode.ONCE:
                self._restart()

    def done(self) -> bool:
        return self.loop_mode is LoopMode.ONCE and self.current >= len(self.effects)

    def duration(self) -> Duration:
        total = ZERO
        for effect in self.effects:
            total = total + effect.duration()
        return total


class ParallelEffect(CompositeEffect):
    """Runs all children at once; finished when the last of them finishes."""

    kind = "parallel"

    def process(self, delta: DeltaLike, buffer: CellBuffer, area: Optional[Rect] = None) -> None:
        if self.done():
            return
        for effect in self.effects:
            if not effect.done():
                effect.process(delta, buffer, area)
        if self.loop_mode is not LoopMode.ONCE and self._children_done():
            self._restart()

    def _children_done(self) -> bool:
        return all(effect.done() for effect in self.effects)

    def done(self) -> bool:
        return self.loop_mode is LoopMode.ONCE and self._children_done()

    def duration(self) -> Duration:
        return max(effect.duration() for effect in self.effects)

#
# End of composite.py
#######################################################################################################################
