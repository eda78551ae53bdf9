# effect.py
# Description: A shader driven over time by a timer, with filter/pattern/area decorations
#
"""
Effect
------

An Effect pairs a Shader with an EffectTimer. Each tick it advances the timer,
turns the timer's progress into a global alpha, lets the Pattern spread that
alpha over the target area, and asks the shader to transform every cell the
CellFilter accepts.

Usage:
    effect = Effect(FadeShader(fg=ColorRange(Color.parse("black"), Color.parse("cyan"))), EffectTimer.from_ms(500))
    effect = effect.with_filter(CellFilter.text()).with_area(Rect(0, 0, 20, 1))
    while effect.running():
        effect.process(16, buffer)
"""
#
# Imports
from typing import Optional
#
# Local Imports
from .base_effect import BaseEffect, DeltaLike
from .cell_filter import CellFilter, resolve_filter
from .color_space import ColorSpace
from .duration import Duration, as_duration
from .effect_timer import EffectTimer
from .fx_errors import EffectConfigurationError
from .motion import LoopMode
from .patterns import IDENTITY, Pattern
from .Shaders.base_shader import Shader, ShaderContext
from ..Utils.cell_buffer import CellBuffer
from ..Utils.fx_math import clamp01
from ..Utils.geometry import Rect
#
#######################################################################################################################
#
# Classes:


class Effect(BaseEffect):
    """A single shader animated by its own timer."""

    def __init__(
        self,
        shader: Shader,
        timer: EffectTimer,
        *,
        cell_filter: Optional[CellFilter] = None,
        pattern: Optional[Pattern] = None,
        color_space: Optional[ColorSpace] = None,
        area: Optional[Rect] = None,
        loop_mode: LoopMode = LoopMode.ONCE,
    ):
        if color_space is None:
            from ..config import get_default_color_space
            color_space = get_default_color_space()
        self.shader = shader
        self.timer = timer
        self.cell_filter = resolve_filter(cell_filter)
        self.pattern = IDENTITY if pattern is None else pattern
        self.color_space = ColorSpace.from_name(color_space)
        self.area = area
        self.loop_mode = loop_mode
        if loop_mode is not LoopMode.ONCE:
            self._check_loopable(loop_mode)

    def _check_loopable(self, loop_mode: LoopMode) -> None:
        if self.timer.total.is_zero():
            raise EffectConfigurationError(
                f"Cannot use loop mode '{loop_mode.value}' on a zero-duration effect",
                suggestion="Give the timer a positive duration before calling loop() or ping_pong()"
            )

    def _replace(self, **changes) -> "Effect":
        params = dict(
            cell_filter=self.cell_filter,
            pattern=self.pattern,
            color_space=self.color_space,
            area=self.area,
            loop_mode=self.loop_mode,
        )
        timer = changes.pop("timer", None) or self.timer.copy()
        params.update(changes)
        return Effect(self.shader, timer, **params)

    # --- Processing -------------------------------------------------------------------------------------------------

    def process(self, delta: DeltaLike, buffer: CellBuffer, area: Optional[Rect] = None) -> None:
        if self.done():
            return

        requested = self.area if self.area is not None else (area if area is not None else buffer.area)
        target = requested.intersection(buffer.area)

        overflow = self.timer.advance(as_duration(delta))
        if overflow is not None and self.loop_mode is not LoopMode.ONCE:
            self._restart(overflow)

        if target.is_empty():
            return

        global_alpha = clamp01(self.timer.progress())
        context = ShaderContext(target, self.color_space)
        cell_filter = self.cell_filter
        pattern = self.pattern
        shader = self.shader
        for position in target.positions():
            cell = buffer.get(position.x, position.y)
            if not cell_filter.matches(position, cell, target):
                continue
            alpha = clamp01(pattern.map_alpha(global_alpha, position, target))
            updated = shader.apply(alpha, position, cell, context)
            if updated is not cell and updated != cell:
                buffer.set(position.x, position.y, updated)

    def _restart(self, overflow: Duration) -> None:
        """Start the next cycle, carrying the time that ran past the end."""
        turns, carry = divmod(overflow.as_millis(), self.timer.total.as_millis())
        turns += 1
        if self.loop_mode is LoopMode.PING_PONG and turns % 2:
            self.timer.is_reversed = not self.timer.is_reversed
        self.timer.reset()
        self.timer.advance(Duration(carry))

    def done(self) -> bool:
        return self.loop_mode is LoopMode.ONCE and self.timer.done()

    def name(self) -> str:
        return self.shader.name

    def duration(self) -> Duration:
        return self.timer.total

    def copy(self) -> "Effect":
        return self._replace()

    # --- Decoration -------------------------------------------------------------------------------------------------

    def with_filter(self, cell_filter: CellFilter) -> "Effect":
        return self._replace(cell_filter=cell_filter)

    def with_pattern(self, pattern: Pattern) -> "Effect":
        return self._replace(pattern=pattern)

    def with_color_space(self, color_space: ColorSpace) -> "Effect":
        return self._replace(color_space=color_space)

    def with_area(self, area: Optional[Rect]) -> "Effect":
        return self._replace(area=area)

    def with_loop_mode(self, loop_mode: LoopMode) -> "Effect":
        return self._replace(loop_mode=loop_mode)

    def reversed(self) -> "Effect":
        return self._replace(timer=self.timer.reversed())

    def mirrored(self) -> "Effect":
        return self._replace(timer=self.timer.mirrored())

#
# End of effect.py
#######################################################################################################################
