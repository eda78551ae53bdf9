# effect_manager.py
# Description: Owns the active effects and drives them once per frame
#
# Imports
import math
from typing import List, Optional, Union
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from .base_effect import BaseEffect
from .duration import Duration, ZERO
from ..Utils.cell_buffer import CellBuffer
from ..Utils.geometry import Rect
#
#######################################################################################################################
#
# Classes:


class EffectManager:
    """
    Fire-and-forget container for running effects.

    Effects are processed in the order they were added; finished effects are
    dropped at the end of the tick that finished them. Not thread-safe: call
    it from whatever thread renders the buffer.

    Usage:
        manager = EffectManager()
        manager.add_effect(fx.fade_to_fg(Color.parse("cyan"), 2000, Interpolation.SINE_IN_OUT))
        # in the render loop
        if manager.is_running():
            manager.process_effects(frame_ms, buffer, buffer.area)
    """

    def __init__(self, max_delta: Optional[Union[Duration, int]] = None):
        if max_delta is None:
            from ..config import get_fx_setting
            max_delta = get_fx_setting("manager", "max_delta_ms", 0, int)
        if not isinstance(max_delta, Duration):
            max_delta = Duration.from_millis(max(0, max_delta))
        # Zero disables the clamp
        self.max_delta = max_delta
        self._effects: List[BaseEffect] = []
        # Sub-millisecond remainder of float deltas
        self._carry_ms = 0.0

    def add_effect(self, effect: BaseEffect) -> None:
        self._effects.append(effect)
        logger.debug(f"Effect added: {effect.name()} ({len(self._effects)} active)")

    def remove_effect(self, effect: BaseEffect) -> bool:
        """Cancel a running effect. Returns False if it was not being managed."""
        for index, candidate in enumerate(self._effects):
            if candidate is effect:
                del self._effects[index]
                logger.debug(f"Effect cancelled: {effect.name()}")
                return True
        return False

    def _normalize_delta(self, delta: Union[Duration, int, float]) -> Duration:
        if not isinstance(delta, Duration):
            if delta < 0:
                logger.warning(f"Negative frame delta {delta}ms clamped to zero")
                delta = ZERO
            else:
                # Whole milliseconds go to the effects; the fraction waits for the next frame
                total = delta + self._carry_ms
                whole = math.floor(total + 1e-9)
                self._carry_ms = max(0.0, total - whole)
                delta = Duration.from_millis(whole)
        if not self.max_delta.is_zero() and delta > self.max_delta:
            logger.debug(f"Frame delta {delta} clamped to {self.max_delta}")
            delta = self.max_delta
            self._carry_ms = 0.0
        return delta

    def process_effects(self, delta: Union[Duration, int, float], buffer: CellBuffer, area: Optional[Rect] = None) -> None:
        """Advance every active effect by ``delta`` and retire the finished ones."""
        if not self._effects:
            return
        delta = self._normalize_delta(delta)
        area = buffer.area if area is None else area

        finished = []
        for effect in self._effects:
            effect.process(delta, buffer, area)
            if effect.done():
                finished.append(effect)

        if finished:
            self._effects = [effect for effect in self._effects if not any(effect is f for f in finished)]
            logger.debug(f"Retired {len(finished)} finished effect(s): {', '.join(e.name() for e in finished)}")

    def is_running(self) -> bool:
        return bool(self._effects)

    def size(self) -> int:
        return len(self._effects)

    def __len__(self) -> int:
        return len(self._effects)

    @property
    def effects(self) -> List[BaseEffect]:
        """Snapshot of the active effects, in processing order."""
        return list(self._effects)

    def clear(self) -> None:
        if self._effects:
            logger.debug(f"Clearing {len(self._effects)} active effect(s)")
        self._effects.clear()

#
# End of effect_manager.py
#######################################################################################################################
