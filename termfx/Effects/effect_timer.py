# effect_timer.py
# Description: Timer converting elapsed tick time into eased effect progress
#
# Imports
from typing import Optional, Union
#
# Local Imports
from .duration import Duration, ZERO, as_duration
from .interpolation import Interpolation
from ..Utils.fx_math import clamp01
#
#######################################################################################################################
#
# Classes:


class EffectTimer:
    """
    Tracks elapsed time for an effect and maps it to progress.

    ``progress()`` is computed in three stages::

        t = clamp01(elapsed / total)     # raw ratio
        t = 1 - t        if mirrored     # time runs backward from the end
        p = interpolation(t)
        p = 1 - p        if reversed     # output is flipped

    Mirroring acts on time, reversing acts on the output; for a non-symmetric
    easing they produce different curves. Completion (``done()``) only looks at
    the raw ratio, so overshooting easings still finish on schedule.
    """

    def __init__(
        self,
        total: Union[Duration, int, float],
        interpolation: Interpolation = Interpolation.LINEAR,
        *,
        elapsed: Union[Duration, int, float] = ZERO,
        reversed: bool = False,
        mirrored: bool = False,
    ):
        self.total = as_duration(total)
        self.interpolation = Interpolation.from_name(interpolation)
        self.elapsed = as_duration(elapsed)
        self.is_reversed = reversed
        self.is_mirrored = mirrored

    @classmethod
    def from_ms(cls, milliseconds: Union[int, float], interpolation: Interpolation = Interpolation.LINEAR) -> "EffectTimer":
        """Creates a timer lasting ``milliseconds`` with the given easing."""
        return cls(Duration.from_millis(milliseconds), interpolation)

    # --- State -----------------------------------------------------------------------------------------------------

    def advance(self, delta: Union[Duration, int, float]) -> Optional[Duration]:
        """
        Move the timer forward by ``delta``.

        Returns the portion of ``delta`` that ran past the end of the timer,
        or None if the timer has not yet finished.
        """
        delta = as_duration(delta)
        before = self.elapsed
        self.elapsed = self.elapsed + delta
        if self.elapsed < self.total:
            return None
        # Only the part of this delta beyond the end counts as overflow
        already_over = before.checked_sub(self.total)
        if already_over is not None:
            return delta
        return self.elapsed - self.total

    def reset(self) -> None:
        self.elapsed = ZERO

    def ratio(self) -> float:
        """Raw completion fraction in [0, 1], before mirroring and easing."""
        total_ms = self.total.as_millis()
        if total_ms == 0:
            return 1.0 if self.elapsed.as_millis() > 0 else 0.0
        return clamp01(self.elapsed.as_millis() / total_ms)

    def progress(self) -> float:
        """Eased progress; may leave [0, 1] for overshooting easings."""
        t = self.ratio()
        if self.is_mirrored:
            t = 1.0 - t
        p = self.interpolation.alpha(t)
        if self.is_reversed:
            p = 1.0 - p
        return p

    alpha = progress

    def done(self) -> bool:
        return self.ratio() >= 1.0

    def started(self) -> bool:
        return not self.elapsed.is_zero()

    def remaining(self) -> Duration:
        return self.total.saturating_sub(self.elapsed)

    # --- Derived timers ---------------------------------------------------------------------------------------------

    def copy(self) -> "EffectTimer":
        return EffectTimer(
            self.total,
            self.interpolation,
            elapsed=self.elapsed,
            reversed=self.is_reversed,
            mirrored=self.is_mirrored,
        )

    def reversed(self) -> "EffectTimer":
        """A timer whose progress output is flipped (``1 - p``)."""
        timer = self.copy()
        timer.is_reversed = not self.is_reversed
        return timer

    def mirrored(self) -> "EffectTimer":
        """A timer whose time runs backward from the end (``t -> 1 - t``)."""
        timer = self.copy()
        timer.is_mirrored = not self.is_mirrored
        return timer

    def with_interpolation(self, interpolation: Interpolation) -> "EffectTimer":
        timer = self.copy()
        timer.interpolation = Interpolation.from_name(interpolation)
        return timer

    def __eq__(self, other) -> bool:
        if not isinstance(other, EffectTimer):
            return NotImplemented
        return (
            self.total == other.total
            and self.elapsed == other.elapsed
            and self.interpolation is other.interpolation
            and self.is_reversed == other.is_reversed
            and self.is_mirrored == other.is_mirrored
        )

    __hash__ = None

    def __repr__(self) -> str:
        flags = []
        if self.is_reversed:
            flags.append("reversed")
        if self.is_mirrored:
            flags.append("mirrored")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        return f"EffectTimer({self.elapsed}/{self.total}, {self.interpolation.value}{suffix})"

#
# End of effect_timer.py
#######################################################################################################################
