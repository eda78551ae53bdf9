# duration.py
# Description: Millisecond-resolution, non-negative time spans for effect timing
#
# Imports
from dataclasses import dataclass
from typing import Optional, Union
#
# Local Imports
from .fx_errors import InvalidDurationError
#
#######################################################################################################################
#
# Classes:


@dataclass(frozen=True, order=True)
class Duration:
    """
    An immutable, non-negative time span with millisecond precision.

    Millisecond resolution is enough for frame based animation (a 60fps frame
    is ~16ms) and keeps arithmetic exact, which the effect timers rely on to
    finish on schedule.
    """
    milliseconds: int = 0

    def __post_init__(self):
        if self.milliseconds < 0:
            raise InvalidDurationError.negative(self.milliseconds)
        # Normalize floats/bools passed by callers into a plain int
        object.__setattr__(self, "milliseconds", int(self.milliseconds))

    @classmethod
    def from_millis(cls, milliseconds: Union[int, float]) -> "Duration":
        """Creates a duration from milliseconds."""
        return cls(int(milliseconds))

    @classmethod
    def from_secs(cls, seconds: int) -> "Duration":
        """Creates a duration from whole seconds."""
        return cls(int(seconds) * 1000)

    @classmethod
    def from_secs_float(cls, seconds: float) -> "Duration":
        """Creates a duration from fractional seconds (truncated to the millisecond)."""
        return cls(int(seconds * 1000.0))

    def as_millis(self) -> int:
        return self.milliseconds

    def as_secs_float(self) -> float:
        return self.milliseconds / 1000.0

    def is_zero(self) -> bool:
        return self.milliseconds == 0

    def checked_sub(self, other: "Duration") -> Optional["Duration"]:
        """Subtracts another duration, returning None if the result would be negative."""
        if self.milliseconds < other.milliseconds:
            return None
        return Duration(self.milliseconds - other.milliseconds)

    def saturating_sub(self, other: "Duration") -> "Duration":
        """Subtracts another duration, stopping at zero."""
        return self.checked_sub(other) or ZERO

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.milliseconds + other.milliseconds)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.milliseconds - other.milliseconds)

    def __mul__(self, scalar: Union[int, float]) -> "Duration":
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Duration(int(self.milliseconds * scalar))

    __rmul__ = __mul__

    def __bool__(self) -> bool:
        return self.milliseconds != 0

    def __str__(self) -> str:
        return f"{self.milliseconds}ms"


ZERO = Duration(0)
Duration.ZERO = ZERO


def as_duration(value: Union["Duration", int, float]) -> Duration:
    """Coerce a Duration or a number of milliseconds into a Duration."""
    if isinstance(value, Duration):
        return value
    return Duration.from_millis(value)

#
# End of duration.py
#######################################################################################################################
