# interpolation.py
# Description: Easing functions mapping normalized time to animation progress
#
"""
Easing functions for effect timers.

Every member of :class:`Interpolation` maps ``t`` in ``[0, 1]`` to a progress
value. Most stay within ``[0, 1]``; the Elastic and Back families overshoot on
purpose. Nothing here clamps: callers that use progress as a blend factor or an
alpha clamp it where they use it.
"""
#
# Imports
import math
from enum import Enum
from typing import Callable, Dict
#
# Local Imports
from .fx_errors import UnknownNameError
#
#######################################################################################################################
#
# Easing functions:

_BACK_C1 = 1.70158
_BACK_C2 = _BACK_C1 * 1.525
_BACK_C3 = _BACK_C1 + 1.0
_ELASTIC_C4 = (2.0 * math.pi) / 3.0
_ELASTIC_C5 = (2.0 * math.pi) / 4.5


def _linear(t: float) -> float:
    return t


def _poly_in(power: int) -> Callable[[float], float]:
    def ease(t: float) -> float:
        return t ** power
    return ease


def _poly_out(power: int) -> Callable[[float], float]:
    def ease(t: float) -> float:
        return 1.0 - (1.0 - t) ** power
    return ease


def _poly_in_out(power: int) -> Callable[[float], float]:
    def ease(t: float) -> float:
        if t < 0.5:
            return (2 ** (power - 1)) * t ** power
        return 1.0 - ((-2.0 * t + 2.0) ** power) / 2.0
    return ease


def _sine_in(t: float) -> float:
    return 1.0 - math.cos((t * math.pi) / 2.0)


def _sine_out(t: float) -> float:
    return math.sin((t * math.pi) / 2.0)


def _sine_in_out(t: float) -> float:
    return -(math.cos(math.pi * t) - 1.0) / 2.0


def _expo_in(t: float) -> float:
    return 0.0 if t == 0.0 else 2.0 ** (10.0 * t - 10.0)


def _expo_out(t: float) -> float:
    return 1.0 if t == 1.0 else 1.0 - 2.0 ** (-10.0 * t)


def _expo_in_out(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    if t < 0.5:
        return 2.0 ** (20.0 * t - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * t + 10.0)) / 2.0


def _circ_in(t: float) -> float:
    return 1.0 - math.sqrt(max(0.0, 1.0 - t * t))


def _circ_out(t: float) -> float:
    return math.sqrt(max(0.0, 1.0 - (t - 1.0) ** 2))


def _circ_in_out(t: float) -> float:
    if t < 0.5:
        return (1.0 - math.sqrt(max(0.0, 1.0 - (2.0 * t) ** 2))) / 2.0
    return (math.sqrt(max(0.0, 1.0 - (-2.0 * t + 2.0) ** 2)) + 1.0) / 2.0


def _elastic_in(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    return -(2.0 ** (10.0 * t - 10.0)) * math.sin((t * 10.0 - 10.75) * _ELASTIC_C4)


def _elastic_out(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    return 2.0 ** (-10.0 * t) * math.sin((t * 10.0 - 0.75) * _ELASTIC_C4) + 1.0


def _elastic_in_out(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    if t < 0.5:
        return -(2.0 ** (20.0 * t - 10.0) * math.sin((20.0 * t - 11.125) * _ELASTIC_C5)) / 2.0
    return (2.0 ** (-20.0 * t + 10.0) * math.sin((20.0 * t - 11.125) * _ELASTIC_C5)) / 2.0 + 1.0


def _back_in(t: float) -> float:
    return _BACK_C3 * t ** 3 - _BACK_C1 * t ** 2


def _back_out(t: float) -> float:
    return 1.0 + _BACK_C3 * (t - 1.0) ** 3 + _BACK_C1 * (t - 1.0) ** 2


def _back_in_out(t: float) -> float:
    if t < 0.5:
        return ((2.0 * t) ** 2 * ((_BACK_C2 + 1.0) * 2.0 * t - _BACK_C2)) / 2.0
    return ((2.0 * t - 2.0) ** 2 * ((_BACK_C2 + 1.0) * (t * 2.0 - 2.0) + _BACK_C2) + 2.0) / 2.0


def _bounce_out(t: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if t < 1.0 / d1:
        return n1 * t * t
    if t < 2.0 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def _bounce_in(t: float) -> float:
    return 1.0 - _bounce_out(1.0 - t)


def _bounce_in_out(t: float) -> float:
    if t < 0.5:
        return (1.0 - _bounce_out(1.0 - 2.0 * t)) / 2.0
    return (1.0 + _bounce_out(2.0 * t - 1.0)) / 2.0

#
#######################################################################################################################
#
# Classes:


class Interpolation(Enum):
    """Named easing functions, grouped in In/Out/InOut families."""
    LINEAR = "linear"
    QUAD_IN = "quad_in"
    QUAD_OUT = "quad_out"
    QUAD_IN_OUT = "quad_in_out"
    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_IN_OUT = "cubic_in_out"
    QUART_IN = "quart_in"
    QUART_OUT = "quart_out"
    QUART_IN_OUT = "quart_in_out"
    QUINT_IN = "quint_in"
    QUINT_OUT = "quint_out"
    QUINT_IN_OUT = "quint_in_out"
    SINE_IN = "sine_in"
    SINE_OUT = "sine_out"
    SINE_IN_OUT = "sine_in_out"
    EXPO_IN = "expo_in"
    EXPO_OUT = "expo_out"
    EXPO_IN_OUT = "expo_in_out"
    CIRC_IN = "circ_in"
    CIRC_OUT = "circ_out"
    CIRC_IN_OUT = "circ_in_out"
    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    ELASTIC_IN_OUT = "elastic_in_out"
    BACK_IN = "back_in"
    BACK_OUT = "back_out"
    BACK_IN_OUT = "back_in_out"
    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    BOUNCE_IN_OUT = "bounce_in_out"

    def alpha(self, t: float) -> float:
        """Apply the easing function to a normalized time value."""
        return _EASING_FUNCTIONS[self](t)

    __call__ = alpha

    def flipped(self) -> "Interpolation":
        """Return the mirror-image easing (In <-> Out); InOut and Linear map to themselves."""
        name = self.value
        if name.endswith("_in_out") or self is Interpolation.LINEAR:
            return self
        if name.endswith("_in"):
            return Interpolation(name[:-3] + "_out")
        return Interpolation(name[:-4] + "_in")

    def overshoots(self) -> bool:
        """Whether this easing may leave [0, 1]."""
        return self.value.startswith(("elastic", "back"))

    @classmethod
    def from_name(cls, name: str) -> "Interpolation":
        """
        Look up an interpolation by name.

        Accepts the enum value ("quad_out"), the enum member name ("QUAD_OUT")
        or the CamelCase form ("QuadOut").
        """
        if isinstance(name, Interpolation):
            return name
        key = str(name).strip()
        # CamelCase -> snake_case
        snake = "".join(
            f"_{ch.lower()}" if ch.isupper() and i > 0 and not key[i - 1].isupper() and key[i - 1] != "_"
            else ch.lower()
            for i, ch in enumerate(key)
        )
        try:
            return cls(snake.replace("-", "_"))
        except ValueError:
            raise UnknownNameError.for_lookup("interpolation", name, (m.value for m in cls)) from None


_EASING_FUNCTIONS: Dict[Interpolation, Callable[[float], float]] = {
    Interpolation.LINEAR: _linear,
    Interpolation.QUAD_IN: _poly_in(2),
    Interpolation.QUAD_OUT: _poly_out(2),
    Interpolation.QUAD_IN_OUT: _poly_in_out(2),
    Interpolation.CUBIC_IN: _poly_in(3),
    Interpolation.CUBIC_OUT: _poly_out(3),
    Interpolation.CUBIC_IN_OUT: _poly_in_out(3),
    Interpolation.QUART_IN: _poly_in(4),
    Interpolation.QUART_OUT: _poly_out(4),
    Interpolation.QUART_IN_OUT: _poly_in_out(4),
    Interpolation.QUINT_IN: _poly_in(5),
    Interpolation.QUINT_OUT: _poly_out(5),
    Interpolation.QUINT_IN_OUT: _poly_in_out(5),
    Interpolation.SINE_IN: _sine_in,
    Interpolation.SINE_OUT: _sine_out,
    Interpolation.SINE_IN_OUT: _sine_in_out,
    Interpolation.EXPO_IN: _expo_in,
    Interpolation.EXPO_OUT: _expo_out,
    Interpolation.EXPO_IN_OUT: _expo_in_out,
    Interpolation.CIRC_IN: _circ_in,
    Interpolation.CIRC_OUT: _circ_out,
    Interpolation.CIRC_IN_OUT: _circ_in_out,
    Interpolation.ELASTIC_IN: _elastic_in,
    Interpolation.ELASTIC_OUT: _elastic_out,
    Interpolation.ELASTIC_IN_OUT: _elastic_in_out,
    Interpolation.BACK_IN: _back_in,
    Interpolation.BACK_OUT: _back_out,
    Interpolation.BACK_IN_OUT: _back_in_out,
    Interpolation.BOUNCE_IN: _bounce_in,
    Interpolation.BOUNCE_OUT: _bounce_out,
    Interpolation.BOUNCE_IN_OUT: _bounce_in_out,
}

#
# End of interpolation.py
#######################################################################################################################
