# color_space.py
# Description: Color interpolation in RGB, HSL and HSV space
#
"""
Color space interpolation.

Colors are Rich ``Color`` values. Blending converts both endpoints to 8-bit
RGB (a missing color or the terminal default counts as black), interpolates
in the chosen space and converts back to a truecolor ``Color``.

- RGB: component-wise linear blend. Cheapest; saturated pairs can pass
  through muddy grays.
- HSL: default. Hue follows the shortest path around the color wheel.
- HSV: like HSL with value instead of lightness.
"""
#
# Imports
import colorsys
from enum import Enum
from typing import Optional, Tuple
#
# Third-Party Imports
from rich.color import Color
#
# Local Imports
from .fx_errors import UnknownNameError
from ..Utils.fx_math import clamp01, lerp, round_half_up
#
#######################################################################################################################
#
# Functions:

RGB = Tuple[int, int, int]


def to_rgb(color: Optional[Color]) -> RGB:
    """8-bit RGB components of a color; None and the default color map to black."""
    if color is None or color.is_default:
        return 0, 0, 0
    triplet = color.get_truecolor()
    return triplet.red, triplet.green, triplet.blue


def from_rgb(red: float, green: float, blue: float) -> Color:
    """A truecolor Color from (possibly fractional) 8-bit components."""
    return Color.from_rgb(
        max(0, min(255, round_half_up(red))),
        max(0, min(255, round_half_up(green))),
        max(0, min(255, round_half_up(blue))),
    )


def _lerp_hue(start: float, end: float, t: float) -> float:
    """Interpolate hue (in turns, 0..1) along the shortest arc."""
    diff = end - start
    if diff > 0.5:
        diff -= 1.0
    elif diff < -0.5:
        diff += 1.0
    return (start + diff * t) % 1.0


def _blend_rgb(start: RGB, end: RGB, t: float) -> Color:
    return from_rgb(*(lerp(a, b, t) for a, b in zip(start, end)))


def _blend_hsl(start: RGB, end: RGB, t: float) -> Color:
    h1, l1, s1 = colorsys.rgb_to_hls(*(c / 255.0 for c in start))
    h2, l2, s2 = colorsys.rgb_to_hls(*(c / 255.0 for c in end))
    # Achromatic endpoints have no meaningful hue; borrow the other one
    if s1 == 0.0:
        h1 = h2
    if s2 == 0.0:
        h2 = h1
    r, g, b = colorsys.hls_to_rgb(_lerp_hue(h1, h2, t), lerp(l1, l2, t), lerp(s1, s2, t))
    return from_rgb(r * 255.0, g * 255.0, b * 255.0)


def _blend_hsv(start: RGB, end: RGB, t: float) -> Color:
    h1, s1, v1 = colorsys.rgb_to_hsv(*(c / 255.0 for c in start))
    h2, s2, v2 = colorsys.rgb_to_hsv(*(c / 255.0 for c in end))
    if s1 == 0.0:
        h1 = h2
    if s2 == 0.0:
        h2 = h1
    r, g, b = colorsys.hsv_to_rgb(_lerp_hue(h1, h2, t), lerp(s1, s2, t), lerp(v1, v2, t))
    return from_rgb(r * 255.0, g * 255.0, b * 255.0)

#
#######################################################################################################################
#
# Classes:


class ColorSpace(Enum):
    """Color space used when an effect blends two colors."""
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"

    def interpolate(self, start: Optional[Color], end: Optional[Color], t: float) -> Optional[Color]:
        """
        Blend ``start`` toward ``end``.

        Returns ``start`` itself at t=0 and ``end`` itself at t=1. ``t`` is
        expected to be clamped already by the caller; it is clamped again
        here so an overshooting easing can never produce invalid channels.
        """
        t = clamp01(t)
        if t == 0.0:
            return start
        if t == 1.0:
            return end
        if start == end:
            return end
        blend = _BLENDERS[self]
        return blend(to_rgb(start), to_rgb(end), t)

    lerp = interpolate

    @classmethod
    def from_name(cls, name) -> "ColorSpace":
        if isinstance(name, ColorSpace):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownNameError.for_lookup("color space", name, (m.value for m in cls)) from None


_BLENDERS = {
    ColorSpace.RGB: _blend_rgb,
    ColorSpace.HSL: _blend_hsl,
    ColorSpace.HSV: _blend_hsv,
}

#
# End of color_space.py
#######################################################################################################################
