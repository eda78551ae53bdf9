# sliding_window.py
# Description: Moving gradient band used by sweep and slide shaders
#
"""
Sliding window alpha.

A band ``gradient_length`` cells wide moves across the area as progress goes
from 0 to 1::

    start = axis_origin - gradient_length + (axis_length + gradient_length) * progress
    end   = start + gradient_length

For the base directions (right-to-left, down-to-up) a coordinate before the
band has alpha 0, one after the band has alpha 1, and one inside the band is
interpolated linearly. Left-to-right and up-to-down are the complement of the
base formula at the same position, so only one formula per axis exists.

Sweep and slide shaders use this directly rather than going through a
Pattern; patterns are generic and can be applied on top of any shader.
"""
#
# Imports
from typing import NamedTuple
#
# Local Imports
from .motion import Motion
from ..Utils.geometry import Position, Rect
#
#######################################################################################################################
#
# Classes:


class Gradient(NamedTuple):
    start: float
    end: float


def calculate_gradient(progress: float, coordinate: int, axis_length: int, gradient_length: float) -> Gradient:
    start = (coordinate - gradient_length) + (axis_length + gradient_length) * progress
    return Gradient(start, start + gradient_length)


class SlidingWindowAlpha:
    """Per-position alpha for one direction, area, progress and gradient length."""

    __slots__ = ("direction", "area", "progress", "gradient_length", "gradient", "_alpha_per_cell")

    def __init__(self, direction: Motion, area: Rect, progress: float, gradient_length: float):
        self.direction = direction
        self.area = area
        self.progress = progress
        self.gradient_length = gradient_length
        if direction.is_horizontal():
            self.gradient = calculate_gradient(progress, area.x, area.width, gradient_length)
        else:
            self.gradient = calculate_gradient(progress, area.y, area.height, gradient_length)
        span = self.gradient.end - self.gradient.start
        self._alpha_per_cell = 1.0 / span if span > 0 else 1.0

    @classmethod
    def create(cls, direction: Motion, area: Rect, progress: float, gradient_length: float) -> "SlidingWindowAlpha":
        return cls(direction, area, progress, gradient_length)

    def _base_alpha(self, coordinate: float) -> float:
        start, end = self.gradient
        if coordinate < start:
            return 0.0
        if coordinate > end:
            return 1.0
        if end == start:
            # Zero-width band: the position sits exactly on the edge
            return 1.0
        return self._alpha_per_cell * (coordinate - start)

    def alpha(self, position: Position) -> float:
        direction = self.direction
        if direction is Motion.RIGHT_TO_LEFT:
            return self._base_alpha(position.x)
        if direction is Motion.LEFT_TO_RIGHT:
            return 1.0 - self._base_alpha(position.x)
        if direction is Motion.DOWN_TO_UP:
            return self._base_alpha(position.y)
        return 1.0 - self._base_alpha(position.y)

#
# End of sliding_window.py
#######################################################################################################################
