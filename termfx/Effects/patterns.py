# patterns.py
# Description: Spatial patterns mapping global effect progress to per-cell alpha
#
"""
Spatial patterns.

A pattern turns the effect's single global alpha into a local alpha for each
cell position, which lets any shader reveal or conceal directionally. All
built-ins share the same band rule: every position has an offset along the
pattern's axis, a head advances ``global * (span + gradient)`` cells along
that axis, and the local alpha ramps from 0 to 1 over ``gradient`` cells
behind the head. Increasing global alpha therefore never lowers a cell's
local alpha.
"""
#
# Imports
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
#
# Local Imports
from .fx_errors import EffectConfigurationError
from .motion import Motion
from ..Utils.fx_math import clamp01
from ..Utils.geometry import Position, Rect
#
#######################################################################################################################
#
# Functions:


def band_alpha(global_alpha: float, offset: float, span: float, gradient_length: float) -> float:
    """Local alpha for a position ``offset`` cells along an axis of ``span`` cells."""
    head = global_alpha * (span + gradient_length)
    if gradient_length <= 0:
        return 1.0 if head > offset else 0.0
    return clamp01((head - offset) / gradient_length)


def _validate_gradient(gradient_length: float) -> None:
    if gradient_length < 0:
        raise EffectConfigurationError.negative_parameter("gradient_length", gradient_length)

#
#######################################################################################################################
#
# Classes:


class Pattern(ABC):
    """Strategy mapping a global alpha to a position-specific alpha."""

    name: str = "pattern"

    @abstractmethod
    def map_alpha(self, global_alpha: float, position: Position, area: Rect) -> float:
        """Alpha for ``position`` within ``area`` at ``global_alpha``."""


@dataclass(frozen=True)
class IdentityPattern(Pattern):
    """Every cell uses the global alpha unchanged."""
    name = "identity"

    def map_alpha(self, global_alpha: float, position: Position, area: Rect) -> float:
        return global_alpha


@dataclass(frozen=True)
class SweepPattern(Pattern):
    """Linear gradient travelling across the area's width or height."""
    direction: Motion = Motion.LEFT_TO_RIGHT
    gradient_length: float = 0.0
    name = "sweep"

    def __post_init__(self):
        _validate_gradient(self.gradient_length)

    def map_alpha(self, global_alpha: float, position: Position, area: Rect) -> float:
        direction = self.direction
        if direction is Motion.LEFT_TO_RIGHT:
            offset, span = position.x - area.x, area.width
        elif direction is Motion.RIGHT_TO_LEFT:
            offset, span = area.right - 1 - position.x, area.width
        elif direction is Motion.UP_TO_DOWN:
            offset, span = position.y - area.y, area.height
        else:
            offset, span = area.bottom - 1 - position.y, area.height
        return band_alpha(global_alpha, offset, span, self.gradient_length)


@dataclass(frozen=True)
class RadialPattern(Pattern):
    """
    Expansion outward from a normalized center point.

    ``aspect_ratio`` is the height/width ratio of a terminal cell; horizontal
    distances are divided by it so circles look round on screen (use 2.0 for
    typical terminal fonts, 1.0 for square math).
    """
    center_x: float = 0.5
    center_y: float = 0.5
    gradient_length: float = 0.0
    aspect_ratio: float = 1.0
    name = "radial"

    def __post_init__(self):
        _validate_gradient(self.gradient_length)
        for label, value in (("center_x", self.center_x), ("center_y", self.center_y)):
            if not 0.0 <= value <= 1.0:
                raise EffectConfigurationError.out_of_unit_range(label, value)
        if self.aspect_ratio <= 0:
            raise EffectConfigurationError(f"'aspect_ratio' must be positive, got {self.aspect_ratio!r}")

    def _distance(self, px: float, py: float, area: Rect) -> float:
        cx = area.x + self.center_x * area.width
        cy = area.y + self.center_y * area.height
        return math.hypot((px - cx) / self.aspect_ratio, py - cy)

    def map_alpha(self, global_alpha: float, position: Position, area: Rect) -> float:
        # Measure from cell centers
        distance = self._distance(position.x + 0.5, position.y + 0.5, area)
        corners = (
            (area.x, area.y),
            (area.right, area.y),
            (area.x, area.bottom),
            (area.right, area.bottom),
        )
        span = max(self._distance(cx, cy, area) for cx, cy in corners)
        return band_alpha(global_alpha, distance, span, self.gradient_length)


class DiagonalDirection(Enum):
    TOP_LEFT_TO_BOTTOM_RIGHT = "top_left_to_bottom_right"
    TOP_RIGHT_TO_BOTTOM_LEFT = "top_right_to_bottom_left"
    BOTTOM_LEFT_TO_TOP_RIGHT = "bottom_left_to_top_right"
    BOTTOM_RIGHT_TO_TOP_LEFT = "bottom_right_to_top_left"


@dataclass(frozen=True)
class DiagonalPattern(Pattern):
    """Gradient travelling from one corner of the area to the opposite corner."""
    direction: DiagonalDirection = DiagonalDirection.TOP_LEFT_TO_BOTTOM_RIGHT
    gradient_length: float = 0.0
    name = "diagonal"

    def __post_init__(self):
        _validate_gradient(self.gradient_length)

    def map_alpha(self, global_alpha: float, position: Position, area: Rect) -> float:
        dx = position.x - area.x
        dy = position.y - area.y
        direction = self.direction
        if direction in (DiagonalDirection.TOP_RIGHT_TO_BOTTOM_LEFT, DiagonalDirection.BOTTOM_RIGHT_TO_TOP_LEFT):
            dx = area.width - 1 - dx
        if direction in (DiagonalDirection.BOTTOM_LEFT_TO_TOP_RIGHT, DiagonalDirection.BOTTOM_RIGHT_TO_TOP_LEFT):
            dy = area.height - 1 - dy
        span = area.width + area.height - 1
        return band_alpha(global_alpha, dx + dy, span, self.gradient_length)


IDENTITY = IdentityPattern()

#
# End of patterns.py
#######################################################################################################################
