"""
Sweep: a directional band that blends cells to/from a faded color.

The band comes from SlidingWindowAlpha using the shader's alpha as window
progress. With ``randomness > 0`` every line (row for horizontal motion,
column for vertical) is shifted by a stable pseudo-random number of cells so
the leading edge looks ragged; the window's axis is extended by the same
amount so every cell is still fully covered/uncovered at the ends.
"""

from dataclasses import dataclass
from typing import Optional

from rich.color import Color

from .base_shader import Shader, ShaderContext, register_shader
from ..fx_errors import EffectConfigurationError
from ..motion import Motion
from ..sliding_window import SlidingWindowAlpha
from ...Utils.cell_buffer import Cell
from ...Utils.fx_math import cell_offset
from ...Utils.geometry import Position, Rect


def validate_band(gradient_length: int, randomness: int) -> None:
    if gradient_length < 0:
        raise EffectConfigurationError.negative_parameter("gradient_length", gradient_length)
    if randomness < 0:
        raise EffectConfigurationError.negative_parameter("randomness", randomness)


def directional_alpha(
    direction: Motion,
    area: Rect,
    progress: float,
    gradient_length: int,
    randomness: int,
    seed: int,
    position: Position,
) -> float:
    """Band alpha for one cell, including its line's random offset."""
    if direction.is_horizontal():
        window_area = Rect(area.x, area.y, area.width + randomness, area.height)
        offset = cell_offset(seed, 0, position.y, randomness)
        sample = Position(position.x + offset, position.y)
    else:
        window_area = Rect(area.x, area.y, area.width, area.height + randomness)
        offset = cell_offset(seed, position.x, 0, randomness)
        sample = Position(position.x, position.y + offset)
    return SlidingWindowAlpha.create(direction, window_area, progress, gradient_length).alpha(sample)


@register_shader("sweep")
@dataclass(frozen=True)
class SweepShader(Shader):
    direction: Motion = Motion.LEFT_TO_RIGHT
    gradient_length: int = 0
    randomness: int = 0
    faded_color: Optional[Color] = None
    seed: int = 0

    def __post_init__(self):
        validate_band(self.gradient_length, self.randomness)

    def apply(self, alpha: float, position: Position, cell: Cell, context: ShaderContext) -> Cell:
        local = directional_alpha(
            self.direction, context.area, alpha, self.gradient_length, self.randomness, self.seed, position
        )
        if local >= 1.0:
            return cell
        lerp = context.color_space.interpolate
        fg = lerp(self.faded_color, cell.fg, local)
        bg = lerp(self.faded_color, cell.bg, local)
        return cell.with_colors(fg, bg)
