"""
Slide: a shutter that covers cells with a solid color, one eighth at a time.

Fully covered cells become blanks in ``color_behind``; cells inside the band
are drawn with partial block glyphs so the edge moves with sub-cell
precision. The covered side is the side the motion comes from.
"""

from dataclasses import dataclass
from typing import Optional

from rich.color import Color
from rich.style import Style

from .base_shader import Shader, ShaderContext, register_shader
from .glyphs import coverage_level, partial_block
from .sweep import directional_alpha, validate_band
from ..motion import Motion
from ...Utils.cell_buffer import Cell
from ...Utils.geometry import Position


@register_shader("slide")
@dataclass(frozen=True)
class SlideShader(Shader):
    direction: Motion = Motion.LEFT_TO_RIGHT
    gradient_length: int = 0
    randomness: int = 0
    color_behind: Optional[Color] = None
    seed: int = 0

    def __post_init__(self):
        validate_band(self.gradient_length, self.randomness)

    def apply(self, alpha: float, position: Position, cell: Cell, context: ShaderContext) -> Cell:
        coverage = directional_alpha(
            self.direction, context.area, alpha, self.gradient_length, self.randomness, self.seed, position
        )
        level = coverage_level(coverage)
        if level == 0:
            return cell
        if level == 8:
            return Cell(" ", Style(bgcolor=self.color_behind))
        from_start = self.direction in (Motion.LEFT_TO_RIGHT, Motion.UP_TO_DOWN)
        return partial_block(level, self.direction.is_horizontal(), from_start, self.color_behind, cell.bg)
