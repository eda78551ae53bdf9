"""
Expand: reveal content outward from the center along one axis.

At alpha 0 the whole area shows a flat fill in ``style``; as alpha grows the
revealed span ``[center - half, center + half]`` widens until it covers the
area at alpha 1. Each side is a sweep toward the edge, so boundary cells use
the same eighth-block glyphs as the slide shader.
"""

from dataclasses import dataclass, field

from rich.style import Style

from .base_shader import Shader, ShaderContext, register_shader
from .glyphs import coverage_level, partial_block
from ..motion import ExpandDirection
from ...Utils.cell_buffer import Cell
from ...Utils.geometry import Position


@register_shader("expand")
@dataclass(frozen=True)
class ExpandShader(Shader):
    direction: ExpandDirection = ExpandDirection.HORIZONTAL
    style: Style = field(default_factory=Style.null)

    def apply(self, alpha: float, position: Position, cell: Cell, context: ShaderContext) -> Cell:
        area = context.area
        horizontal = self.direction is ExpandDirection.HORIZONTAL
        if horizontal:
            origin, length, coordinate = area.x, area.width, position.x
        else:
            origin, length, coordinate = area.y, area.height, position.y

        center = origin + length / 2.0
        half = alpha * length / 2.0
        # How much of [coordinate, coordinate + 1) lies inside the revealed span
        revealed = max(0.0, min(coordinate + 1.0, center + half) - max(float(coordinate), center - half))
        level = coverage_level(1.0 - revealed)
        if level == 0:
            return cell
        if level == 8:
            return Cell(" ", self.style)
        # The covered part of a boundary cell faces the nearer edge
        from_start = coordinate + 0.5 < center
        return partial_block(level, horizontal, from_start, self.style.bgcolor, cell.bg)
