"""Fade: blend foreground and/or background colors between two endpoints."""

from dataclasses import dataclass
from typing import Optional

from rich.color import Color

from .base_shader import Shader, ShaderContext, register_shader
from ..fx_errors import EffectConfigurationError
from ...Utils.cell_buffer import Cell
from ...Utils.geometry import Position


@dataclass(frozen=True)
class ColorRange:
    """
    Endpoints of a fade for one color channel.

    Both ends are fixed for the life of the effect; the cell's own color is
    never read, so a buffer that is not redrawn between ticks still fades
    along the easing curve.
    ``None`` is the terminal default color, which blends as black.
    """
    start: Optional[Color]
    end: Optional[Color]


@register_shader("fade")
@dataclass(frozen=True)
class FadeShader(Shader):
    fg: Optional[ColorRange] = None
    bg: Optional[ColorRange] = None

    def __post_init__(self):
        if self.fg is None and self.bg is None:
            raise EffectConfigurationError(
                "A fade needs a foreground and/or background color range",
                suggestion="Pass fg=ColorRange(...) or bg=ColorRange(...)"
            )

    def apply(self, alpha: float, position: Position, cell: Cell, context: ShaderContext) -> Cell:
        fg = cell.fg
        bg = cell.bg
        lerp = context.color_space.interpolate
        if self.fg is not None:
            fg = lerp(self.fg.start, self.fg.end, alpha)
        if self.bg is not None:
            bg = lerp(self.bg.start, self.bg.end, alpha)
        if fg == cell.fg and bg == cell.bg:
            return cell
        return cell.with_colors(fg, bg)
