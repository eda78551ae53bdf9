"""Paint: apply a fixed foreground/background, at once or gradually."""

from dataclasses import dataclass
from typing import Optional

from rich.color import Color

from .base_shader import Shader, ShaderContext, register_shader
from ..fx_errors import EffectConfigurationError
from ...Utils.cell_buffer import Cell
from ...Utils.geometry import Position


@register_shader("paint")
@dataclass(frozen=True)
class PaintShader(Shader):
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    # Binary mode paints once alpha reaches this value
    threshold: float = 0.0
    # Gradual mode blends from start_fg/start_bg toward the paint by alpha
    gradual: bool = False
    # Fixed gradual starting colors; None blends as black
    start_fg: Optional[Color] = None
    start_bg: Optional[Color] = None

    def __post_init__(self):
        if self.fg is None and self.bg is None:
            raise EffectConfigurationError(
                "Paint needs a foreground and/or background color",
                suggestion="Use paint_fg(...) or paint_bg(...) for a single channel"
            )
        if not 0.0 <= self.threshold <= 1.0:
            raise EffectConfigurationError.out_of_unit_range("threshold", self.threshold)

    def apply(self, alpha: float, position: Position, cell: Cell, context: ShaderContext) -> Cell:
        if self.gradual:
            lerp = context.color_space.interpolate
            fg = cell.fg if self.fg is None else lerp(self.start_fg, self.fg, alpha)
            bg = cell.bg if self.bg is None else lerp(self.start_bg, self.bg, alpha)
        elif alpha >= self.threshold:
            fg = cell.fg if self.fg is None else self.fg
            bg = cell.bg if self.bg is None else self.bg
        else:
            return cell
        if fg == cell.fg and bg == cell.bg:
            return cell
        return cell.with_colors(fg, bg)
