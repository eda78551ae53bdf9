"""
Dissolve: cells drop their text in a stable pseudo-random order.

Each cell's threshold is a pure hash of (seed, x, y), so replaying the same
ticks over the same buffer gives identical output regardless of the order in
which cells are visited. Coalesce is this shader driven by a mirrored timer.
"""

from dataclasses import dataclass
from typing import Optional

from rich.style import Style

from .base_shader import Shader, ShaderContext, register_shader
from ...Utils.cell_buffer import Cell
from ...Utils.fx_math import cell_noise
from ...Utils.geometry import Position


@register_shader("dissolve")
@dataclass(frozen=True)
class DissolveShader(Shader):
    seed: int = 0
    # Style given to dissolved cells; None keeps the cell's own style
    style: Optional[Style] = None
    symbol: str = " "

    def threshold(self, position: Position) -> float:
        return cell_noise(self.seed, position.x, position.y)

    def apply(self, alpha: float, position: Position, cell: Cell, context: ShaderContext) -> Cell:
        if alpha <= self.threshold(position):
            return cell
        style = cell.style if self.style is None else self.style
        return Cell(self.symbol, style)
