# effect_canvas.py
# Textual widget that renders static content through the termfx effects engine

import time
from typing import Optional, Union

from textual.message import Message
from textual.strip import Strip
from textual.timer import Timer
from textual.widget import Widget
from rich.segment import Segment
from rich.style import Style

from loguru import logger

from ..config import get_fx_setting
from ..Effects.base_effect import BaseEffect
from ..Effects.effect_manager import EffectManager
from ..Utils.cell_buffer import Cell, CellBuffer
from ..Utils.geometry import Rect


class EffectCanvas(Widget):
    """
    Shows static content with effects applied on top.

    Every frame the base content is redrawn into a frame buffer sized to the
    widget, the active effects are processed with the real time elapsed since
    the previous frame, and the result is rendered line by line. The frame
    timer only runs while effects are active.
    """

    DEFAULT_CSS = """
    EffectCanvas {
        width: 1fr;
        height: 1fr;
    }
    """

    class EffectsFinished(Message):
        """Posted when the last active effect finishes."""

        def __init__(self, canvas: "EffectCanvas") -> None:
            self.canvas = canvas
            super().__init__()

    def __init__(
        self,
        content: Union[str, CellBuffer] = "",
        *,
        content_style: Optional[Style] = None,
        fps: Optional[int] = None,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.fps = fps or get_fx_setting("canvas", "fps", 30, int)
        self.manager = EffectManager()
        self._content_style = content_style
        self._base = self._to_buffer(content)
        self._frame: Optional[CellBuffer] = None
        self._frame_timer: Optional[Timer] = None
        self._last_tick: Optional[float] = None

    def _to_buffer(self, content: Union[str, CellBuffer]) -> CellBuffer:
        if isinstance(content, CellBuffer):
            return content.copy()
        return CellBuffer.from_lines(content.splitlines(), self._content_style)

    # --- Public API -------------------------------------------------------------------------------------------------

    def set_content(self, content: Union[str, CellBuffer]) -> None:
        """Replace the base content; running effects continue over the new content."""
        self._base = self._to_buffer(content)
        self._redraw()
        self.refresh()

    def add_effect(self, effect: BaseEffect, area: Optional[Rect] = None) -> None:
        """Start an effect, optionally scoped to ``area`` (widget-relative cells)."""
        if area is not None:
            effect = effect.with_area(area)
        self.manager.add_effect(effect)
        self._ensure_running()

    def clear_effects(self) -> None:
        self.manager.clear()
        self._stop()
        self._redraw()
        self.refresh()

    @property
    def effect_count(self) -> int:
        return self.manager.size()

    @property
    def is_running(self) -> bool:
        return self.manager.is_running()

    @property
    def frame(self) -> Optional[CellBuffer]:
        """The most recently rendered frame (None before the first layout)."""
        return self._frame

    # --- Frame loop -------------------------------------------------------------------------------------------------

    def on_mount(self) -> None:
        logger.debug(f"EffectCanvas mounted: fps={self.fps}, effects={self.effect_count}")
        self._redraw()
        if self.manager.is_running():
            self._ensure_running()

    def on_resize(self) -> None:
        self._redraw()

    def on_unmount(self) -> None:
        self._stop()

    def _ensure_running(self) -> None:
        if self._frame_timer is not None or not self.is_mounted:
            return
        self._last_tick = time.monotonic()
        self._frame_timer = self.set_interval(1 / self.fps, self._tick)
        logger.debug(f"EffectCanvas frame timer started at {self.fps}fps")

    def _stop(self) -> None:
        if self._frame_timer is not None:
            self._frame_timer.stop()
            self._frame_timer = None
        self._last_tick = None

    def _redraw(self) -> CellBuffer:
        """Paint the base content into a fresh frame sized to the widget."""
        width, height = self.size.width, self.size.height
        frame = CellBuffer(width, height, fill=self._base_fill())
        frame.blit(self._base)
        self._frame = frame
        return frame

    def _base_fill(self) -> Cell:
        return Cell(" ", self._content_style or Style.null())

    def _tick(self) -> None:
        now = time.monotonic()
        last = self._last_tick if self._last_tick is not None else now
        self._last_tick = now
        self.advance((now - last) * 1000.0)

    def advance(self, delta_ms: float) -> None:
        """Render one frame, advancing effects by ``delta_ms``."""
        frame = self._redraw()
        if self.manager.is_running():
            self.manager.process_effects(delta_ms, frame, frame.area)
            if not self.manager.is_running():
                logger.debug("EffectCanvas: all effects finished")
                self._stop()
                self.post_message(self.EffectsFinished(self))
        self.refresh()

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        frame = self._frame
        if frame is None or y >= frame.area.height or frame.area.width == 0:
            return Strip([Segment(" " * width)], width)
        return Strip(frame.row_segments(y), frame.area.width)
