"""
Tests for the fx factory functions.
"""

import pytest
from rich.color import Color
from rich.style import Style

from termfx.Effects import fx
from termfx.Effects.color_space import ColorSpace
from termfx.Effects.effect_manager import EffectManager
from termfx.Effects.effect_timer import EffectTimer
from termfx.Effects.interpolation import Interpolation
from termfx.Effects.motion import ExpandDirection, Motion
from termfx.Effects.Shaders import DissolveShader, ExpandShader, FadeShader, SlideShader, SweepShader
from termfx.Utils.cell_buffer import Cell, CellBuffer


def rgb(color):
    return tuple(color.get_truecolor())


BLACK = Color.from_rgb(0, 0, 0)
WHITE = Color.from_rgb(255, 255, 255)
RED = Color.from_rgb(255, 0, 0)
BLUE = Color.from_rgb(0, 0, 255)


def white_row(width=10):
    return CellBuffer(width, 1, fill=Cell("x", Style(color=WHITE, bgcolor=BLUE)))


def text_grid():
    return CellBuffer.from_lines(["abcdefghij"] * 4, Style(color=WHITE))


class TestTimerArguments:
    """Factories accept a timer or a duration plus easing."""

    def test_duration_and_easing(self):
        effect = fx.fade_to_fg(RED, 500, Interpolation.QUAD_OUT)
        assert effect.timer.total.as_millis() == 500
        assert effect.timer.interpolation is Interpolation.QUAD_OUT

    def test_default_easing_comes_from_config(self):
        assert fx.paint_fg(RED, 100).timer.interpolation is Interpolation.LINEAR

    def test_timer_is_copied(self):
        timer = EffectTimer(200, Interpolation.SINE_IN)
        effect = fx.dissolve(timer, seed=1)
        effect.process(100, text_grid())
        assert timer.elapsed.is_zero()

    def test_factories_pick_the_right_shader(self):
        assert isinstance(fx.fade_to(BLACK, WHITE, 10).shader, FadeShader)
        assert isinstance(fx.dissolve(10).shader, DissolveShader)
        assert isinstance(fx.sweep_in(Motion.LEFT_TO_RIGHT, 2, 0, BLACK, 10).shader, SweepShader)
        assert isinstance(fx.slide_out(Motion.UP_TO_DOWN, 2, 0, BLACK, 10).shader, SlideShader)
        assert isinstance(fx.expand(ExpandDirection.VERTICAL, Style(), 10).shader, ExpandShader)


class TestFade:

    def test_fade_from_runs_backward(self):
        effect = fx.fade_from(BLACK, WHITE, 100)
        assert effect.timer.is_reversed
        buffer = white_row(1)
        effect.process(0, buffer)
        # Starts at the "to" color
        assert rgb(buffer.get(0, 0).fg) == (255, 255, 255)
        effect.process(100, buffer)
        assert rgb(buffer.get(0, 0).fg) == (0, 0, 0)

    def test_fade_to_bg(self):
        buffer = white_row(1)
        fx.fade_to_bg(RED, 100).process(100, buffer)
        assert buffer.get(0, 0).bg == RED
        assert buffer.get(0, 0).fg == WHITE

    def test_fade_from_fg_starts_at_color_and_ends_black(self):
        effect = fx.fade_from_fg(RED, 100)
        start = white_row(1)
        effect.process(0, start)
        assert start.get(0, 0).fg == RED
        end = white_row(1)
        effect.process(100, end)
        assert end.get(0, 0).fg == BLACK

    def test_fade_from_bg(self):
        buffer = white_row(1)
        fx.fade_from_bg(RED, 100).process(0, buffer)
        assert buffer.get(0, 0).bg == RED

    def test_explicit_start_color(self):
        buffer = white_row(1)
        fx.fade_to_fg(RED, 100, from_color=BLUE).with_color_space(ColorSpace.RGB).process(50, buffer)
        assert rgb(buffer.get(0, 0).fg) == (128, 0, 128)

    def test_fade_stays_linear_over_an_unredrawn_buffer(self):
        """Each tick blends between the fixed endpoints, never from its own previous output."""
        buffer = CellBuffer(1, 1, fill=Cell("x", Style(color=BLACK)))
        manager = EffectManager()
        manager.add_effect(fx.fade_to_fg(WHITE, 1000, Interpolation.LINEAR).with_color_space(ColorSpace.RGB))
        reds = []
        for _ in range(4):
            manager.process_effects(250, buffer)
            reds.append(rgb(buffer.get(0, 0).fg)[0])
        assert reds == [64, 128, 191, 255]


class TestDissolveAndCoalesce:

    def test_dissolve_completes(self):
        buffer = text_grid()
        fx.dissolve(100, seed=5).process(100, buffer)
        assert buffer.symbols() == [" " * 10] * 4

    def test_dissolve_is_deterministic(self):
        first, second = text_grid(), text_grid()
        a = fx.dissolve(400, seed=11)
        b = fx.dissolve(400, seed=11)
        for delta in (50, 80, 30):
            a.process(delta, first)
            b.process(delta, second)
        assert first == second
        # Partially dissolved at this point
        joined = "".join(first.symbols())
        assert " " in joined and joined.strip()

    def test_dissolve_to_style(self):
        buffer = text_grid()
        fx.dissolve_to(Style(bgcolor=RED), 10, seed=1).process(10, buffer)
        assert all(buffer.get(x, y).bg == RED for x, y in buffer.area.positions())

    def test_coalesce_starts_dissolved_and_ends_intact(self):
        effect = fx.coalesce(100, seed=5)
        assert effect.timer.is_mirrored
        start = text_grid()
        effect.process(0, start)
        assert start.symbols() == [" " * 10] * 4
        end = text_grid()
        effect.process(100, end)
        assert end == text_grid()

    def test_coalesce_from_style(self):
        buffer = text_grid()
        fx.coalesce_from(Style(bgcolor=BLUE), 100, seed=2).process(0, buffer)
        assert buffer.get(0, 0) == Cell(" ", Style(bgcolor=BLUE))


class TestSweep:

    def test_sweep_in_band_at_half_progress(self):
        buffer = white_row()
        effect = fx.sweep_in(Motion.LEFT_TO_RIGHT, 2, 0, BLACK, 1000, Interpolation.LINEAR)
        effect.process(500, buffer)
        fgs = [rgb(buffer.get(x, 0).fg) for x in range(10)]
        assert fgs[:5] == [(255, 255, 255)] * 5
        assert fgs[5] == (128, 128, 128)
        assert fgs[6:] == [(0, 0, 0)] * 4

    def test_right_to_left_uses_mirrored_timer(self):
        effect = fx.sweep_in(Motion.RIGHT_TO_LEFT, 2, 0, BLACK, 1000)
        assert effect.timer.is_mirrored
        buffer = white_row()
        effect.process(500, buffer)
        fgs = [rgb(buffer.get(x, 0).fg) for x in range(10)]
        # Revealed from the right
        assert fgs[-1] == (255, 255, 255)
        assert fgs[0] == (0, 0, 0)

    def test_sweep_out_hides_everything_at_the_end(self):
        effect = fx.sweep_out(Motion.LEFT_TO_RIGHT, 2, 0, BLACK, 100)
        assert effect.timer.is_reversed
        untouched = white_row()
        effect.copy().process(0, untouched)
        assert untouched == white_row()
        buffer = white_row()
        effect.process(100, buffer)
        assert all(buffer.get(x, 0).fg == BLACK for x in range(10))

    def test_sweep_out_left_to_right_fades_the_left_first(self):
        buffer = white_row()
        fx.sweep_out(Motion.LEFT_TO_RIGHT, 0, 0, BLACK, 1000).process(500, buffer)
        assert buffer.get(0, 0).fg == BLACK
        assert buffer.get(9, 0).fg == WHITE


class TestSlide:

    def test_slide_out_covers_from_the_left(self):
        buffer = white_row()
        fx.slide_out(Motion.LEFT_TO_RIGHT, 0, 0, RED, 1000).process(500, buffer)
        assert buffer.get(0, 0) == Cell(" ", Style(bgcolor=RED))
        assert buffer.get(9, 0).symbol == "x"

    def test_slide_in_uncovers_from_the_left(self):
        effect = fx.slide_in(Motion.LEFT_TO_RIGHT, 0, 0, RED, 1000)
        start = white_row()
        effect.copy().process(0, start)
        assert all(start.get(x, 0) == Cell(" ", Style(bgcolor=RED)) for x in range(10))
        half = white_row()
        effect.process(500, half)
        assert half.get(0, 0).symbol == "x"
        assert half.get(9, 0) == Cell(" ", Style(bgcolor=RED))

    def test_slide_in_finishes_uncovered(self):
        buffer = white_row()
        fx.slide_in(Motion.DOWN_TO_UP, 1, 2, RED, 100, seed=3).process(100, buffer)
        assert buffer == white_row()


class TestPaintAndExpand:

    def test_paint_both_channels(self):
        buffer = white_row(2)
        fx.paint(RED, BLACK, 100).process(1, buffer)
        assert buffer.get(1, 0).fg == RED
        assert buffer.get(1, 0).bg == BLACK

    def test_paint_bg_threshold(self):
        effect = fx.paint_bg(RED, 100, threshold=0.5)
        buffer = white_row(1)
        effect.process(40, buffer)
        assert buffer.get(0, 0).bg == BLUE
        effect.process(10, buffer)
        assert buffer.get(0, 0).bg == RED

    def test_gradual_paint_stays_linear_over_an_unredrawn_buffer(self):
        buffer = CellBuffer(1, 1, fill=Cell("x", Style(color=BLACK)))
        manager = EffectManager()
        effect = fx.paint_fg(WHITE, 1000, Interpolation.LINEAR, gradual=True).with_color_space(ColorSpace.RGB)
        manager.add_effect(effect)
        reds = []
        for _ in range(4):
            manager.process_effects(250, buffer)
            reds.append(rgb(buffer.get(0, 0).fg)[0])
        assert reds == [64, 128, 191, 255]

    def test_expand_vertical(self):
        fill = Style(bgcolor=RED)
        buffer = CellBuffer(1, 10, fill=Cell("x", Style(color=WHITE)))
        fx.expand(ExpandDirection.VERTICAL, fill, 100).process(50, buffer)
        assert buffer.get(0, 0) == Cell(" ", fill)
        assert buffer.get(0, 5).symbol == "x"
        assert buffer.get(0, 9) == Cell(" ", fill)


class TestComposition:

    def test_sequence_of_factories(self):
        intro = fx.sequence(
            fx.fade_from_fg(BLACK, 100, Interpolation.QUAD_OUT),
            fx.dissolve(100, seed=4),
        )
        buffer = text_grid()
        for _ in range(4):
            intro.process(50, buffer)
        assert intro.done()
        assert intro.duration().as_millis() == 200
