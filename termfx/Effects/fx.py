# fx.py
# Description: Factory functions building ready-to-run effects
#
"""
Effect factories.

This is the main entry point for application code. Every factory takes its
timing either as an ``EffectTimer`` or as a duration in milliseconds plus an
optional easing (the configured default easing is used when omitted).

Usage:
    from termfx.Effects import fx
    from termfx.Effects.interpolation import Interpolation

    intro = fx.sequence(
        fx.fade_from_fg(Color.parse("black"), 500, Interpolation.QUAD_OUT),
        fx.dissolve(800),
    )
    manager.add_effect(intro.with_filter(CellFilter.text()))

Directional "in" effects are built from the matching "out" effect running
the other way with a reversed timer; directions that run against the
sliding window's natural axis use a mirrored timer.
"""
#
# Imports
import random
from typing import Iterable, Optional, Union
#
# Third-Party Imports
from rich.color import Color
from rich.style import Style
#
# Local Imports
from .base_effect import BaseEffect
from .composite import ParallelEffect, SequentialEffect
from .duration import Duration
from .effect import Effect
from .effect_timer import EffectTimer
from .interpolation import Interpolation
from .motion import ExpandDirection, Motion
from .Shaders import (
    ColorRange,
    DissolveShader,
    ExpandShader,
    FadeShader,
    PaintShader,
    SlideShader,
    SweepShader,
)
#
#######################################################################################################################
#
# Functions:

TimerLike = Union[EffectTimer, Duration, int, float]

BLACK = Color.from_rgb(0, 0, 0)


def make_timer(timer: TimerLike, interpolation: Optional[Interpolation] = None) -> EffectTimer:
    """Accept an EffectTimer as-is, or build one from a duration and easing."""
    if isinstance(timer, EffectTimer):
        if interpolation is not None:
            return timer.with_interpolation(interpolation)
        return timer.copy()
    if interpolation is None:
        from ..config import get_default_interpolation
        interpolation = get_default_interpolation()
    return EffectTimer(timer, interpolation)


def _seed(seed: Optional[int]) -> int:
    return random.getrandbits(32) if seed is None else seed


def _effects_from(effects) -> list:
    # sequence(a, b) and sequence([a, b]) are both accepted
    if len(effects) == 1 and not isinstance(effects[0], BaseEffect):
        return list(effects[0])
    return list(effects)

#
# Fade
#######################################################################################################################


def fade_to(from_color: Optional[Color], to_color: Optional[Color], timer: TimerLike,
            interpolation: Optional[Interpolation] = None) -> Effect:
    """Fade the foreground from ``from_color`` to ``to_color``."""
    return Effect(FadeShader(fg=ColorRange(from_color, to_color)), make_timer(timer, interpolation))


def fade_from(from_color: Optional[Color], to_color: Optional[Color], timer: TimerLike,
              interpolation: Optional[Interpolation] = None) -> Effect:
    """The reverse of ``fade_to``: starts at ``to_color`` and ends at ``from_color``."""
    return Effect(FadeShader(fg=ColorRange(from_color, to_color)), make_timer(timer, interpolation).reversed())


def fade_to_fg(color: Color, timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
               from_color: Optional[Color] = BLACK) -> Effect:
    """Fade the foreground from ``from_color`` (black by default) to ``color``."""
    return fade_to(from_color, color, timer, interpolation)


def fade_from_fg(color: Color, timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
                 to_color: Optional[Color] = BLACK) -> Effect:
    """Start every foreground at ``color`` and fade to ``to_color`` (black by default)."""
    return fade_from(to_color, color, timer, interpolation)


def fade_to_bg(color: Color, timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
               from_color: Optional[Color] = BLACK) -> Effect:
    """Fade the background from ``from_color`` (black by default) to ``color``."""
    return Effect(FadeShader(bg=ColorRange(from_color, color)), make_timer(timer, interpolation))


def fade_from_bg(color: Color, timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
                 to_color: Optional[Color] = BLACK) -> Effect:
    """Start every background at ``color`` and fade to ``to_color`` (black by default)."""
    return Effect(FadeShader(bg=ColorRange(to_color, color)), make_timer(timer, interpolation).reversed())

#
# Dissolve / Coalesce
#######################################################################################################################


def dissolve(timer: TimerLike, interpolation: Optional[Interpolation] = None, *, seed: Optional[int] = None) -> Effect:
    """Blank out cells in a stable random order."""
    return Effect(DissolveShader(seed=_seed(seed)), make_timer(timer, interpolation))


def dissolve_to(style: Style, timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
                seed: Optional[int] = None) -> Effect:
    """Like ``dissolve`` but dissolved cells take ``style``."""
    return Effect(DissolveShader(seed=_seed(seed), style=style), make_timer(timer, interpolation))


def coalesce(timer: TimerLike, interpolation: Optional[Interpolation] = None, *, seed: Optional[int] = None) -> Effect:
    """Start fully dissolved and bring cells back in a stable random order."""
    return Effect(DissolveShader(seed=_seed(seed)), make_timer(timer, interpolation).mirrored())


def coalesce_from(style: Style, timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
                  seed: Optional[int] = None) -> Effect:
    """Like ``coalesce`` but not-yet-restored cells show ``style``."""
    return Effect(DissolveShader(seed=_seed(seed), style=style), make_timer(timer, interpolation).mirrored())

#
# Sweep / Slide
#######################################################################################################################


def sweep_in(direction: Motion, gradient_length: int, randomness: int, faded_color: Optional[Color],
             timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
             seed: Optional[int] = None) -> Effect:
    """Reveal cells from ``faded_color`` with a band travelling in ``direction``."""
    timer = make_timer(timer, interpolation)
    if direction.flips_timer():
        timer = timer.mirrored()
    shader = SweepShader(direction, gradient_length, randomness, faded_color, _seed(seed))
    return Effect(shader, timer)


def sweep_out(direction: Motion, gradient_length: int, randomness: int, faded_color: Optional[Color],
              timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
              seed: Optional[int] = None) -> Effect:
    """Fade cells to ``faded_color`` with a band travelling in ``direction``."""
    return sweep_in(direction.flipped(), gradient_length, randomness, faded_color,
                    make_timer(timer, interpolation).reversed(), seed=seed)


def slide_out(direction: Motion, gradient_length: int, randomness: int, color_behind: Optional[Color],
              timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
              seed: Optional[int] = None) -> Effect:
    """Cover cells with ``color_behind`` using a shutter moving in ``direction``."""
    timer = make_timer(timer, interpolation)
    if direction.flips_timer():
        timer = timer.mirrored()
    shader = SlideShader(direction, gradient_length, randomness, color_behind, _seed(seed))
    return Effect(shader, timer)


def slide_in(direction: Motion, gradient_length: int, randomness: int, color_behind: Optional[Color],
             timer: TimerLike, interpolation: Optional[Interpolation] = None, *,
             seed: Optional[int] = None) -> Effect:
    """Uncover cells hidden behind ``color_behind``, the shutter moving in ``direction``."""
    return slide_out(direction.flipped(), gradient_length, randomness, color_behind,
                     make_timer(timer, interpolation), seed=seed).reversed()

#
# Paint / Expand
#######################################################################################################################


def paint(fg: Optional[Color], bg: Optional[Color], timer: TimerLike,
          interpolation: Optional[Interpolation] = None, *, threshold: float = 0.0,
          gradual: bool = False, start_fg: Optional[Color] = None, start_bg: Optional[Color] = None) -> Effect:
    """
    Apply ``fg``/``bg`` to every selected cell.

    By default the colors are applied on the first tick and held for the
    duration; ``threshold`` delays the onset until the alpha reaches it and
    ``gradual=True`` blends toward the colors instead, starting from
    ``start_fg``/``start_bg`` (black when omitted).
    """
    shader = PaintShader(fg=fg, bg=bg, threshold=threshold, gradual=gradual,
                         start_fg=start_fg, start_bg=start_bg)
    return Effect(shader, make_timer(timer, interpolation))


def paint_fg(color: Color, timer: TimerLike, interpolation: Optional[Interpolation] = None, **kwargs) -> Effect:
    return paint(color, None, timer, interpolation, **kwargs)


def paint_bg(color: Color, timer: TimerLike, interpolation: Optional[Interpolation] = None, **kwargs) -> Effect:
    return paint(None, color, timer, interpolation, **kwargs)


def expand(direction: ExpandDirection, style: Style, timer: TimerLike,
           interpolation: Optional[Interpolation] = None) -> Effect:
    """Reveal content outward from the center of the area, starting from a flat ``style`` fill."""
    return Effect(ExpandShader(direction, style), make_timer(timer, interpolation))

#
# Composition
#######################################################################################################################


def sequence(*effects: Union[BaseEffect, Iterable[BaseEffect]]) -> SequentialEffect:
    """Run effects one after another. Accepts effects or a single iterable of effects."""
    return SequentialEffect(_effects_from(effects))


def parallel(*effects: Union[BaseEffect, Iterable[BaseEffect]]) -> ParallelEffect:
    """Run effects at the same time. Accepts effects or a single iterable of effects."""
    return ParallelEffect(_effects_from(effects))

#
# End of fx.py
#######################################################################################################################
