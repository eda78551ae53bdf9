"""
Property-based tests for timers, composites and seeded effects using hypothesis.
"""

import pytest
from hypothesis import given, settings, strategies as st
from rich.style import Style

from termfx.Effects import fx
from termfx.Effects.duration import Duration
from termfx.Effects.effect_timer import EffectTimer
from termfx.Effects.interpolation import Interpolation
from termfx.Utils.cell_buffer import CellBuffer


interpolations = st.sampled_from(list(Interpolation))
durations = st.integers(min_value=1, max_value=5000)
deltas = st.lists(st.integers(min_value=0, max_value=400), min_size=1, max_size=30)


def grid():
    return CellBuffer.from_lines(["abcdef", "ghijkl", "mnopqr"], Style())


class TestTimerProperties:
    """Property-based tests for EffectTimer."""

    @given(durations, st.lists(st.integers(min_value=1, max_value=500), min_size=1, max_size=40))
    def test_finishes_exactly_when_deltas_reach_total(self, total, steps):
        """Property: the timer is done once, and only once, the summed deltas reach the total."""
        timer = EffectTimer(total)
        elapsed = 0
        for step in steps:
            overflow = timer.advance(step)
            elapsed += step
            assert timer.done() == (elapsed >= total)
            if elapsed < total:
                assert overflow is None
            else:
                assert overflow is not None
                assert overflow.as_millis() == min(step, elapsed - total)

    @given(durations, st.integers(min_value=0, max_value=5000), interpolations)
    def test_double_reverse_is_identity(self, total, elapsed, interpolation):
        timer = EffectTimer(total, interpolation, elapsed=elapsed)
        assert timer.reversed().reversed().progress() == timer.progress()
        assert timer.mirrored().mirrored().progress() == timer.progress()

    @given(durations, st.integers(min_value=0, max_value=5000))
    def test_mirrored_and_reversed_agree_for_linear(self, total, elapsed):
        """Property: with linear easing flipping time and flipping output are the same curve."""
        timer = EffectTimer(total, Interpolation.LINEAR, elapsed=elapsed)
        assert timer.mirrored().progress() == pytest.approx(timer.reversed().progress())

    @given(durations, st.integers(min_value=0, max_value=5000), interpolations)
    def test_flags_do_not_change_completion(self, total, elapsed, interpolation):
        timer = EffectTimer(total, interpolation, elapsed=elapsed)
        assert timer.mirrored().done() == timer.done()
        assert timer.reversed().done() == timer.done()


class TestCompositeProperties:
    """Property-based tests for composite durations."""

    @given(st.lists(durations, min_size=1, max_size=6))
    def test_sequence_and_parallel_durations(self, totals):
        children = [fx.dissolve(total, seed=1) for total in totals]
        assert fx.sequence(*children).duration() == Duration(sum(totals))
        assert fx.parallel(*children).duration() == Duration(max(totals))

    @settings(max_examples=50)
    @given(st.lists(durations, min_size=1, max_size=4), st.integers(min_value=1, max_value=250))
    def test_parallel_finishes_with_its_longest_child(self, totals, step):
        effect = fx.parallel(*[fx.dissolve(total, seed=2) for total in totals])
        buffer = grid()
        elapsed = 0
        while not effect.done():
            effect.process(step, buffer)
            elapsed += step
        assert elapsed >= max(totals)
        assert elapsed - step < max(totals)


class TestSeededEffects:
    """Seeded effects are reproducible for any tick sequence."""

    @settings(max_examples=50)
    @given(st.integers(min_value=0, max_value=2**32 - 1), deltas)
    def test_dissolve_is_reproducible(self, seed, ticks):
        first, second = grid(), grid()
        a = fx.dissolve(1000, seed=seed)
        b = fx.dissolve(1000, seed=seed)
        for delta in ticks:
            a.process(delta, first)
            b.process(delta, second)
        assert first == second

    @settings(max_examples=50)
    @given(st.integers(min_value=0, max_value=2**32 - 1))
    def test_dissolve_ends_blank(self, seed):
        buffer = grid()
        fx.dissolve(100, seed=seed).process(100, buffer)
        assert "".join(buffer.symbols()).strip() == ""
