"""
Tests for Duration and EffectTimer.
"""

import pytest

from termfx.Effects.duration import Duration, ZERO, as_duration
from termfx.Effects.effect_timer import EffectTimer
from termfx.Effects.fx_errors import EffectConfigurationError, InvalidDurationError
from termfx.Effects.interpolation import Interpolation


class TestDuration:
    """Tests for the millisecond Duration value type."""

    def test_constructors_agree(self):
        assert Duration.from_millis(1500) == Duration.from_secs_float(1.5)
        assert Duration.from_secs(2) == Duration(2000)
        assert Duration.ZERO is ZERO
        assert ZERO.is_zero()

    def test_negative_duration_is_rejected(self):
        with pytest.raises(InvalidDurationError):
            Duration(-1)
        # Also a ValueError for callers that don't know the engine's types
        with pytest.raises(ValueError):
            Duration.from_millis(-5)

    def test_arithmetic(self):
        assert Duration(100) + Duration(50) == Duration(150)
        assert Duration(100) - Duration(40) == Duration(60)
        assert Duration(100) * 3 == Duration(300)
        assert 2 * Duration(100) == Duration(200)
        assert Duration(100) < Duration(101)

    def test_subtraction_below_zero(self):
        assert Duration(10).checked_sub(Duration(20)) is None
        assert Duration(10).saturating_sub(Duration(20)) == ZERO
        with pytest.raises(InvalidDurationError):
            Duration(10) - Duration(20)

    def test_as_duration_accepts_numbers(self):
        assert as_duration(250) == Duration(250)
        d = Duration(5)
        assert as_duration(d) is d

    def test_str(self):
        assert str(Duration(16)) == "16ms"
        assert Duration(1500).as_secs_float() == pytest.approx(1.5)


class TestEffectTimer:
    """Tests for timer progress, completion and derived timers."""

    def test_progress_through_four_quarter_ticks(self):
        timer = EffectTimer.from_ms(1000, Interpolation.LINEAR)
        expected = [0.25, 0.5, 0.75, 1.0]
        for i, value in enumerate(expected):
            timer.advance(250)
            assert timer.progress() == pytest.approx(value)
            assert timer.done() == (i == 3)

    def test_done_stays_true(self):
        timer = EffectTimer(100)
        timer.advance(100)
        assert timer.done()
        timer.advance(1000)
        assert timer.done()
        assert timer.progress() == pytest.approx(1.0)

    def test_advance_returns_overflow(self):
        timer = EffectTimer(100)
        assert timer.advance(60) is None
        assert timer.advance(60) == Duration(20)
        # Already finished: the whole delta overflows
        assert timer.advance(10) == Duration(10)

    def test_advance_exactly_to_end_overflows_zero(self):
        timer = EffectTimer(100)
        assert timer.advance(100) == ZERO

    def test_zero_duration_timer(self):
        timer = EffectTimer(0)
        assert timer.ratio() == 0.0
        assert not timer.done()
        timer.advance(1)
        assert timer.ratio() == 1.0
        assert timer.done()

    def test_mirrored_and_reversed_are_distinct(self):
        timer = EffectTimer(1000, Interpolation.QUAD_IN)
        timer.advance(250)
        # Mirroring flips time before easing, reversing flips the eased value
        assert timer.mirrored().progress() == pytest.approx(0.75 ** 2)
        assert timer.reversed().progress() == pytest.approx(1.0 - 0.25 ** 2)

    def test_double_mirror_and_double_reverse_round_trip(self):
        timer = EffectTimer(400, Interpolation.CUBIC_OUT)
        timer.advance(130)
        assert timer.mirrored().mirrored() == timer
        assert timer.reversed().reversed() == timer
        assert timer.mirrored().mirrored().progress() == pytest.approx(timer.progress())

    def test_derived_timers_do_not_share_state(self):
        timer = EffectTimer(100)
        derived = timer.reversed()
        derived.advance(50)
        assert timer.elapsed == ZERO
        copy = timer.copy()
        copy.advance(10)
        assert timer.elapsed == ZERO

    def test_remaining_and_reset(self):
        timer = EffectTimer(100)
        timer.advance(30)
        assert timer.remaining() == Duration(70)
        assert timer.started()
        timer.reset()
        assert not timer.started()
        assert timer.remaining() == Duration(100)

    def test_interpolation_by_name(self):
        timer = EffectTimer(100, "SineInOut")
        assert timer.interpolation is Interpolation.SINE_IN_OUT
        assert timer.with_interpolation("quad_out").interpolation is Interpolation.QUAD_OUT

    def test_overshooting_easing_still_finishes_on_schedule(self):
        timer = EffectTimer(100, Interpolation.BACK_OUT)
        timer.advance(50)
        assert timer.progress() > 1.0
        assert not timer.done()
        timer.advance(50)
        assert timer.done()

    def test_negative_total_rejected(self):
        with pytest.raises(EffectConfigurationError):
            EffectTimer(-10)
