"""Tests for BUY/SELL/HOLD classification"""

import pytest

from lrc_app.channel.signal import (
    calculate_normalized_position,
    classify_signal,
    is_collapsed_channel,
)
from lrc_app.models.channel import Signal

# Predicted 100, band 90-110: one half-width is 10 price units
PREDICTED = 100.0
UPPER = 110.0
LOWER = 90.0


class TestNormalizedPosition:
    """Test position in half-channel widths"""

    def test_on_midline(self):
        assert calculate_normalized_position(100.0, PREDICTED, UPPER, LOWER) == 0.0

    def test_on_bands(self):
        assert calculate_normalized_position(110.0, PREDICTED, UPPER, LOWER) == pytest.approx(1.0)
        assert calculate_normalized_position(90.0, PREDICTED, UPPER, LOWER) == pytest.approx(-1.0)

    def test_zero_width(self):
        assert calculate_normalized_position(12.0, 10.0, 10.0, 10.0) == 0.0

    def test_round_off_width(self):
        """A width left over from float round-off reads as zero"""
        assert calculate_normalized_position(0.3, 0.3 - 5e-17, 0.3 + 1e-16, 0.3) == 0.0


class TestCollapsedChannel:
    """Test zero-width detection"""

    def test_exact_zero(self):
        assert is_collapsed_channel(10.0, 10.0)

    def test_round_off_width_near_zero_price(self):
        assert is_collapsed_channel(0.30000000000000004, 0.29999999999999993)

    def test_round_off_width_scales_with_price(self):
        assert is_collapsed_channel(100000.0 + 1e-8, 100000.0 - 1e-8)

    def test_real_width(self):
        assert not is_collapsed_channel(110.0, 90.0)
        assert not is_collapsed_channel(0.3001, 0.2999)


class TestClassifySignal:
    """Test thresholds and strengths"""

    def test_hold_on_midline(self):
        decision = classify_signal(100.0, PREDICTED, UPPER, LOWER)

        assert decision.signal is Signal.HOLD
        assert decision.strength == pytest.approx(100.0)

    def test_hold_strength_inverse_of_distance(self):
        """HOLD strength shrinks as the price leaves the midline"""
        decision = classify_signal(105.0, PREDICTED, UPPER, LOWER)

        assert decision.signal is Signal.HOLD
        assert decision.normalized_position == pytest.approx(0.5)
        assert decision.strength == pytest.approx(50.0)

    def test_sell_at_threshold(self):
        decision = classify_signal(107.0, PREDICTED, UPPER, LOWER)

        assert decision.signal is Signal.SELL
        assert decision.strength == pytest.approx(70.0)

    def test_buy_at_threshold(self):
        decision = classify_signal(93.0, PREDICTED, UPPER, LOWER)

        assert decision.signal is Signal.BUY
        assert decision.normalized_position == -0.7
        assert decision.strength == pytest.approx(70.0)

    def test_just_inside_buy_threshold_holds(self):
        decision = classify_signal(93.0001, PREDICTED, UPPER, LOWER)

        assert decision.signal is Signal.HOLD

    def test_strength_capped_outside_channel(self):
        sell = classify_signal(125.0, PREDICTED, UPPER, LOWER)
        buy = classify_signal(70.0, PREDICTED, UPPER, LOWER)

        assert sell.signal is Signal.SELL
        assert sell.strength == 100.0
        assert buy.signal is Signal.BUY
        assert buy.strength == 100.0

    def test_hold_to_buy_monotonic(self):
        """Falling price moves HOLD -> BUY once, at -0.7, never back"""
        signals = []
        price = 100.0
        while price >= 85.0:
            signals.append(classify_signal(price, PREDICTED, UPPER, LOWER).signal)
            price -= 0.25

        first_buy = signals.index(Signal.BUY)
        assert all(s is Signal.HOLD for s in signals[:first_buy])
        assert all(s is Signal.BUY for s in signals[first_buy:])
        # 100 - 0.25 * 28 = 93.0 is the first price with position -0.7
        assert first_buy == 28

    def test_zero_width_channel_holds(self):
        decision = classify_signal(10.0, 10.0, 10.0, 10.0)

        assert decision.signal is Signal.HOLD
        assert decision.strength == 100.0
        assert decision.normalized_position == 0.0

    def test_round_off_width_channel_holds(self):
        """Residual noise of 1e-17 does not turn into a full-strength SELL"""
        decision = classify_signal(0.30000000000000004, 0.3,
                                   0.30000000000000004, 0.29999999999999993)

        assert decision.signal is Signal.HOLD
        assert decision.strength == 100.0
        assert decision.normalized_position == 0.0

    def test_custom_thresholds(self):
        decision = classify_signal(103.0, PREDICTED, UPPER, LOWER,
                                   buy_threshold=-0.2, sell_threshold=0.2)

        assert decision.signal is Signal.SELL
        assert decision.strength == pytest.approx(30.0)

    def test_strength_range(self):
        for price in (60.0, 92.0, 99.0, 100.0, 104.0, 108.0, 140.0):
            decision = classify_signal(price, PREDICTED, UPPER, LOWER)
            assert 0.0 <= decision.strength <= 100.0
