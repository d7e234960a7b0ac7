"""Tests for channel value objects."""

import dataclasses

import pytest

from lrc_app.models import ChannelBands, RegressionFit, Signal, SignalDecision


class TestSignal:

    def test_members(self):
        assert [s.value for s in Signal] == ["BUY", "SELL", "HOLD"]

    def test_string_compatible(self):
        assert Signal.BUY == "BUY"
        assert Signal("HOLD") is Signal.HOLD

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            Signal("STRONG_BUY")


class TestValueObjects:

    def test_regression_fit_frozen(self):
        fit = RegressionFit(slope=1.0, intercept=0.0, r_squared=1.0, predictions=(0.0, 1.0))

        with pytest.raises(dataclasses.FrozenInstanceError):
            fit.slope = 2.0  # type: ignore[misc]

    def test_regression_fit_equation(self):
        fit = RegressionFit(slope=-0.25, intercept=12.5, r_squared=0.5, predictions=(12.5,))
        assert fit.equation == "y = -0.2500x +12.50"

    def test_bands_and_decision_equality(self):
        assert ChannelBands((2.0,), (0.0,)) == ChannelBands((2.0,), (0.0,))
        assert SignalDecision(Signal.HOLD, 100.0, 0.0) == SignalDecision(Signal.HOLD, 100.0, 0.0)
