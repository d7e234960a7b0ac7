"""Tests for least-squares regression"""

import pytest

from lrc_app.channel.regression import calculate_linear_regression, fit
from lrc_app.errors import InvalidInputError


class TestLinearRegression:
    """Test slope, intercept and prediction calculation"""

    def test_perfect_linear_fit(self, linear_prices):
        """Points on y = x + 1 are recovered exactly"""
        result = fit(range(5), linear_prices)

        assert result.slope == pytest.approx(1.0)
        assert result.intercept == pytest.approx(1.0)
        assert result.r_squared == pytest.approx(1.0)
        assert result.predictions == pytest.approx(linear_prices)

    def test_flat_series(self, flat_prices):
        """Constant y gives zero slope and R² defined as 0"""
        result = fit(range(5), flat_prices)

        assert result.slope == 0.0
        assert result.intercept == pytest.approx(10.0)
        assert result.r_squared == 0.0
        assert result.predictions == pytest.approx(flat_prices)

    @pytest.mark.parametrize("prices", [[100.3] * 30, [1.1] * 7, [0.1] * 3])
    def test_constant_inexact_float_series(self, prices):
        """Equal prices that floats cannot represent still give R² of exactly 0"""
        result = fit(range(len(prices)), prices)

        assert result.slope == 0.0
        assert result.intercept == prices[0]
        assert result.r_squared == 0.0
        assert result.predictions == tuple(prices)

    def test_hand_computed_fit(self, noisy_prices):
        """Σx=6, Σy=10, Σxy=19, Σx²=14 -> slope 0.8, intercept 1.3"""
        result = calculate_linear_regression([0, 1, 2, 3], noisy_prices)

        assert result.slope == pytest.approx(0.8)
        assert result.intercept == pytest.approx(1.3)
        # SSres = 1.8, SStot = 5.0
        assert result.r_squared == pytest.approx(0.64)
        assert result.predictions == pytest.approx([1.3, 2.1, 2.9, 3.7])

    def test_negative_slope(self):
        """Falling series has a negative slope"""
        result = fit([0, 1, 2, 3], [10.0, 8.0, 6.0, 4.0])

        assert result.slope == pytest.approx(-2.0)
        assert result.intercept == pytest.approx(10.0)
        assert result.r_squared == pytest.approx(1.0)

    def test_predictions_follow_line(self, spike_up_prices):
        """Every prediction equals slope * x + intercept"""
        result = fit(range(len(spike_up_prices)), spike_up_prices)

        assert len(result.predictions) == len(spike_up_prices)
        for i, predicted in enumerate(result.predictions):
            assert predicted == pytest.approx(result.slope * i + result.intercept)

    def test_r_squared_within_unit_interval(self, spike_up_prices, noisy_prices):
        """R² stays in [0, 1] for non-constant input"""
        for prices in (spike_up_prices, noisy_prices, [5.0, 1.0, 4.0, 2.0, 3.0]):
            result = fit(range(len(prices)), prices)
            assert 0.0 <= result.r_squared <= 1.0

    def test_non_index_x_values(self):
        """Any strictly increasing x works, not only 0..n-1"""
        result = fit([10, 20, 30], [1.0, 2.0, 3.0])

        assert result.slope == pytest.approx(0.1)
        assert result.intercept == pytest.approx(0.0, abs=1e-12)

    def test_single_point(self):
        """A single point fits a flat line through it"""
        result = fit([0], [42.0])

        assert result.slope == 0.0
        assert result.intercept == 42.0
        assert result.r_squared == 0.0
        assert result.predictions == (42.0,)

    def test_fit_is_deterministic(self, noisy_prices):
        """Identical input gives identical output"""
        assert fit(range(4), noisy_prices) == fit(range(4), noisy_prices)


class TestRegressionInputValidation:
    """Test InvalidInputError cases"""

    def test_length_mismatch(self):
        with pytest.raises(InvalidInputError) as exc_info:
            fit([1, 2], [1])

        assert exc_info.value.expected_length == 2
        assert exc_info.value.actual_length == 1

    def test_empty_input(self):
        with pytest.raises(InvalidInputError):
            fit([], [])

    def test_repeated_x_values(self):
        """Zero denominator is rejected rather than divided by"""
        with pytest.raises(InvalidInputError, match="strictly increasing"):
            fit([3, 3, 3], [1.0, 2.0, 3.0])
