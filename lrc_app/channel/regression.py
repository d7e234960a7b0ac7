"""Ordinary least-squares regression over an index x-axis"""

from collections.abc import Sequence

from ..errors import InvalidInputError
from ..models.channel import RegressionFit


def calculate_linear_regression(x_values: Sequence[float],
                                y_values: Sequence[float]) -> RegressionFit:
    """
    Fit y = slope * x + intercept using the closed-form least-squares sums

    slope = (n*Σxy - Σx*Σy) / (n*Σx² - (Σx)²)
    intercept = (Σy - slope*Σx) / n

    R² = 1 - SSres/SStot, defined as 0 when y has no variance.

    x must hold strictly increasing values (the analyzer passes 0..n-1).
    A single point fits a flat line through it.

    Args:
        x_values: Independent variable values
        y_values: Observed values, same length as x_values

    Returns:
        RegressionFit with slope, intercept, R² and per-point predictions

    Raises:
        InvalidInputError: If the sequences are empty, differ in length,
            or every x value is equal
    """
    n = len(x_values)

    if n == 0 or n != len(y_values):
        raise InvalidInputError(
            "Invalid input: arrays must have same non-zero length",
            expected_length=n,
            actual_length=len(y_values)
        )

    sum_x = 0.0
    sum_y = 0.0
    sum_xy = 0.0
    sum_x2 = 0.0

    for x, y in zip(x_values, y_values):
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_x2 += x * x

    denominator = n * sum_x2 - sum_x * sum_x

    if n > 1 and denominator == 0:
        raise InvalidInputError(
            "Invalid input: x values must be strictly increasing",
            expected_length=n,
            actual_length=n
        )

    # Constant y: exact flat fit
    if min(y_values) == max(y_values):
        return RegressionFit(
            slope=0.0,
            intercept=float(y_values[0]),
            r_squared=0.0,
            predictions=tuple(float(y) for y in y_values)
        )

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    predictions = tuple(slope * x + intercept for x in x_values)

    mean_y = sum_y / n
    ss_total = 0.0
    ss_residual = 0.0

    for y, predicted in zip(y_values, predictions):
        ss_total += (y - mean_y) ** 2
        ss_residual += (y - predicted) ** 2

    r_squared = 0.0 if ss_total == 0 else 1 - (ss_residual / ss_total)

    return RegressionFit(
        slope=slope,
        intercept=intercept,
        r_squared=r_squared,
        predictions=predictions
    )


def fit(x_values: Sequence[float], y_values: Sequence[float]) -> RegressionFit:
    """Shorthand for calculate_linear_regression"""
    return calculate_linear_regression(x_values, y_values)
