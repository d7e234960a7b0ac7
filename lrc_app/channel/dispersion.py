"""Residual dispersion around a regression line"""

import math
from collections.abc import Sequence

from ..errors import InvalidInputError


def calculate_standard_deviation(actual_values: Sequence[float],
                                 predicted_values: Sequence[float]) -> float:
    """
    Population standard deviation of residuals

    std_dev = sqrt(Σ(actual - predicted)² / n)

    Args:
        actual_values: Observed prices
        predicted_values: Regression predictions, same length

    Returns:
        Non-negative standard deviation

    Raises:
        InvalidInputError: If the sequences are empty or differ in length
    """
    n = len(actual_values)

    if n == 0 or n != len(predicted_values):
        raise InvalidInputError(
            "Invalid input: arrays must have same non-zero length",
            expected_length=n,
            actual_length=len(predicted_values)
        )

    sum_squared_differences = 0.0
    for actual, predicted in zip(actual_values, predicted_values):
        difference = actual - predicted
        sum_squared_differences += difference * difference

    return math.sqrt(sum_squared_differences / n)
