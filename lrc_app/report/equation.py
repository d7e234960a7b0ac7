"""Display formatting for the fitted regression line"""


def format_regression_equation(slope: float, intercept: float) -> str:
    """
    Format y = mx + b with an explicit sign on both terms

    Slope is shown to 4 decimals, intercept to 2.

    >>> format_regression_equation(1.0, 1.0)
    'y = +1.0000x +1.00'
    >>> format_regression_equation(-0.5, -3.25)
    'y = -0.5000x -3.25'
    """
    return f"y = {slope:+.4f}x {intercept:+.2f}"
