"""Channel band construction around regression predictions"""

from collections.abc import Sequence

from ..models.channel import ChannelBands

DEFAULT_MULTIPLIER = 2.0


def calculate_channel_bands(predictions: Sequence[float],
                            standard_deviation: float,
                            multiplier: float = DEFAULT_MULTIPLIER) -> ChannelBands:
    """
    Offset every prediction by multiplier * standard_deviation

    Upper Band = prediction + multiplier * std_dev
    Lower Band = prediction - multiplier * std_dev

    The default multiplier of 2 approximates a 95% band if residuals are
    roughly normal. NaN or infinite inputs propagate unchanged.

    Args:
        predictions: Regression predictions
        standard_deviation: Residual standard deviation
        multiplier: Standard deviation multiplier

    Returns:
        ChannelBands with one upper and lower value per prediction
    """
    offset = multiplier * standard_deviation

    return ChannelBands(
        upper_band=tuple(p + offset for p in predictions),
        lower_band=tuple(p - offset for p in predictions)
    )
