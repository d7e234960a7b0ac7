"""Signal classification from a price's position inside the channel"""

import math

from ..models.channel import Signal, SignalDecision

BUY_THRESHOLD = -0.7
SELL_THRESHOLD = 0.7

# Relative to the midline price
WIDTH_TOLERANCE = 1e-9


def is_collapsed_channel(upper_band_value: float, lower_band_value: float) -> bool:
    """
    True when the channel has no usable width

    Widths within WIDTH_TOLERANCE times the midline price count as zero.
    """
    midline = (upper_band_value + lower_band_value) / 2
    return math.isclose(
        upper_band_value - lower_band_value, 0.0,
        abs_tol=WIDTH_TOLERANCE * max(1.0, abs(midline))
    )


def calculate_normalized_position(current_price: float, predicted_price: float,
                                  upper_band_value: float, lower_band_value: float) -> float:
    """
    Signed distance from the midline in half-channel widths

    -1 sits on the lower band, 0 on the regression line, +1 on the upper band.
    A collapsed channel reports 0.
    """
    if is_collapsed_channel(upper_band_value, lower_band_value):
        return 0.0

    channel_width = upper_band_value - lower_band_value
    return (current_price - predicted_price) / (channel_width / 2)


def classify_signal(current_price: float, predicted_price: float,
                    upper_band_value: float, lower_band_value: float,
                    buy_threshold: float = BUY_THRESHOLD,
                    sell_threshold: float = SELL_THRESHOLD) -> SignalDecision:
    """
    Map the latest price to BUY, SELL or HOLD

    BUY when the normalized position is at or below buy_threshold (near or
    under the lower band), SELL at or above sell_threshold, HOLD otherwise.

    BUY/SELL strength grows with distance from the midline; HOLD strength is
    the confidence of staying in range and shrinks with the same distance.
    Both are capped to 0-100.

    A collapsed channel always yields HOLD with strength 100.

    Args:
        current_price: Latest observed price
        predicted_price: Regression prediction at the latest index
        upper_band_value: Upper band at the latest index
        lower_band_value: Lower band at the latest index
        buy_threshold: Position at or below which to emit BUY
        sell_threshold: Position at or above which to emit SELL

    Returns:
        SignalDecision with signal, strength and normalized position
    """
    if is_collapsed_channel(upper_band_value, lower_band_value):
        return SignalDecision(signal=Signal.HOLD, strength=100.0, normalized_position=0.0)

    normalized_position = calculate_normalized_position(
        current_price, predicted_price, upper_band_value, lower_band_value
    )

    strength = min(100.0, abs(normalized_position) * 100)

    if normalized_position <= buy_threshold:
        signal = Signal.BUY
    elif normalized_position >= sell_threshold:
        signal = Signal.SELL
    else:
        signal = Signal.HOLD
        strength = 100.0 - strength

    return SignalDecision(
        signal=signal,
        strength=strength,
        normalized_position=normalized_position
    )
