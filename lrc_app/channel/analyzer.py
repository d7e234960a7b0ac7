"""Regression channel analysis over a chronological price series"""

from collections.abc import Sequence
from typing import Any, Optional

import structlog

from ..config.defaults import DefaultConfig, get_default_config
from ..errors import (
    ChannelCalculationError,
    InsufficientDataError,
    InvalidInputError,
)
from ..logging.config import get_signal_logger, log_signal_decision
from ..models.channel import ChannelResult
from .bands import DEFAULT_MULTIPLIER, calculate_channel_bands
from .dispersion import calculate_standard_deviation
from .regression import calculate_linear_regression
from .signal import (
    BUY_THRESHOLD,
    SELL_THRESHOLD,
    classify_signal,
    is_collapsed_channel,
)

logger = structlog.get_logger(__name__)

MIN_PRICE_POINTS = 2


def calculate_band_distances(current_price: float, upper_band_value: float,
                             lower_band_value: float) -> tuple[float, float]:
    """
    Distance from the latest price to each band as a percentage of channel width

    Values fall outside 0-100 when the price is outside the channel.
    A collapsed channel reports the price as centred (50, 50).

    Returns:
        (distance_from_upper, distance_from_lower)
    """
    if is_collapsed_channel(upper_band_value, lower_band_value):
        return 50.0, 50.0

    channel_width = upper_band_value - lower_band_value

    distance_from_upper = ((upper_band_value - current_price) / channel_width) * 100
    distance_from_lower = ((current_price - lower_band_value) / channel_width) * 100
    return distance_from_upper, distance_from_lower


def analyze(prices: Sequence[float],
            std_dev_multiplier: float = DEFAULT_MULTIPLIER,
            buy_threshold: float = BUY_THRESHOLD,
            sell_threshold: float = SELL_THRESHOLD) -> ChannelResult:
    """
    Calculate the complete regression channel for a price series

    Args:
        prices: Closing prices, oldest first
        std_dev_multiplier: Band offset in residual standard deviations
        buy_threshold: Normalized position at or below which to emit BUY
        sell_threshold: Normalized position at or above which to emit SELL

    Returns:
        ChannelResult for the whole series and its latest point

    Raises:
        InsufficientDataError: If fewer than two prices are supplied
    """
    if len(prices) < MIN_PRICE_POINTS:
        raise InsufficientDataError(
            "Need at least 2 price points for regression analysis",
            required_count=MIN_PRICE_POINTS,
            available_count=len(prices)
        )

    x_values = range(len(prices))

    regression = calculate_linear_regression(x_values, prices)
    standard_deviation = calculate_standard_deviation(prices, regression.predictions)
    bands = calculate_channel_bands(regression.predictions, standard_deviation, std_dev_multiplier)

    current_price = prices[-1]
    predicted_price = regression.predictions[-1]
    current_upper_band = bands.upper_band[-1]
    current_lower_band = bands.lower_band[-1]

    decision = classify_signal(
        current_price,
        predicted_price,
        current_upper_band,
        current_lower_band,
        buy_threshold=buy_threshold,
        sell_threshold=sell_threshold
    )

    distance_from_upper, distance_from_lower = calculate_band_distances(
        current_price, current_upper_band, current_lower_band
    )

    return ChannelResult(
        regression=regression,
        upper_band=bands.upper_band,
        lower_band=bands.lower_band,
        middle_line=regression.predictions,
        standard_deviation=standard_deviation,
        current_price=current_price,
        predicted_price=predicted_price,
        signal=decision.signal,
        signal_strength=decision.strength,
        normalized_position=decision.normalized_position,
        distance_from_upper=distance_from_upper,
        distance_from_lower=distance_from_lower,
        channel_width=current_upper_band - current_lower_band
    )


class ChannelAnalyzer:
    """
    Runs regression channel analysis with configured parameters

    Holds configuration only; every call to analyze() is independent.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.signal_logger = get_signal_logger(__name__)

    @property
    def min_points(self) -> int:
        return max(MIN_PRICE_POINTS, self.config.channel.min_points)

    def analyze(self, prices: Sequence[float],
                context: Optional[dict[str, Any]] = None) -> ChannelResult:
        """
        Analyze a price series using the configured multiplier and thresholds

        Args:
            prices: Closing prices, oldest first
            context: Extra fields attached to log events (e.g. symbol)

        Returns:
            ChannelResult for the series

        Raises:
            InsufficientDataError: If fewer than min_points prices are supplied
            InvalidInputError: If a calculation stage rejects its input
            ChannelCalculationError: If a stage fails unexpectedly
        """
        params = self.config.channel

        if len(prices) < self.min_points:
            logger.warning(
                "Insufficient price data for channel analysis",
                required=self.min_points,
                available=len(prices),
                **(context or {})
            )
            raise InsufficientDataError(
                f"Need at least {self.min_points} price points for regression analysis",
                required_count=self.min_points,
                available_count=len(prices)
            )

        try:
            result = analyze(
                prices,
                std_dev_multiplier=params.std_dev_multiplier,
                buy_threshold=params.buy_threshold,
                sell_threshold=params.sell_threshold
            )
        except (InsufficientDataError, InvalidInputError):
            raise
        except Exception as e:
            raise ChannelCalculationError(
                f"Channel calculation failed: {str(e)}",
                metric_name="regression_channel",
                calculation_input={"price_count": len(prices)}
            ) from e

        log_signal_decision(
            self.signal_logger,
            signal=result.signal.value,
            strength=result.signal_strength,
            normalized_position=result.normalized_position,
            context={
                "price_count": len(prices),
                "slope": result.regression.slope,
                "r_squared": result.regression.r_squared,
                **(context or {}),
            }
        )

        return result

    def update_config(self, new_config: DefaultConfig) -> None:
        """Replace the configuration used for subsequent calls"""
        self.config = new_config
