"""Dashboard report built from a regression channel analysis"""

import math
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any, Optional

import structlog

from ..channel.analyzer import ChannelAnalyzer
from ..config.defaults import DefaultConfig, get_default_config
from ..errors import InsufficientDataError, InvalidInputError, MalformedDataError
from ..models.channel import ChannelResult, Signal
from .equation import format_regression_equation

logger = structlog.get_logger(__name__)

MODEL_TYPE = "Linear Regression Channel"


def validate_prices(prices: Sequence[Any]) -> list[float]:
    """
    Check that every price is a finite number

    Args:
        prices: Raw closing prices

    Returns:
        Prices as floats

    Raises:
        MalformedDataError: On a non-numeric, NaN or infinite value
    """
    validated = []
    for index, price in enumerate(prices):
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise MalformedDataError(
                f"Invalid price type at index {index}: {type(price).__name__}",
                raw_data=repr(price)[:100],
                expected_format="finite number"
            )
        if math.isnan(price) or math.isinf(price):
            raise MalformedDataError(
                f"Invalid price value at index {index}: {price}",
                raw_data=repr(price),
                expected_format="finite number"
            )
        validated.append(float(price))
    return validated


def explain_signal(signal: Signal, current_price: float, predicted_price: float,
                   upper_band: float, lower_band: float) -> str:
    """Human-readable explanation of a trading signal"""
    if signal is Signal.BUY:
        return (
            f"Price (${current_price:.2f}) is near the lower band (${lower_band:.2f}), "
            "suggesting the stock may be oversold. This could be a buying opportunity "
            "as prices tend to revert to the mean."
        )

    if signal is Signal.SELL:
        return (
            f"Price (${current_price:.2f}) is near the upper band (${upper_band:.2f}), "
            "suggesting the stock may be overbought. Consider taking profits as prices "
            "tend to revert to the mean."
        )

    price_diff = current_price - predicted_price
    diff_pct = abs(price_diff / predicted_price * 100) if predicted_price else 0.0
    direction = "above" if price_diff > 0 else "below"
    return (
        f"Price (${current_price:.2f}) is near the regression line (${predicted_price:.2f}), "
        f"{diff_pct:.2f}% {direction} predicted value. The stock is trading within "
        "normal range. Wait for a clearer signal."
    )


def describe_confidence_interval(multiplier: float) -> str:
    """Label for the band width shown next to the chart"""
    if multiplier == 2:
        return "95%"
    return f"±{multiplier:g}σ"


def _result_payload(result: ChannelResult) -> dict[str, Any]:
    upper_band = result.current_upper_band
    lower_band = result.current_lower_band

    return {
        "regression": {
            "equation": format_regression_equation(
                result.regression.slope, result.regression.intercept
            ),
            "slope": result.regression.slope,
            "intercept": result.regression.intercept,
            "rSquared": result.regression.r_squared,
        },
        "currentAnalysis": {
            "currentPrice": result.current_price,
            "predictedPrice": result.predicted_price,
            "upperBand": upper_band,
            "lowerBand": lower_band,
            "middleLine": result.predicted_price,
        },
        "channel": {
            "standardDeviation": result.standard_deviation,
            "channelWidth": result.channel_width,
            "distanceFromUpper": result.distance_from_upper,
            "distanceFromLower": result.distance_from_lower,
        },
        "signal": {
            "action": result.signal.value,
            "strength": result.signal_strength,
            "explanation": explain_signal(
                result.signal,
                result.current_price,
                result.predicted_price,
                upper_band,
                lower_band
            ),
        },
    }


def build_channel_report(prices: Sequence[Any],
                         symbol: Optional[str] = None,
                         days: Optional[int] = None,
                         config: Optional[DefaultConfig] = None,
                         calculated_at: Optional[datetime] = None) -> dict[str, Any]:
    """
    Analyze the most recent closes and assemble the dashboard payload

    Args:
        prices: Closing prices, oldest first
        symbol: Display label, upper-cased in the payload
        days: Number of most recent closes to analyze
        config: Configuration, defaults when omitted
        calculated_at: Timestamp for the metadata block, now (UTC) when omitted

    Returns:
        JSON-serializable report dictionary

    Raises:
        InvalidInputError: If days is outside the configured range
        InsufficientDataError: If fewer than min_data_points closes are available
        MalformedDataError: If a price is not a finite number
    """
    config = config or get_default_config()
    report_params = config.report

    if days is None:
        days = report_params.default_days

    if isinstance(days, bool) or not isinstance(days, int) \
            or not report_params.min_days <= days <= report_params.max_days:
        raise InvalidInputError(
            f"Days parameter must be between {report_params.min_days} and {report_params.max_days}",
            context={"days": days}
        )

    closes = validate_prices(prices)[-days:]
    label = symbol.upper() if symbol else None

    if len(closes) < report_params.min_data_points:
        logger.warning(
            "Insufficient historical data for report",
            symbol=label,
            required=report_params.min_data_points,
            available=len(closes)
        )
        raise InsufficientDataError(
            f"Insufficient historical data for analysis "
            f"(minimum {report_params.min_data_points} days required)",
            required_count=report_params.min_data_points,
            available_count=len(closes)
        )

    analyzer = ChannelAnalyzer(config)
    result = analyzer.analyze(closes, context={"symbol": label} if label else None)

    report = {
        "symbol": label,
        "dataPoints": len(closes),
        "daysAnalyzed": days,
    }
    report.update(_result_payload(result))
    report["metadata"] = {
        "calculatedAt": (calculated_at or datetime.now(timezone.utc)).isoformat(),
        "modelType": MODEL_TYPE,
        "confidenceInterval": describe_confidence_interval(config.channel.std_dev_multiplier),
    }

    logger.info(
        "Channel report built",
        symbol=label,
        data_points=len(closes),
        signal=result.signal.value
    )

    return report


def build_period_reports(prices: Sequence[Any],
                         symbol: Optional[str] = None,
                         config: Optional[DefaultConfig] = None,
                         calculated_at: Optional[datetime] = None) -> dict[str, dict[str, Any]]:
    """
    Build one report per dashboard period option

    Keys are the period lengths as strings, in the configured order. A period
    longer than the available history analyzes every close.

    Raises:
        InvalidInputError: If a period option is outside the configured day range
        InsufficientDataError: If fewer than min_data_points closes are available
        MalformedDataError: If a price is not a finite number
    """
    config = config or get_default_config()
    calculated_at = calculated_at or datetime.now(timezone.utc)

    return {
        str(days): build_channel_report(
            prices,
            symbol=symbol,
            days=days,
            config=config,
            calculated_at=calculated_at
        )
        for days in config.report.period_options
    }
