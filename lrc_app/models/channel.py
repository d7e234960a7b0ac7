"""Value objects for regression fits, channel bands and trading signals"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Signal(str, Enum):
    """Trading signal emitted for the most recent price."""
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


@dataclass(frozen=True)
class RegressionFit:
    """Least-squares line fitted over an index x-axis"""
    slope: float
    intercept: float
    r_squared: float                 # 0 when y has no variance
    predictions: tuple[float, ...]   # slope * x[i] + intercept

    @property
    def equation(self) -> str:
        """Display form of the fitted line, e.g. 'y = +1.0000x +1.00'"""
        from ..report.equation import format_regression_equation
        return format_regression_equation(self.slope, self.intercept)


@dataclass(frozen=True)
class ChannelBands:
    """Upper and lower channel bands, one value per prediction"""
    upper_band: tuple[float, ...]
    lower_band: tuple[float, ...]


@dataclass(frozen=True)
class SignalDecision:
    """Classifier output for a single price"""
    signal: Signal
    strength: float                  # 0-100
    normalized_position: float       # signed, in half-channel widths


@dataclass(frozen=True)
class ChannelResult:
    """Complete regression channel analysis for a price series"""
    regression: RegressionFit
    upper_band: tuple[float, ...]
    lower_band: tuple[float, ...]
    middle_line: tuple[float, ...]
    standard_deviation: float
    current_price: float
    predicted_price: float
    signal: Signal
    signal_strength: float
    normalized_position: float       # signed, in half-channel widths
    distance_from_upper: float       # % of channel width
    distance_from_lower: float       # % of channel width
    channel_width: float

    @property
    def current_upper_band(self) -> float:
        """Upper band at the latest index"""
        return self.upper_band[-1]

    @property
    def current_lower_band(self) -> float:
        """Lower band at the latest index"""
        return self.lower_band[-1]

    @property
    def equation(self) -> str:
        return self.regression.equation

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary with JSON-friendly values"""
        return {
            "regression": {
                "slope": self.regression.slope,
                "intercept": self.regression.intercept,
                "r_squared": self.regression.r_squared,
                "predictions": list(self.regression.predictions),
            },
            "upper_band": list(self.upper_band),
            "lower_band": list(self.lower_band),
            "middle_line": list(self.middle_line),
            "standard_deviation": self.standard_deviation,
            "current_price": self.current_price,
            "predicted_price": self.predicted_price,
            "signal": self.signal.value,
            "signal_strength": self.signal_strength,
            "normalized_position": self.normalized_position,
            "distance_from_upper": self.distance_from_upper,
            "distance_from_lower": self.distance_from_lower,
            "channel_width": self.channel_width,
        }
