"""Default configuration parameters for the regression channel engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelParams:
    """Channel construction and signal classification parameters."""
    std_dev_multiplier: float = 2.0     # Band offset in residual std-devs
    buy_threshold: float = -0.7         # Normalized position at/below -> BUY
    sell_threshold: float = 0.7         # Normalized position at/above -> SELL
    min_points: int = 2                 # Minimum prices for a regression


@dataclass(frozen=True)
class ReportParams:
    """Dashboard report parameters."""
    default_days: int = 90
    min_days: int = 10
    max_days: int = 365
    min_data_points: int = 10           # Minimum closes before reporting
    period_options: tuple[int, ...] = (30, 60, 90, 180, 365)


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    channel: ChannelParams
    report: ReportParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        channel=ChannelParams(),
        report=ReportParams(),
    )
