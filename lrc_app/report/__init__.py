"""
Report assembly module.

Turns a ChannelResult into the dashboard's JSON payload: equation text,
signal explanation, per-band figures and metadata.
"""

from .equation import format_regression_equation
from .summary import (
    build_channel_report,
    build_period_reports,
    explain_signal,
    validate_prices,
)

__all__ = [
    "build_channel_report",
    "build_period_reports",
    "explain_signal",
    "format_regression_equation",
    "validate_prices",
]
