"""
Error classification for the regression channel engine.

Data quality errors cover inputs the engine cannot analyze (mismatched or
empty sequences, too few prices, non-numeric values). System failures cover
unexpected breakage inside a calculation stage.
"""

from .data_quality import (
    DataQualityError,
    InvalidInputError,
    InsufficientDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ChannelCalculationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InvalidInputError",
    "InsufficientDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ChannelCalculationError",
]
