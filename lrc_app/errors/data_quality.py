"""
Data quality error classifications for price series analysis.

These exceptions are fatal to the call that raised them: a regression over
malformed or insufficient data has no meaningful partial answer.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for input problems detected before or during analysis."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidInputError(DataQualityError):
    """Sequences of mismatched length, empty sequences or out-of-range parameters."""

    def __init__(self, message: str, expected_length: Optional[int] = None,
                 actual_length: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected_length = expected_length
        self.actual_length = actual_length


class InsufficientDataError(DataQualityError):
    """Not enough price points for the requested analysis."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class MalformedDataError(DataQualityError):
    """Price data exists but is not a finite number."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
