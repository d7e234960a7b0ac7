"""
Data models and contracts module.

Immutable value objects produced by the regression channel engine.
Every analysis creates fresh instances; nothing is cached or mutated.
"""

from .channel import (
    ChannelBands,
    ChannelResult,
    RegressionFit,
    Signal,
    SignalDecision,
)

__all__ = [
    "ChannelBands",
    "ChannelResult",
    "RegressionFit",
    "Signal",
    "SignalDecision",
]
