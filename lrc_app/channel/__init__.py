"""Regression channel engine: least-squares fit, bands and signal classification"""

from .analyzer import ChannelAnalyzer, analyze, calculate_band_distances
from .bands import calculate_channel_bands
from .dispersion import calculate_standard_deviation
from .regression import calculate_linear_regression, fit
from .signal import calculate_normalized_position, classify_signal, is_collapsed_channel

__all__ = [
    "ChannelAnalyzer",
    "analyze",
    "calculate_band_distances",
    "calculate_channel_bands",
    "calculate_standard_deviation",
    "calculate_linear_regression",
    "fit",
    "calculate_normalized_position",
    "classify_signal",
    "is_collapsed_channel",
]
