"""
LRC App - Linear Regression Price-Channel Engine

Converts a chronological series of closing prices into a least-squares trend
line, a residual-based confidence channel around it, and a BUY/SELL/HOLD
signal for the most recent price.
"""

__version__ = "0.1.0"
__author__ = "LRC Team"
