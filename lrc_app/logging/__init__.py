"""
Logging configuration and utilities for the regression channel engine.
"""
from .config import (
    build_processors,
    configure_logging,
    get_logger,
    get_signal_logger,
    log_signal_decision,
)

__all__ = [
    "build_processors",
    "configure_logging",
    "get_logger",
    "get_signal_logger",
    "log_signal_decision",
]
