"""
Centralized logging configuration for the regression channel engine.

This module provides standardized logging configuration using structlog.
The pure calculation functions in lrc_app.channel never log; the analyzer
and report layers log through the loggers returned here.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


CALLSITE_PARAMETERS = (
    structlog.processors.CallsiteParameter.FILENAME,
    structlog.processors.CallsiteParameter.LINENO,
)


def build_processors(
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> list:
    """Processor chain ending in a JSON or console renderer"""
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=list(CALLSITE_PARAMETERS)
        ))
    processors.extend(extra_processors or ())

    if format_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return processors + [renderer]


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Log lines go to stderr; stdout is left to the report output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=sys.stderr,
        format="%(message)s"
    )

    structlog.configure(
        processors=build_processors(
            format_json, include_timestamp, include_caller, extra_processors
        ),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for signal classification events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for signal decisions
    """
    return get_logger(name).bind(subsystem="signal")


def log_signal_decision(
    logger: FilteringBoundLogger,
    signal: str,
    strength: float,
    normalized_position: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a signal classification with standardized format.

    Args:
        logger: Structlog logger instance
        signal: Emitted signal (BUY, SELL or HOLD)
        strength: Signal strength, 0-100
        normalized_position: Latest price position in half-channel widths
        context: Additional context data
    """
    bound_logger = logger.bind(
        signal=signal,
        strength=round(strength, 2),
        normalized_position=round(normalized_position, 4),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if signal == "HOLD":
        bound_logger.debug("Signal classified")
    else:
        bound_logger.info("Signal classified")
