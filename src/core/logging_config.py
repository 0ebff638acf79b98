"""Structured logging configuration.

This module builds structlog loggers with a stable structured format.
Each logger carries its own level filter and processor chain, so the
global structlog configuration of a host application is left alone.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL


def get_logger(name: str, level: str = DEFAULT_LOG_LEVEL) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
        level: Minimum level name for emitted events.

    Returns:
        A structlog logger with JSON output.
    """
    return structlog.wrap_logger(
        structlog.PrintLogger(),
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_name=name,
    )
