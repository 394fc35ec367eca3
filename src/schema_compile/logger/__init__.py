"""Logging utilities for schema-compile.

Architecture:
    Module loggers → QueueHandler on "schema_compile" → Queue →
    QueueListener thread → stderr console handler (+ optional file handler)

Usage:
    >>> from schema_compile.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Resolved %d files", count)  # Use %-style formatting

Environment Variables:
    SCHEMA_COMPILE_LOG_LEVEL: Console level (DEBUG, INFO, WARNING, ...)
    SCHEMA_COMPILE_LOG_FILE: Also write a rotating log file at this path

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from schema_compile.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from schema_compile.logger.handlers import ConfigurationError
from schema_compile.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from schema_compile.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
]
