"""Handler creation for the logging system.

Console output goes to stderr so that stdout carries only the compile
report. All handlers sit behind a QueueListener attached to the package
root logger.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from schema_compile.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from schema_compile.logger.formatters import HybridConsoleFormatter

ROOT_LOGGER_NAME = "schema_compile"


class ConfigurationError(Exception):
    """Error in logging configuration."""


def _create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create the stderr console handler.

    Args:
        console_level: Log level for console (e.g., "DEBUG", "WARNING")

    Returns:
        Configured StreamHandler

    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.WARNING))
    return console_handler


def _create_file_handler(
    log_file: Path, file_level: str
) -> RotatingFileHandler:
    """Create a rotating file handler.

    Args:
        log_file: Path to log file
        file_level: Log level for file (e.g., "DEBUG", "INFO")

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg) from e

    file_handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    file_handler.setLevel(getattr(logging, file_level, logging.DEBUG))
    return file_handler


def setup_root_logger(
    state,
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> None:
    """Initialize the package root logger with handlers via QueueListener.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console log level
        file_level: File log level
        log_file: Path to log file, or None to disable file logging

    Raises:
        ConfigurationError: If handler setup fails

    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # filter at handlers
    root_logger.propagate = False

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = [_create_console_handler(console_level)]
    if log_file is not None:
        handlers.append(_create_file_handler(log_file, file_level))

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue,
        *handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()

    root_logger.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True
