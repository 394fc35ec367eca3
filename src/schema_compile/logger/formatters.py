"""Logging formatters for console output.

- ColoredConsoleFormatter: Adds ANSI color codes to log levels
- SimpleConsoleFormatter: Shows only message content
- HybridConsoleFormatter: Simple format for INFO, structured for the rest
"""

import logging

from schema_compile.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color support for log level names.

    The level name is swapped for its colored form only for the duration
    of format(), so the shared record is left untouched afterwards.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a colored level name.

        Args:
            record: The log record to format

        Returns:
            Formatted log message

        """
        if record.levelname not in LOG_COLORS:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = (
            f"{LOG_COLORS[original_levelname]}{original_levelname}"
            f"{LOG_COLORS['RESET']}"
        )
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class SimpleConsoleFormatter(logging.Formatter):
    """Formatter that emits the message and nothing else."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the rendered message only."""
        return record.getMessage()


class HybridConsoleFormatter(logging.Formatter):
    """Console formatter with simple format for INFO, structured for others.

    Example Output:
        INFO:     "Registered 12 schemas"
        WARNING:  "12:30:45 - schema_compile.loader - WARNING - Missing $id"
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._simple_formatter = SimpleConsoleFormatter()
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format using the simple formatter for INFO, colored otherwise."""
        if record.levelno == logging.INFO:
            return self._simple_formatter.format(record)
        return self._colored_formatter.format(record)
