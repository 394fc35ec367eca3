"""Environment-driven settings for the logging system."""

import logging
import os
from pathlib import Path

from schema_compile.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_FILE_LOG_LEVEL,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
)


def _normalize_level(value: str | None, default: str) -> str:
    """Return an upper-cased level name, or default when unknown."""
    if not value:
        return default
    level = value.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


def load_log_settings() -> tuple[str, str, Path | None]:
    """Load console level, file level and optional log file path.

    Environment Variables:
        SCHEMA_COMPILE_LOG_LEVEL: Console level (default: WARNING). Unknown
            level names fall back to the default.
        SCHEMA_COMPILE_LOG_FILE: When set, records are also written to this
            file through a rotating handler at DEBUG level.

    Returns:
        Tuple of (console_level, file_level, log_file) where log_file is
        None when file logging is disabled.

    """
    console_level = _normalize_level(
        os.getenv(ENV_LOG_LEVEL), DEFAULT_CONSOLE_LOG_LEVEL
    )

    env_log_file = os.getenv(ENV_LOG_FILE)
    log_file = Path(env_log_file).expanduser() if env_log_file else None

    return console_level, DEFAULT_FILE_LOG_LEVEL, log_file
