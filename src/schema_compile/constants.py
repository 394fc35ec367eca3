"""Centralized constants module for schema-compile.

This module serves as the single source of truth for shared constants
across the schema-compile codebase. Constants are organized by logical
categories and use typing.Final annotations to ensure immutability.

Usage:
    from schema_compile.constants import DEFAULT_CONFIG_PATH
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

# Config file location, relative to the working directory
DEFAULT_CONFIG_DIR: Final[str] = "schema"
DEFAULT_CONFIG_FILE_NAME: Final[str] = "schema-compile.config.json"
DEFAULT_CONFIG_PATH: Final[str] = (
    f"{DEFAULT_CONFIG_DIR}/{DEFAULT_CONFIG_FILE_NAME}"
)

# Environment overrides
ENV_CONFIG_PATH: Final[str] = "SCHEMA_COMPILE_CONFIG"
ENV_LOG_LEVEL: Final[str] = "SCHEMA_COMPILE_LOG_LEVEL"
ENV_LOG_FILE: Final[str] = "SCHEMA_COMPILE_LOG_FILE"

# Config keys
KEY_FOLDERS: Final[str] = "folders"
KEY_INCLUDE: Final[str] = "include"
KEY_EXCLUDE: Final[str] = "exclude"

# =============================================================================
# Discovery Constants
# =============================================================================

# Appended to every configured folder
FOLDER_GLOB_SUFFIX: Final[str] = "**/*.json"

# =============================================================================
# Schema Constants
# =============================================================================

ID_KEYWORD: Final[str] = "$id"
DIALECT_KEYWORD: Final[str] = "$schema"
REFERENCE_KEYWORDS: Final[tuple[str, ...]] = ("$ref", "$dynamicRef")

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_OK: Final[int] = 0
EXIT_FATAL: Final[int] = 1
EXIT_ISSUES: Final[int] = 2

# =============================================================================
# Report Messages
# =============================================================================

MSG_NO_SCHEMAS: Final[str] = "No schema files found to compile."
MSG_MISSING_ID: Final[str] = "Missing $id"
MSG_PARSE_ERROR: Final[str] = "Parse error"
MSG_REGISTRATION_ERROR: Final[str] = "Registration error"
MSG_ISSUES_HEADER: Final[str] = "Schema compile finished with issues."
MSG_PROBLEMS_HEADER: Final[str] = "Problems (missing $id / parse):"
MSG_COMPILE_ERRORS_HEADER: Final[str] = "Compile errors:"
MSG_SUCCESS_TEMPLATE: Final[str] = (
    "OK: Compiled {count} schemas with no unresolved refs."
)

# =============================================================================
# Logging Constants
# =============================================================================

DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_FILE_LOG_LEVEL: Final[str] = "DEBUG"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB

# Number of backup files to keep for rotated logs
LOG_BACKUP_COUNT: Final[int] = 3

# Console and file format strings used by the logger
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
