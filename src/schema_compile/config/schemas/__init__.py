"""Bundled JSON Schema for the config file and its validator."""

from schema_compile.config.schemas.validator import (
    ConfigValidator,
    validate_config,
)

__all__ = ["ConfigValidator", "validate_config"]
