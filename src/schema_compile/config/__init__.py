"""Configuration for schema-compile runs."""

from schema_compile.config.loader import CompileConfig, load_config
from schema_compile.config.paths import resolve_config_path

__all__ = ["CompileConfig", "load_config", "resolve_config_path"]
