"""Command-line interface for schema-compile."""

from schema_compile.cli.runner import CompileRunner

__all__ = ["CompileRunner"]
