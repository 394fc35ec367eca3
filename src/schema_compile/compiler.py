"""Compiler pass: compile every registered schema, collect failures."""

from collections.abc import Iterable

from schema_compile.engine import SchemaEngine
from schema_compile.exceptions import SchemaCompilationError
from schema_compile.logger import get_logger
from schema_compile.types import CompileError, SchemaRecord

logger = get_logger(__name__)


def compile_schemas(
    records: Iterable[SchemaRecord], engine: SchemaEngine
) -> list[CompileError]:
    """Compile each record against the full registry.

    A failing schema is recorded and the pass continues.

    Args:
        records: Registered schemas, in registration order
        engine: Engine holding every registered schema

    Returns:
        Compile errors in the order they were hit

    """
    errors: list[CompileError] = []
    for record in records:
        try:
            engine.compile(record.identifier)
        except SchemaCompilationError as e:
            logger.debug("Failed to compile %s: %s", record.identifier, e)
            errors.append(
                CompileError(record.identifier, record.file, e.message)
            )
        else:
            logger.debug("Compiled %s", record.identifier)
    return errors
