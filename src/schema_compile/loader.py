"""Load schema files and register them with the engine.

Every file is attempted; a failing file becomes a Problem and the loop
moves on.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import orjson

from schema_compile.constants import (
    MSG_MISSING_ID,
    MSG_PARSE_ERROR,
    MSG_REGISTRATION_ERROR,
)
from schema_compile.engine import SchemaEngine, schema_identifier
from schema_compile.exceptions import DuplicateIdentifierError
from schema_compile.logger import get_logger
from schema_compile.types import LoadResult, Problem, SchemaRecord

logger = get_logger(__name__)


def read_schema(path: Path) -> Any:
    """Read and parse a schema file.

    Raises:
        orjson.JSONDecodeError: If the file is not valid JSON

    """
    return orjson.loads(path.read_bytes())


def load_schemas(files: Iterable[Path], engine: SchemaEngine) -> LoadResult:
    """Parse each file and register it under its `$id`.

    A file whose `$id`, or the `$id` of a schema embedded in it, is already
    held by an earlier file is reported as a duplicate and not registered.

    Args:
        files: Resolved schema files
        engine: Engine the schemas are registered with

    Returns:
        Registered records and the problems hit along the way

    """
    result = LoadResult()
    sources: dict[str, Path] = {}

    for path in files:
        try:
            document = read_schema(path)
        except orjson.JSONDecodeError as e:
            logger.debug("Failed to parse %s: %s", path, e)
            result.problems.append(Problem(path, f"{MSG_PARSE_ERROR}: {e}"))
            continue

        identifier = schema_identifier(document)
        if identifier is None:
            logger.debug("Schema %s has no $id", path)
            result.problems.append(Problem(path, MSG_MISSING_ID))
            continue

        try:
            engine.register(identifier, document)
        except DuplicateIdentifierError as e:
            message = (
                f"Duplicate $id '{e.identifier}' "
                f"(already registered by {sources[e.owner]})"
            )
            logger.debug("%s: %s", path, message)
            result.problems.append(Problem(path, message))
            continue
        except ValueError as e:
            logger.debug("Failed to register %s: %s", path, e)
            result.problems.append(
                Problem(path, f"{MSG_REGISTRATION_ERROR}: {e}")
            )
            continue

        sources[identifier] = path
        result.records.append(SchemaRecord(identifier, path, document))

    logger.info(
        "Registered %d schemas, %d problems",
        len(result.records),
        len(result.problems),
    )
    return result
