"""Expansion of configured folders and globs into schema file paths."""

import glob
import os
from collections.abc import Iterable
from pathlib import Path

from schema_compile.config import CompileConfig
from schema_compile.constants import FOLDER_GLOB_SUFFIX, MSG_NO_SCHEMAS
from schema_compile.exceptions import NoSchemasFoundError
from schema_compile.logger import get_logger

logger = get_logger(__name__)


def build_include_patterns(config: CompileConfig) -> list[str]:
    """Return folder globs followed by the extra include patterns."""
    patterns = [
        os.path.join(folder, FOLDER_GLOB_SUFFIX)
        for folder in config.folders.values()
    ]
    patterns.extend(config.include)
    return patterns


def expand_patterns(patterns: Iterable[str], root: Path) -> set[Path]:
    """Expand glob patterns relative to root into absolute file paths.

    `**` matches zero or more directories. Directories matched by a
    pattern are dropped.
    """
    matches: set[Path] = set()
    for pattern in patterns:
        found = glob.glob(pattern, root_dir=root, recursive=True)
        logger.debug("Pattern %s matched %d entries", pattern, len(found))
        for entry in found:
            path = Path(os.path.abspath(root / entry))
            if path.is_file():
                matches.add(path)
    return matches


def resolve_schema_files(config: CompileConfig) -> list[Path]:
    """Resolve the config into a deduplicated, sorted list of files.

    Raises:
        NoSchemasFoundError: If nothing is left after exclusion

    """
    included = expand_patterns(build_include_patterns(config), config.root)
    excluded = expand_patterns(config.exclude, config.root)

    files = sorted(included - excluded)
    if not files:
        raise NoSchemasFoundError(MSG_NO_SCHEMAS)

    logger.info(
        "Resolved %d schema files (%d excluded)",
        len(files),
        len(included & excluded),
    )
    return files
