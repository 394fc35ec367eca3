"""Loading of the schema-compile config file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import orjson

from schema_compile.config.schemas import validate_config
from schema_compile.constants import KEY_EXCLUDE, KEY_FOLDERS, KEY_INCLUDE
from schema_compile.exceptions import ConfigError, ConfigNotFoundError
from schema_compile.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class CompileConfig:
    """Immutable run configuration.

    Attributes:
        root: Directory glob patterns are resolved against
        folders: Named folders scanned recursively for *.json files
        include: Extra glob patterns, used verbatim
        exclude: Glob patterns removed from the resolved set

    """

    root: Path
    folders: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping, root: Path) -> CompileConfig:
        """Build a config from an already validated document."""
        return cls(
            root=root,
            folders=MappingProxyType(dict(data[KEY_FOLDERS])),
            include=tuple(data.get(KEY_INCLUDE) or ()),
            exclude=tuple(data.get(KEY_EXCLUDE) or ()),
        )


def load_config(config_path: Path, root: Path | None = None) -> CompileConfig:
    """Read, validate and freeze the config file.

    Args:
        config_path: Path to the JSON config file
        root: Directory patterns resolve against, defaults to Path.cwd()

    Returns:
        The run configuration

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigError: If the file is not valid JSON or has the wrong shape

    """
    if not config_path.is_file():
        raise ConfigNotFoundError(
            "config file does not exist", target=str(config_path)
        )

    try:
        data = orjson.loads(config_path.read_bytes())
    except orjson.JSONDecodeError as e:
        raise ConfigError(str(e), target=str(config_path)) from e

    validate_config(data, str(config_path))

    config = CompileConfig.from_dict(data, root or Path.cwd())
    logger.debug(
        "Loaded config %s: %d folders, %d include, %d exclude",
        config_path,
        len(config.folders),
        len(config.include),
        len(config.exclude),
    )
    return config
