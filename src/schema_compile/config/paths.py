"""Config file location.

The config path is fixed relative to the working directory; the
SCHEMA_COMPILE_CONFIG environment variable can point elsewhere.
"""

import os
from pathlib import Path

from schema_compile.constants import DEFAULT_CONFIG_PATH, ENV_CONFIG_PATH


def resolve_config_path(cwd: Path | None = None) -> Path:
    """Return the absolute config path for a run.

    Args:
        cwd: Working directory, defaults to Path.cwd()

    Returns:
        Absolute path to the config file (which may not exist)

    """
    root = cwd or Path.cwd()
    override = os.getenv(ENV_CONFIG_PATH)
    candidate = (
        Path(override).expanduser() if override else Path(DEFAULT_CONFIG_PATH)
    )
    if not candidate.is_absolute():
        candidate = root / candidate
    return candidate.absolute()
