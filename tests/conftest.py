"""Pytest configuration and fixtures for schema-compile tests."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import orjson
import pytest

from schema_compile.constants import (
    DEFAULT_CONFIG_PATH,
    ENV_CONFIG_PATH,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("schema_compile"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment overrides out of the tests."""
    for name in (ENV_CONFIG_PATH, ENV_LOG_LEVEL, ENV_LOG_FILE):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a helper writing a JSON document below tmp_path."""

    def _write(relative: str, data: Any) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(orjson.dumps(data))
        return path

    return _write


@pytest.fixture
def write_config(
    write_json: Callable[[str, Any], Path],
) -> Callable[[dict[str, Any]], Path]:
    """Return a helper writing the config at its default location."""

    def _write(config: dict[str, Any]) -> Path:
        return write_json(DEFAULT_CONFIG_PATH, config)

    return _write
