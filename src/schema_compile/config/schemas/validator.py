"""JSON Schema validation for the schema-compile config file."""

from pathlib import Path
from typing import Any

import orjson
from jsonschema import Draft7Validator, ValidationError
from jsonschema.exceptions import best_match

from schema_compile.exceptions import ConfigError
from schema_compile.logger import get_logger

logger = get_logger(__name__)

SCHEMA_DIR = Path(__file__).parent
COMPILE_CONFIG_SCHEMA_PATH = SCHEMA_DIR / "compile_config.schema.json"


class ConfigValidator:
    """Validates a parsed config document against the bundled schema."""

    def __init__(self, schema_path: Path = COMPILE_CONFIG_SCHEMA_PATH) -> None:
        """Load the config schema and build its validator."""
        self._schema = self._load_schema(schema_path)
        self._validator = Draft7Validator(self._schema)

    @staticmethod
    def _load_schema(schema_path: Path) -> dict[str, Any]:
        """Load JSON schema from file.

        Raises:
            FileNotFoundError: If schema file doesn't exist
            ValueError: If schema JSON is invalid

        """
        if not schema_path.exists():
            msg = f"Schema file not found: {schema_path}"
            raise FileNotFoundError(msg)

        try:
            return orjson.loads(schema_path.read_bytes())  # type: ignore[no-any-return]
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON in schema file {schema_path}: {e}"
            raise ValueError(msg) from e

    @staticmethod
    def _format_validation_error(error: ValidationError) -> str:
        """Format a jsonschema error into a one-line message."""
        path = (
            ".".join(str(p) for p in error.absolute_path)
            if error.absolute_path
            else "root"
        )

        message = error.message
        if error.validator == "required":
            missing = (
                error.message.split("'")[1]
                if "'" in error.message
                else "unknown"
            )
            message = f"Missing required field: '{missing}'"
        elif error.validator == "type":
            actual = type(error.instance).__name__
            message = (
                f"Expected type '{error.validator_value}', got '{actual}'"
            )

        return f"{message} (at '{path}')"

    def validate(self, config: Any, source: str | None = None) -> None:
        """Validate a parsed config document.

        Args:
            config: Parsed config document
            source: Optional config path for error messages

        Raises:
            ConfigError: If validation fails

        """
        errors = list(self._validator.iter_errors(config))
        if errors:
            best_error = best_match(errors)
            raise ConfigError(
                self._format_validation_error(best_error), target=source
            )

        logger.debug("Config validation passed: %s", source or "unknown")


def validate_config(config: Any, source: str | None = None) -> None:
    """Validate a parsed config document (convenience function).

    Raises:
        ConfigError: If validation fails

    """
    ConfigValidator().validate(config, source)
