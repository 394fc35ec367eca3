"""Exception classes for schema-compile operations."""


class SchemaCompileError(Exception):
    """Base exception for schema-compile operations."""

    error_prefix: str = "Schema compile failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional path or name the failure relates to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ConfigNotFoundError(SchemaCompileError):
    """Raised when the config file does not exist."""

    error_prefix = "Config not found"

    def __str__(self) -> str:
        """Return the missing config path."""
        return f"{self.error_prefix}: {self.target or self.message}"


class ConfigError(SchemaCompileError):
    """Raised when the config file cannot be parsed or has the wrong shape."""

    error_prefix = "Invalid config"


class NoSchemasFoundError(SchemaCompileError):
    """Raised when the configured globs resolve to zero files."""

    error_prefix = "No schema files found"

    def __str__(self) -> str:
        """Return the fixed user-facing message."""
        return self.message


class SchemaCompilationError(SchemaCompileError):
    """Raised by the engine when a registered schema fails to compile."""

    error_prefix = "Compilation failed"


class UnresolvedReferenceError(SchemaCompilationError):
    """Raised when a `$ref` target is not among the registered schemas."""

    error_prefix = "Unresolved reference"


class DuplicateIdentifierError(SchemaCompileError):
    """Raised when a schema claims an `$id` another schema already holds.

    Attributes:
        identifier: The contested `$id`, top-level or embedded
        owner: Top-level identifier of the schema holding it

    """

    error_prefix = "Duplicate $id"

    def __init__(self, identifier: str, owner: str) -> None:
        """Initialize with the contested identifier and its holder."""
        super().__init__(
            f"already registered by schema '{owner}'", target=identifier
        )
        self.identifier = identifier
        self.owner = owner
