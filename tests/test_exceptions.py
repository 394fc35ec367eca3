"""Tests for exception formatting."""

from schema_compile.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    DuplicateIdentifierError,
    NoSchemasFoundError,
    SchemaCompilationError,
    SchemaCompileError,
    UnresolvedReferenceError,
)


def test_base_error_with_target():
    """Test the target is named in the message."""
    error = ConfigError("bad shape", target="schema/cfg.json")

    assert str(error) == "Invalid config for 'schema/cfg.json': bad shape"
    assert error.message == "bad shape"


def test_base_error_without_target():
    """Test the prefix is used alone when there is no target."""
    assert str(SchemaCompileError("boom")) == "Schema compile failed: boom"


def test_config_not_found_names_path():
    """Test the missing path is shown after the prefix."""
    error = ConfigNotFoundError("missing", target="/repo/schema/cfg.json")

    assert str(error) == "Config not found: /repo/schema/cfg.json"


def test_no_schemas_found_message():
    """Test the fixed message is shown as-is."""
    error = NoSchemasFoundError("No schema files found to compile.")

    assert str(error) == "No schema files found to compile."


def test_hierarchy():
    """Test every error shares the package base class."""
    assert issubclass(UnresolvedReferenceError, SchemaCompilationError)
    for cls in (
        ConfigError,
        ConfigNotFoundError,
        NoSchemasFoundError,
        SchemaCompilationError,
    ):
        assert issubclass(cls, SchemaCompileError)


def test_duplicate_identifier_names_owner():
    """Test the contested $id and its holder are kept and shown."""
    error = DuplicateIdentifierError("y", owner="a")

    assert error.identifier == "y"
    assert error.owner == "a"
    assert str(error) == (
        "Duplicate $id for 'y': already registered by schema 'a'"
    )
    assert isinstance(error, SchemaCompileError)
