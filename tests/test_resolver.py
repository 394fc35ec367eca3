"""Tests for resolving configured globs into schema files."""

import pytest

from schema_compile.config import CompileConfig
from schema_compile.exceptions import NoSchemasFoundError
from schema_compile.resolver import (
    build_include_patterns,
    expand_patterns,
    resolve_schema_files,
)


def _config(tmp_path, folders=None, include=(), exclude=()):
    return CompileConfig(
        root=tmp_path,
        folders=folders or {},
        include=tuple(include),
        exclude=tuple(exclude),
    )


class TestBuildIncludePatterns:
    """Test include pattern construction."""

    def test_folders_then_extra_includes(self, tmp_path):
        """Test each folder gets the recursive suffix, extras follow."""
        config = _config(
            tmp_path,
            folders={"core": "schemas/core", "api": "schemas/api/"},
            include=["contracts/*.schema.json"],
        )

        assert build_include_patterns(config) == [
            "schemas/core/**/*.json",
            "schemas/api/**/*.json",
            "contracts/*.schema.json",
        ]


class TestResolveSchemaFiles:
    """Test glob expansion, exclusion and deduplication."""

    def test_finds_nested_json_files(self, tmp_path, write_json):
        """Test folder globs match files at any depth."""
        top = write_json("schemas/core/a.json", {})
        deep = write_json("schemas/core/x/y/b.json", {})
        write_json("schemas/other/c.json", {})
        (tmp_path / "schemas/core/notes.txt").write_text("", encoding="utf-8")

        files = resolve_schema_files(
            _config(tmp_path, folders={"core": "schemas/core"})
        )

        assert files == sorted([top, deep])
        assert all(f.is_absolute() for f in files)

    def test_extra_include_patterns(self, tmp_path, write_json):
        """Test include patterns are used verbatim."""
        extra = write_json("contracts/order.schema.json", {})
        write_json("contracts/order.example.json", {})

        files = resolve_schema_files(
            _config(tmp_path, include=["contracts/*.schema.json"])
        )

        assert files == [extra]

    def test_exclude_patterns(self, tmp_path, write_json):
        """Test excluded files are dropped from the result."""
        kept = write_json("schemas/core/a.json", {})
        write_json("schemas/core/drafts/wip.json", {})

        files = resolve_schema_files(
            _config(
                tmp_path,
                folders={"core": "schemas/core"},
                exclude=["schemas/core/drafts/**"],
            )
        )

        assert files == [kept]

    def test_overlapping_patterns_are_deduplicated(self, tmp_path, write_json):
        """Test a file matched by several patterns appears once."""
        schema = write_json("schemas/core/a.json", {})

        files = resolve_schema_files(
            _config(
                tmp_path,
                folders={"core": "schemas/core", "all": "schemas"},
                include=["schemas/core/a.json", "./schemas/core/*.json"],
            )
        )

        assert files == [schema]

    def test_directories_are_ignored(self, tmp_path, write_json):
        """Test a directory whose name ends in .json is not a schema."""
        schema = write_json("schemas/real.json", {})
        (tmp_path / "schemas" / "folder.json").mkdir()

        files = resolve_schema_files(
            _config(tmp_path, folders={"s": "schemas"})
        )

        assert files == [schema]

    def test_absolute_include_pattern(self, tmp_path, write_json):
        """Test absolute include patterns resolve as-is."""
        schema = write_json("elsewhere/a.json", {})

        files = resolve_schema_files(
            _config(tmp_path, include=[str(tmp_path / "elsewhere/*.json")])
        )

        assert files == [schema]

    def test_no_files_raises(self, tmp_path):
        """Test empty folders abort the run."""
        (tmp_path / "schemas" / "core").mkdir(parents=True)

        with pytest.raises(NoSchemasFoundError) as exc_info:
            resolve_schema_files(
                _config(tmp_path, folders={"core": "schemas/core"})
            )

        assert str(exc_info.value) == "No schema files found to compile."

    def test_everything_excluded_raises(self, tmp_path, write_json):
        """Test excluding every match is the same as matching nothing."""
        write_json("schemas/a.json", {})

        with pytest.raises(NoSchemasFoundError):
            resolve_schema_files(
                _config(
                    tmp_path,
                    folders={"s": "schemas"},
                    exclude=["**/*.json"],
                )
            )


class TestExpandPatterns:
    """Test raw pattern expansion."""

    def test_missing_folder_matches_nothing(self, tmp_path):
        """Test a pattern under a missing folder yields no paths."""
        assert expand_patterns(["nope/**/*.json"], tmp_path) == set()
