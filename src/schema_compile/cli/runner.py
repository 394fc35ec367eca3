"""Pipeline runner for schema-compile.

Load Config → Resolve Files → Load + Register → Compile → Report
"""

from pathlib import Path

from schema_compile.compiler import compile_schemas
from schema_compile.config import load_config, resolve_config_path
from schema_compile.engine import SchemaEngine
from schema_compile.loader import load_schemas
from schema_compile.logger import get_logger
from schema_compile.report import print_report
from schema_compile.resolver import resolve_schema_files
from schema_compile.types import CompileReport

logger = get_logger(__name__)


class CompileRunner:
    """Run one schema compile pass for a working directory."""

    def __init__(self, cwd: Path | None = None) -> None:
        """Initialize the runner.

        Args:
            cwd: Directory the config path and globs are relative to,
                defaults to Path.cwd()

        """
        self.cwd = cwd or Path.cwd()

    def build_report(self) -> CompileReport:
        """Run every stage and return the collected report.

        Raises:
            ConfigNotFoundError: If the config file is missing
            ConfigError: If the config file is invalid
            NoSchemasFoundError: If no schema file was resolved

        """
        config_path = resolve_config_path(self.cwd)
        logger.debug("Using config %s", config_path)
        config = load_config(config_path, root=self.cwd)

        files = resolve_schema_files(config)

        engine = SchemaEngine()
        loaded = load_schemas(files, engine)
        compile_errors = compile_schemas(loaded.records, engine)

        return CompileReport(
            compiled=len(loaded.records),
            problems=tuple(loaded.problems),
            compile_errors=tuple(compile_errors),
        )

    def run(self) -> int:
        """Run the pipeline, print the report and return the exit code."""
        report = self.build_report()
        logger.info(
            "Compile finished: %d schemas, %d problems, %d compile errors",
            report.compiled,
            len(report.problems),
            len(report.compile_errors),
        )
        return print_report(report)
