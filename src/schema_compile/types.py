"""Record types passed between the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from schema_compile.constants import EXIT_ISSUES, EXIT_OK


@dataclass(slots=True, frozen=True)
class SchemaRecord:
    """A parsed schema registered under its identifier.

    Attributes:
        identifier: Non-empty `$id` the schema is registered under
        file: Absolute path the schema was read from
        document: Parsed JSON document

    """

    identifier: str
    file: Path
    document: Any


@dataclass(slots=True, frozen=True)
class Problem:
    """A file that never reached the compiler pass."""

    file: Path
    message: str


@dataclass(slots=True, frozen=True)
class CompileError:
    """A registered schema that failed to compile."""

    identifier: str
    file: Path
    message: str


@dataclass(slots=True)
class LoadResult:
    """Output of the load/register stage."""

    records: list[SchemaRecord] = field(default_factory=list)
    problems: list[Problem] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class CompileReport:
    """Everything the reporter needs to print and pick an exit code.

    Attributes:
        compiled: Number of schemas handed to the compiler pass
        problems: Load-time problems in collection order
        compile_errors: Compile failures in collection order

    """

    compiled: int
    problems: tuple[Problem, ...] = ()
    compile_errors: tuple[CompileError, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True when no problem or compile error was collected."""
        return not self.problems and not self.compile_errors

    @property
    def exit_code(self) -> int:
        """Return the process exit code for this report."""
        return EXIT_OK if self.ok else EXIT_ISSUES
