"""Human-readable compile report."""

import sys
from typing import TextIO

from schema_compile.constants import (
    MSG_COMPILE_ERRORS_HEADER,
    MSG_ISSUES_HEADER,
    MSG_PROBLEMS_HEADER,
    MSG_SUCCESS_TEMPLATE,
)
from schema_compile.types import CompileReport


def format_report(report: CompileReport) -> list[str]:
    """Render a report as output lines.

    Problems and compile errors keep the order they were collected in.
    """
    if report.ok:
        return [MSG_SUCCESS_TEMPLATE.format(count=report.compiled)]

    lines = [MSG_ISSUES_HEADER]
    if report.problems:
        lines.extend(["", MSG_PROBLEMS_HEADER])
        lines.extend(
            f"- {problem.file} => {problem.message}"
            for problem in report.problems
        )
    if report.compile_errors:
        lines.extend(["", MSG_COMPILE_ERRORS_HEADER])
        lines.extend(
            f"- {error.file} ({error.identifier}) => {error.message}"
            for error in report.compile_errors
        )
    return lines


def print_report(report: CompileReport, stream: TextIO | None = None) -> int:
    """Print the report and return the exit code it maps to."""
    out = stream or sys.stdout
    for line in format_report(report):
        print(line, file=out)
    return report.exit_code
