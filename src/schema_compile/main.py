"""Main CLI entry point for schema-compile.

Takes no arguments; behaviour is driven by the config file found relative
to the working directory.

Exit codes:
    0: every schema compiled
    1: missing/invalid config, no schema files, or an unexpected error
    2: schema problems or compile errors (details on stdout)
"""

import sys

from schema_compile.cli import CompileRunner
from schema_compile.constants import EXIT_FATAL
from schema_compile.exceptions import SchemaCompileError
from schema_compile.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with the report's status code."""
    try:
        exit_code = CompileRunner().run()
    except SchemaCompileError as e:
        logger.debug("Aborting run: %s", e)
        print(str(e), file=sys.stderr)
        sys.exit(EXIT_FATAL)
    except KeyboardInterrupt:
        print("Operation cancelled by user", file=sys.stderr)
        sys.exit(EXIT_FATAL)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
