"""Top-level package for schema-compile.

Discovers JSON Schema files, registers them by `$id` and checks that each
one compiles with every `$ref` resolved.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("schema-compile")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
