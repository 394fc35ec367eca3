"""Module entrypoint for `python -m schema_compile`."""

from schema_compile.main import main

if __name__ == "__main__":
    main()
