"""Package entry point for ``python -m record_converter``.

Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it; this delegates straight to the CLI's main().
"""

from record_converter.cli import main

if __name__ == "__main__":
    main()
