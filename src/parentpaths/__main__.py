"""Allow running the CLI as ``python -m parentpaths``."""

from parentpaths.cli import main


main()
