"""CLI for parentpaths."""

from parentpaths.cli.main import app, main


__all__ = ["app", "main"]
