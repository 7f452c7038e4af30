"""Command-line interface for parentpaths."""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console

from parentpaths.core.exceptions import ParentPathsError


app = typer.Typer(
    name="resolve-parent-paths",
    help="Resolve path fragments by walking parent directories.",
    add_completion=False,
    # Plain Click help so it can be routed to stderr
    rich_markup_mode=None,
)


def _help_callback(ctx: typer.Context, value: bool) -> None:
    """Print usage to stderr and exit."""
    if value and not ctx.resilient_parsing:
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit()


def _version_callback(value: bool) -> None:
    """Print the package version to stderr and exit."""
    if value:
        from parentpaths import __version__

        typer.echo(__version__, err=True)
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command(add_help_option=False)
def resolve(
    paths: list[str] = typer.Argument(
        ...,
        help="Path fragments to resolve, in priority order.",
        show_default=False,
    ),
    directory: str | None = typer.Option(
        None,
        "--dir",
        help="Base directory. Defaults to the current working directory.",
    ),
    mode: str | None = typer.Option(
        None,
        "--mode",
        help="Mode of operation: first, some, all or each. Defaults to all.",
    ),
    table: bool = typer.Option(
        False,
        "--table",
        help="Show a table of fragments, resolved paths and status.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each resolution step to stderr.",
    ),
    help_: bool | None = typer.Option(
        None,
        "--help",
        "-h",
        help="Show this message and exit.",
        callback=_help_callback,
        is_eager=True,
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Print the package version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Resolve PATHS by walking parent directories from a base directory.

    Prints one resolved path per line. In "each" mode there is one line per
    fragment, left empty where the fragment was not found.
    """
    from parentpaths.cli.formatting import _build_table, _format_lines, _pair_results
    from parentpaths.core.models import Mode
    from parentpaths.core.services import _base_dir, resolve_parent_paths

    _configure_logging(verbose)

    options = {"dir": directory, "mode": mode}
    try:
        results = resolve_parent_paths(paths, options)
        base_dir = _base_dir(directory)
    except ParentPathsError as e:
        typer.echo(f"Error: {e}", err=True)
        if e.recovery_hint:
            typer.echo(f"Hint: {e.recovery_hint}", err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if table:
        pairs = _pair_results(paths, results, base_dir, each_mode=mode == Mode.EACH)
        console = Console(force_terminal=True)
        console.print(_build_table(pairs))
        return

    for line in _format_lines(results):
        typer.echo(line)


def main() -> None:
    """Entry point for the CLI."""
    app()
