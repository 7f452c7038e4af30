"""Output helpers for the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from parentpaths.core.formatting import slot_status, status_to_color
from parentpaths.core.walk import iter_levels, join_fragment


if TYPE_CHECKING:
    from collections.abc import Sequence


def _format_status_with_color(status: str) -> Text:
    """Format status string with color coding.

    Args:
        status: Status string ("found" or "missing")

    Returns:
        Rich Text object, green for "found" and red for "missing".
    """
    color = status_to_color(status)
    return Text(status, style=color) if color else Text(status)


def _format_lines(results: Sequence[str | None]) -> list[str]:
    """Render one output line per result, an empty line for unresolved slots."""
    return [r if r is not None else "" for r in results]


def _pair_results(
    fragments: Sequence[str],
    results: Sequence[str | None],
    base_dir: str,
    each_mode: bool,
) -> list[tuple[str, str | None]]:
    """Pair fragments with the paths they resolved to.

    In "each" mode slots line up with fragments by index. The other modes
    return matches from a single level, so the nearest level whose
    candidates cover every result is used to pair them back up.
    """
    if each_mode:
        return list(zip(fragments, results, strict=True))
    if not results:
        return [(fragment, None) for fragment in fragments]

    wanted = set(results)
    for level in iter_levels(base_dir):
        candidates = [join_fragment(level, fragment) for fragment in fragments]
        if wanted.issubset(candidates):
            return [
                (fragment, candidate if candidate in wanted else None)
                for fragment, candidate in zip(fragments, candidates, strict=True)
            ]
    return [(fragment, None) for fragment in fragments]


def _build_table(pairs: Sequence[tuple[str, str | None]]) -> Table:
    """Build a Rich table of fragment, resolved path and status."""
    table = Table()
    table.add_column("Fragment")
    table.add_column("Path")
    table.add_column("Status")
    for fragment, resolved in pairs:
        # Text cells skip markup parsing and path highlighting
        table.add_row(
            Text(fragment),
            Text(resolved or ""),
            _format_status_with_color(slot_status(resolved)),
        )
    return table
