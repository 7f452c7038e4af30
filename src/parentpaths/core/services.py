"""Resolver entry point for parentpaths.

resolve_parent_paths() validates its inputs, settles the base directory
and mode, and hands off to the matching walk strategy.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from parentpaths.adapters.filesystem import path_exists
from parentpaths.config import validate_options
from parentpaths.core.exceptions import InvalidArgumentError
from parentpaths.core.walk import MODES


if TYPE_CHECKING:
    from parentpaths.core.models import ResolveOptions
    from parentpaths.core.ports import ExistsPredicate


logger = logging.getLogger(__name__)


def _is_fragment_sequence(paths: Any) -> bool:
    return isinstance(paths, Sequence) and not isinstance(paths, (str, bytes, bytearray))


def _base_dir(directory: str | None) -> str:
    """Return the absolute walk start: directory against the cwd, or the cwd."""
    return os.path.abspath(directory) if directory else os.getcwd()


def resolve_parent_paths(
    paths: Sequence[str],
    options: ResolveOptions | Mapping[str, Any] | None = None,
    *,
    exists: ExistsPredicate | None = None,
) -> list[str] | list[str | None]:
    """Resolve path fragments by walking parent directories.

    Args:
        paths: Relative path fragments to search for, in priority order.
        options: A ResolveOptions or a mapping with optional "dir" (base
            directory, default: current working directory) and "mode"
            ("first", "some", "all" or "each", default: "all").
        exists: Existence probe. Defaults to path_exists().

    Returns:
        Absolute resolved paths. In "each" mode the list has one slot per
        fragment, holding None where the fragment was not found.
        Duplicate fragments are probed and reported once per occurrence, so
        repeating a fragment repeats its path in "some" and "all" results.

    Raises:
        InvalidArgumentError: If paths is not a sequence of strings.
        InvalidOptionError: If options are malformed.

    Example:
        >>> from parentpaths import resolve_parent_paths
        >>> paths = resolve_parent_paths(["pyproject.toml", "README.md"])
    """
    if not _is_fragment_sequence(paths):
        raise InvalidArgumentError(paths)
    # Empty input short-circuits before options are looked at
    if len(paths) == 0:
        return []
    if not all(isinstance(p, str) for p in paths):
        raise InvalidArgumentError(paths)

    opts = validate_options(options)
    base_dir = _base_dir(opts.dir)

    logger.debug(
        "Resolving %d fragment(s) from %s (mode=%s)", len(paths), base_dir, opts.mode
    )
    strategy = MODES[opts.mode]
    return strategy(paths, base_dir, exists if exists is not None else path_exists)
