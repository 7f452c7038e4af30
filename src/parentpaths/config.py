"""Configuration utilities for parentpaths.

This module validates resolution options and provides project root
discovery built on the upward walk.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from parentpaths.core.exceptions import InvalidOptionError
from parentpaths.core.models import DEFAULT_MODE, Mode, ResolveOptions


# Checked in this order at every level
DEFAULT_MARKERS = ("pyproject.toml", "setup.cfg", "setup.py", ".git")


def _validate_dir(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if not isinstance(value, str):
        msg = f"invalid option. `dir` option must be a string. Option: `{value!r}`."
        raise InvalidOptionError(msg, option="dir", value=value)
    return value


def _validate_mode(value: Any) -> Mode:
    if value is None:
        return DEFAULT_MODE
    if not isinstance(value, str):
        msg = f"invalid option. `mode` option must be a string. Option: `{value!r}`."
        raise InvalidOptionError(msg, option="mode", value=value, choices=Mode.names())
    try:
        return Mode(value)
    except ValueError:
        msg = (
            f"invalid option. `mode` option must be one of the following: "
            f"\"{', '.join(Mode.names())}\". Option: `{value}`."
        )
        raise InvalidOptionError(
            msg, option="mode", value=value, choices=Mode.names()
        ) from None


def validate_options(options: ResolveOptions | Mapping[str, Any] | None) -> ResolveOptions:
    """Validate caller-supplied options and fill in defaults.

    Args:
        options: A ResolveOptions, a mapping with optional "dir" and "mode"
            keys (other keys are ignored), or None.

    Returns:
        A fully populated ResolveOptions.

    Raises:
        InvalidOptionError: If options is not a ResolveOptions or mapping,
            or if "dir" or "mode" has the wrong type or value.

    Example:
        >>> validate_options({"mode": "first"}).mode
        <Mode.FIRST: 'first'>
    """
    if options is None:
        return ResolveOptions()
    if isinstance(options, ResolveOptions):
        raw_dir, raw_mode = options.dir, options.mode
    elif isinstance(options, Mapping):
        raw_dir, raw_mode = options.get("dir"), options.get("mode")
    else:
        msg = f"invalid argument. Options argument must be an object. Value: `{options!r}`."
        raise InvalidOptionError(msg, value=options)

    return ResolveOptions(dir=_validate_dir(raw_dir), mode=_validate_mode(raw_mode))


def find_project_root(
    start: Path | None = None,
    markers: tuple[str, ...] = DEFAULT_MARKERS,
) -> Path:
    """Find the project root directory by walking up from start directory.

    At each level, markers are checked in the given order; the nearest level
    holding any marker wins.

    Args:
        start: Directory to start searching from. If None, uses current directory.
        markers: Marker paths relative to each level, highest priority first.
            Nested markers such as ".config/app.toml" are allowed; the root is
            the directory the marker was joined to, not the marker's parent.

    Returns:
        Path to project root directory. Returns start directory if no markers found.

    Example:
        >>> from parentpaths.config import find_project_root
        >>> root = find_project_root()
        >>> manifest = root / "pyproject.toml"
    """
    from parentpaths.core.services import resolve_parent_paths
    from parentpaths.core.walk import iter_levels, join_fragment

    start = (start if start is not None else Path.cwd()).resolve()
    found = resolve_parent_paths(list(markers), ResolveOptions(dir=str(start), mode=Mode.FIRST))
    if not found:
        return start

    # Markers may be nested (".config/app.toml") or climb ("../x"); the root is
    # the level the matching marker was joined to.
    for level in iter_levels(str(start)):
        if any(join_fragment(level, marker) == found[0] for marker in markers):
            return Path(level)
    return start
