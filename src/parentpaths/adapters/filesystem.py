"""Filesystem adapter implementing the existence probe."""

from __future__ import annotations

import os


def path_exists(path: str) -> bool:
    """Check whether path exists, following symlinks.

    Any failure to stat the path (permission denied, a name too long,
    an embedded NUL) reads as "does not exist", so an unreadable directory
    never aborts a walk.

    Args:
        path: Absolute path to probe.

    Returns:
        True if the path exists and could be stat'ed.
    """
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True
