"""Upward directory walk and the mode strategies built on it.

Every strategy shares the same skeleton: start at an absolute base
directory, probe the fragments against it, then move to the parent
directory until the mode is satisfied or the filesystem root has been
probed. Strategies differ only in what they collect per level and when
they stop.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from parentpaths.core.models import Mode


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from parentpaths.core.ports import ExistsPredicate, Strategy


logger = logging.getLogger(__name__)


def join_fragment(level: str, fragment: str) -> str:
    """Join a fragment onto a directory and normalize it lexically.

    Symlinks are not resolved. An absolute fragment replaces the level.
    """
    return os.path.normpath(os.path.join(level, fragment))


def iter_levels(base_dir: str) -> Iterator[str]:
    """Yield base_dir and then each of its ancestors, ending with the root.

    The walk stops once a parent step returns the directory it started from,
    which is how the root of every drive identifies itself.

    Args:
        base_dir: Absolute directory to start from.

    Yields:
        Absolute directory paths, nearest first.
    """
    previous = None
    current = base_dir
    while previous != current:
        yield current
        previous = current
        current = os.path.dirname(current)


def first(paths: Sequence[str], base_dir: str, exists: ExistsPredicate) -> list[str]:
    """Resolve the first fragment found, scanning fragments in order per level.

    Returns:
        A single-element list, or an empty list if nothing matched up to root.
    """
    for level in iter_levels(base_dir):
        for fragment in paths:
            candidate = join_fragment(level, fragment)
            if exists(candidate):
                logger.debug("first: matched %s", candidate)
                return [candidate]
    return []


def some(paths: Sequence[str], base_dir: str, exists: ExistsPredicate) -> list[str]:
    """Resolve every fragment present at the nearest level with any match."""
    for level in iter_levels(base_dir):
        found = [
            candidate
            for candidate in (join_fragment(level, fragment) for fragment in paths)
            if exists(candidate)
        ]
        if found:
            logger.debug("some: %d of %d matched at %s", len(found), len(paths), level)
            return found
    return []


def all_(paths: Sequence[str], base_dir: str, exists: ExistsPredicate) -> list[str]:
    """Resolve the fragments at the nearest level where every one exists.

    Partial matches at a level are discarded; nothing carries over to the
    next level up.
    """
    for level in iter_levels(base_dir):
        found = []
        for fragment in paths:
            candidate = join_fragment(level, fragment)
            if exists(candidate):
                found.append(candidate)
        if len(found) == len(paths):
            logger.debug("all: every fragment matched at %s", level)
            return found
    return []


def each(
    paths: Sequence[str], base_dir: str, exists: ExistsPredicate
) -> list[str | None]:
    """Resolve each fragment independently at the nearest level containing it.

    A resolved slot is never probed again, so it keeps the nearest match
    even if an ancestor also contains the fragment.

    Returns:
        A list with one slot per fragment, None where unresolved.
    """
    out: list[str | None] = [None] * len(paths)
    remaining = len(paths)
    for level in iter_levels(base_dir):
        for i, fragment in enumerate(paths):
            if out[i] is not None:
                continue
            candidate = join_fragment(level, fragment)
            if exists(candidate):
                out[i] = candidate
                remaining -= 1
        if remaining == 0:
            break
    if remaining:
        logger.debug("each: %d of %d fragments unresolved", remaining, len(paths))
    return out


MODES: dict[Mode, Strategy] = {
    Mode.FIRST: first,
    Mode.SOME: some,
    Mode.ALL: all_,
    Mode.EACH: each,
}
