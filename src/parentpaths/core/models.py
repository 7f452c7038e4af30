"""Core domain models for parentpaths.

These models are pure Python value objects with no I/O dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Mode(StrEnum):
    """Matching and stopping policy for an upward search."""

    FIRST = "first"
    """Return the first fragment found at the nearest level."""

    SOME = "some"
    """Return every fragment found at the nearest level with any match."""

    ALL = "all"
    """Return the fragments only from a level where all of them exist."""

    EACH = "each"
    """Resolve every fragment independently at its own nearest level."""

    @classmethod
    def names(cls) -> list[str]:
        """Return the accepted mode names in declaration order."""
        return [m.value for m in cls]


DEFAULT_MODE = Mode.ALL


@dataclass(frozen=True, slots=True)
class ResolveOptions:
    """Options for resolve_parent_paths().

    Attributes:
        dir: Base directory to start the walk from. Relative values are
            resolved against the current working directory. If None, the
            working directory itself is used.
        mode: Matching mode. Defaults to Mode.ALL.

    Example:
        >>> opts = ResolveOptions(dir="src", mode=Mode.FIRST)
        >>> opts.mode
        <Mode.FIRST: 'first'>
    """

    dir: str | None = None
    mode: Mode = DEFAULT_MODE
