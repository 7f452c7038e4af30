"""Port interfaces for parentpaths.

The walking core depends only on these contracts, never on a concrete
filesystem implementation.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence


ExistsPredicate = Callable[[str], bool]
"""Return True if an absolute path exists. Must not raise."""

Strategy = Callable[[Sequence[str], str, ExistsPredicate], list]
"""Mode strategy: (fragments, base_dir, exists) -> resolved paths."""
