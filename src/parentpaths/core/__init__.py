"""Core domain module for parentpaths.

This module contains the domain models, the upward walk and its mode
strategies. The walk reaches the filesystem only through an injected
existence predicate.
"""

from parentpaths.core.models import Mode, ResolveOptions
from parentpaths.core.ports import ExistsPredicate, Strategy


__all__ = [
    "ExistsPredicate",
    "Mode",
    "ResolveOptions",
    "Strategy",
]
