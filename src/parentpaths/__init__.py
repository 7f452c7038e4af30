"""parentpaths - Resolve path fragments by walking parent directories.

This library finds files such as project manifests when the caller does
not know how many directory levels lie between the current location and
the file.

Example:
    >>> from parentpaths import resolve_parent_paths
    >>> resolve_parent_paths(["pyproject.toml", ".git"], {"mode": "each"})
    ['/home/me/project/pyproject.toml', '/home/me/project/.git']
"""

from parentpaths.adapters.filesystem import path_exists
from parentpaths.config import find_project_root, validate_options
from parentpaths.core.exceptions import (
    InvalidArgumentError,
    InvalidOptionError,
    ParentPathsError,
)
from parentpaths.core.models import Mode, ResolveOptions
from parentpaths.core.services import resolve_parent_paths


__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "InvalidOptionError",
    "Mode",
    "ParentPathsError",
    "ResolveOptions",
    "__version__",
    "find_project_root",
    "path_exists",
    "resolve_parent_paths",
    "validate_options",
]
