"""Project root discovery for portable relative paths.

This example shows how to use find_project_root() to resolve paths
relative to the project root, regardless of where the script is run from.

The function searches upward for marker files in this order at each level:
1. pyproject.toml
2. setup.cfg
3. setup.py
4. .git
"""

from parentpaths import find_project_root


# Discover project root (works from any subdirectory)
project_root = find_project_root()
print(f"Project root: {project_root}")

# Custom markers, highest priority first
workspace = find_project_root(markers=(".workspace", ".git"))
print(f"Workspace root: {workspace}")
