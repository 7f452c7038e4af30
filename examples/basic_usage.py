"""Basic usage of resolve_parent_paths.

Run this from anywhere inside a project to see how each mode treats the
same set of fragments.
"""

from parentpaths import Mode, ResolveOptions, resolve_parent_paths


fragments = ["pyproject.toml", "README.md", ".env"]

for mode in Mode:
    result = resolve_parent_paths(fragments, ResolveOptions(mode=mode))
    print(f"{mode}: {result}")

# Options may also be a plain mapping
nearest = resolve_parent_paths(["pyproject.toml", "setup.py"], {"mode": "first"})
if nearest:
    print(f"Nearest project manifest: {nearest[0]}")
