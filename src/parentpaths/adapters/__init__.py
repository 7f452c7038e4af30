"""Adapters binding the core ports to the host environment."""

from parentpaths.adapters.filesystem import path_exists


__all__ = ["path_exists"]
