"""Formatting utilities for resolution results."""

from __future__ import annotations


def slot_status(resolved: str | None) -> str:
    """Name the state of a result slot ("found" or "missing")."""
    return "found" if resolved is not None else "missing"


def status_to_color(status: str) -> str:
    """Map status string to color name.

    Args:
        status: Status string ("found" or "missing")

    Returns:
        Color name string:
        - "found" -> "green"
        - "missing" -> "red"
        - invalid -> empty string
    """
    color_map = {
        "found": "green",
        "missing": "red",
    }
    return color_map.get(status, "")
