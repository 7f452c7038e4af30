"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, walk, and resolver")
    config.addinivalue_line("markers", "adapters: Filesystem adapter")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class RecordingExists:
    """Fake existence probe over a fixed set of paths.

    Records every probed path, in order, so tests can assert on the walk.
    """

    def __init__(self, existing: Iterable[str | Path]) -> None:
        self.existing = {str(p) for p in existing}
        self.probes: list[str] = []

    def __call__(self, path: str) -> bool:
        self.probes.append(path)
        return path in self.existing


@pytest.fixture
def fake_exists() -> Callable[..., RecordingExists]:
    """Factory for a recording existence probe.

    Usage:
        exists = fake_exists([tmp_path / "a.cfg"])
    """

    def _make(existing: Iterable[str | Path] = ()) -> RecordingExists:
        return RecordingExists(existing)

    return _make


@pytest.fixture
def project_tree(tmp_path: Path) -> dict[str, Path]:
    """Three-level directory tree with marker files at different levels.

    Layout:
        root/top.cfg
        root/shared.cfg
        root/mid/mid.cfg
        root/mid/shared.cfg
        root/mid/leaf/            (base directory, empty)
    """
    root = tmp_path / "root"
    mid = root / "mid"
    leaf = mid / "leaf"
    leaf.mkdir(parents=True)
    (root / "top.cfg").write_text("top")
    (root / "shared.cfg").write_text("root shared")
    (mid / "mid.cfg").write_text("mid")
    (mid / "shared.cfg").write_text("mid shared")
    return {"root": root, "mid": mid, "leaf": leaf}
