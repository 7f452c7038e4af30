"""Shared fixtures for integration tests."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def run_cli() -> Callable[..., subprocess.CompletedProcess[str]]:
    """Run the CLI in a child interpreter and capture its streams."""

    def _run(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            [sys.executable, "-m", "parentpaths", *args],
            capture_output=True,
            text=True,
            cwd=cwd,
            check=False,
        )

    return _run
