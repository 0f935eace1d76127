"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory creating a file with given content size and modification time."""

    def _make(path: Path, size: int = 0, mtime: float | None = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def log_dir(tmp_path: Path, make_file: Callable[..., Path]) -> Path:
    """Directory with three .log files of distinct modification times.

    old.log is oldest, mid.log in between, new.log newest. A .txt file
    is present to check that patterns filter by extension.
    """
    base = tmp_path / "x"
    make_file(base / "old.log", size=10, mtime=1_000_000)
    make_file(base / "mid.log", size=20, mtime=2_000_000)
    make_file(base / "new.log", size=30, mtime=3_000_000)
    make_file(base / "notes.txt", size=5, mtime=4_000_000)
    return base
