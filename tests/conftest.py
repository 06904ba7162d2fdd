"""Pytest configuration for test suite.

Ensures the project root is on ``sys.path`` so imports like
``import recency_cache`` resolve correctly regardless of the working
directory pytest chooses.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_syspath() -> None:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        # Prepend to prefer local sources over site-packages
        sys.path.insert(0, project_root_str)


_ensure_project_root_on_syspath()


class CountingLoader:
    """Loader that records every key it is asked for."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = []

    def __call__(self, key):
        self.calls.append(key)
        return self.fn(key)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counting_loader():
    """Factory for loaders with an observable call log."""
    return CountingLoader


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """Undo logger level changes made by tests."""
    package_logger = logging.getLogger("recency_cache")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
