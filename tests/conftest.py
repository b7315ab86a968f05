"""Pytest configuration and fixtures for Caldate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so caldate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from caldate import Date  # noqa: E402


@pytest.fixture
def may_seventh() -> Date:
    """Thursday, May 7, 2020."""
    return Date(7, 5, 2020)
