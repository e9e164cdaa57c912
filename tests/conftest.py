"""Pytest configuration and fixtures for Caldate tests."""

from __future__ import annotations

import datetime
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so caldate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def fixed_clock():
    """A clock that always reports 2024-02-29 at 23:59."""

    def clock() -> datetime.datetime:
        return datetime.datetime(2024, 2, 29, 23, 59, 59)

    return clock
