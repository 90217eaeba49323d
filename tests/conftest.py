"""Pytest configuration and fixtures for civilday tests."""

from __future__ import annotations

import datetime
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so civilday can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from civilday.units import timezone as tz_module  # noqa: E402

UTC = datetime.timezone.utc


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch):
    """Pin the current instant; returns a setter for the pinned value."""

    def freeze(instant: datetime.datetime) -> datetime.datetime:
        monkeypatch.setattr(tz_module, "now", lambda: instant)
        return instant

    freeze(datetime.datetime(2020, 4, 5, 2, 30, tzinfo=UTC))
    return freeze
