# tests/conftest.py

from __future__ import annotations

import pytest

from tasktrace.manager import TaskSession

from .fakes import FakeClock


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def session(clock: FakeClock) -> TaskSession:
    """Fresh session whose log timestamps come from the fake clock."""
    return TaskSession(clock=clock)
