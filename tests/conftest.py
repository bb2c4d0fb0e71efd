"""Shared pytest fixtures for sqlstring unit and integration tests."""
from __future__ import annotations

import time

import pytest

from sqlstring import SqlString


@pytest.fixture(scope="session")
def pg() -> SqlString:
    """PostgreSQL formatter with default options."""
    return SqlString(dialect="postgres")


@pytest.fixture(scope="session")
def sq() -> SqlString:
    """SQLite formatter with default options."""
    return SqlString(dialect="sqlite")


@pytest.fixture(scope="session")
def my() -> SqlString:
    """Generic (MySQL) formatter with default options."""
    return SqlString()


@pytest.fixture()
def local_tz(monkeypatch: pytest.MonkeyPatch):
    """Pin the process-local time zone to a POSIX ``TZ`` string.

    Usage: ``local_tz("TST-02")`` makes local time UTC+02:00.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
