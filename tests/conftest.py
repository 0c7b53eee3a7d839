"""Shared test fixtures for format-timestamp."""

import time

import pytest

from format_timestamp.localtime import LocalFields
from format_timestamp.schema.types import Timestamp, timestamp
from format_timestamp.utils import calendar


def fixed_offset_calendar(offset_minutes: int):
    """Build a local calendar for a fixed UTC offset, ignoring the host timezone."""
    def local_calendar(epoch_ms: int) -> LocalFields:
        shifted = epoch_ms + offset_minutes * 60 * 1000
        days, ms_of_day = divmod(shifted, calendar.SECONDS_PER_DAY * 1000)
        year, month, day = calendar.civil_from_days(days)
        seconds_of_day, milliseconds = divmod(ms_of_day, 1000)
        hours, remainder = divmod(seconds_of_day, 3600)
        minutes, seconds = divmod(remainder, 60)
        return LocalFields(year, month, day, hours, minutes, seconds, milliseconds)

    return local_calendar


@pytest.fixture
def offset_calendar():
    """Factory for fixed-offset local calendars: offset_calendar(minutes)."""
    return fixed_offset_calendar


@pytest.fixture
def utc_plus_calendar():
    """Local calendar fixed at UTC+05:30."""
    return fixed_offset_calendar(5 * 60 + 30)


@pytest.fixture
def utc_minus_calendar():
    """Local calendar fixed at UTC-08:00."""
    return fixed_offset_calendar(-8 * 60)


@pytest.fixture
def sample_timestamp() -> Timestamp:
    """2021-05-01T11:58:27.239Z (a Saturday)."""
    return timestamp(year=2021, month=5, day=1, hours=11, minutes=58, seconds=27.239)


@pytest.fixture
def host_timezone(monkeypatch):
    """Set the host timezone for the duration of a test.

    Usage: host_timezone("IST-5:30"). Uses POSIX TZ strings so no tz database
    is required. Skipped where time.tzset() is unavailable.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() not available on this platform")

    def set_timezone(tz: str):
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield set_timezone

    # Restore TZ now so tzset() picks up the original value
    monkeypatch.undo()
    time.tzset()
