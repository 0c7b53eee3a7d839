"""Domain types for format-timestamp.

Timestamp is the value every formatter consumes. It is a frozen pydantic model
denominated in UTC, with year/month/day/hours/minutes as integers and seconds
as a real number that may carry sub-second precision.

Field-level protocols (HasYear, HasHours, ...) describe the narrow slice of a
Timestamp each formatter actually reads, so formatters work on any record that
exposes those attributes.

NORMALIZATION POLICY:
Constructing a Timestamp directly does not range-check fields. Use timestamp()
or normalize() to carry overflowed fields (month 13, seconds 60, ...) into
higher fields and obtain a canonical value.
"""

import math
import time
from datetime import datetime, UTC
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from ..utils import calendar


class HasYear(Protocol):
    @property
    def year(self) -> int: ...


class HasMonth(Protocol):
    @property
    def month(self) -> int: ...


class HasDay(Protocol):
    @property
    def day(self) -> int: ...


class HasDate(HasYear, HasMonth, HasDay, Protocol):
    pass


class HasHours(Protocol):
    @property
    def hours(self) -> int: ...


class HasMinutes(Protocol):
    @property
    def minutes(self) -> int: ...


class HasSeconds(Protocol):
    @property
    def seconds(self) -> float: ...


class HasTimestampFields(HasDate, HasHours, HasMinutes, HasSeconds, Protocol):
    pass


class Timestamp(BaseModel):
    """A calendar date and time of day, in UTC.

    Immutable: use model_copy(update=...) or normalize() to derive new values.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int
    hours: int = 0
    minutes: int = 0
    seconds: float = 0

    @classmethod
    def from_epoch_milliseconds(cls, epoch_ms: int) -> "Timestamp":
        """Create Timestamp from milliseconds since 1970-01-01T00:00:00Z."""
        days, ms_of_day = divmod(epoch_ms, calendar.SECONDS_PER_DAY * 1000)
        year, month, day = calendar.civil_from_days(days)
        seconds_of_day, ms = divmod(ms_of_day, 1000)
        hours, remainder = divmod(seconds_of_day, 3600)
        minutes, seconds = divmod(remainder, 60)
        return cls(
            year=year,
            month=month,
            day=day,
            hours=hours,
            minutes=minutes,
            seconds=seconds + ms / 1000
        )

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Timestamp":
        """Create Timestamp from datetime (naive datetimes are treated as UTC)."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        dt = dt.astimezone(UTC)
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hours=dt.hour,
            minutes=dt.minute,
            seconds=dt.second + dt.microsecond / 1_000_000
        )

    @classmethod
    def now(cls) -> "Timestamp":
        """Get the current UTC time, with millisecond precision."""
        return cls.from_epoch_milliseconds(time.time_ns() // 1_000_000)


def normalize(fields: HasTimestampFields) -> Timestamp:
    """Carry overflowed fields into higher fields and return a canonical Timestamp.

    Months carry into years first, then day/hours/minutes/seconds are combined
    into a single count of whole seconds and redistributed through the
    calendar. The fractional part of seconds is preserved unchanged.

    Args:
        fields: Any record exposing year, month, day, hours, minutes and
                seconds; year/month/day/hours/minutes must be integers

    Returns:
        A Timestamp with month in 1-12, day valid for its month, hours in
        0-23, minutes in 0-59 and 0 <= seconds < 60
    """
    month_index = fields.month - 1
    year = fields.year + month_index // 12
    month = month_index % 12 + 1

    whole_seconds = math.floor(fields.seconds)
    fraction = fields.seconds - whole_seconds

    days = calendar.days_from_civil(year, month, 1) + fields.day - 1
    total = ((days * 24 + fields.hours) * 60 + fields.minutes) * 60 + whole_seconds
    days, seconds_of_day = divmod(total, calendar.SECONDS_PER_DAY)
    hours, remainder = divmod(seconds_of_day, 3600)
    minutes, seconds = divmod(remainder, 60)
    year, month, day = calendar.civil_from_days(days)

    return Timestamp(
        year=year,
        month=month,
        day=day,
        hours=hours,
        minutes=minutes,
        seconds=seconds + fraction
    )


def timestamp(
    year: int,
    month: int,
    day: int,
    hours: int = 0,
    minutes: int = 0,
    seconds: float = 0
) -> Timestamp:
    """Construct a normalized Timestamp, defaulting the time of day to midnight."""
    return normalize(
        Timestamp(
            year=year,
            month=month,
            day=day,
            hours=hours,
            minutes=minutes,
            seconds=seconds
        )
    )
