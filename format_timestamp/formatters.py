"""Field formatters.

Each formatter renders one field of a Timestamp (or of any record exposing
that field) as a string fragment. Formatters are plain functions with no
state, so they can be stored, shared and combined freely with
template.timestamp_template().

Formatters assume normalized input. They do not validate ranges: feeding
hours=25 or month=13 is a caller error with unspecified output.
"""

import math
from collections.abc import Callable
from typing import Literal

from .schema.types import (
    HasDate,
    HasDay,
    HasHours,
    HasMinutes,
    HasMonth,
    HasSeconds,
    HasYear,
    Timestamp,
)
from .utils import calendar
from .utils.numeric import format_number, pad

TimestampFormatter = Callable[[Timestamp], str]
"""A function that formats a Timestamp, or part of one, as a string."""

MonthName = Literal[
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
DayOfWeek = Literal[
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
]
AmPm = Literal["AM", "PM"]

MONTH_NAMES: tuple[MonthName, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_OF_WEEK_NAMES: tuple[DayOfWeek, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)


def year(ts: HasYear) -> str:
    """Format the year as a numeric string."""
    return format_number(ts.year)


def short_year(ts: HasYear) -> str:
    """Format the year as a numeric string truncated to the last two digits."""
    return pad(ts.year % 100, 2)


def year4(ts: HasYear) -> str:
    """Format the year as a numeric string, zero-padded to at least four digits."""
    return pad(ts.year, 4)


def month(ts: HasMonth) -> str:
    """Format the month as a numeric string."""
    return format_number(ts.month)


def month2(ts: HasMonth) -> str:
    """Format the month as a 2-digit numeric string."""
    return pad(ts.month, 2)


def month_name(ts: HasMonth) -> MonthName:
    """Format the name of the month, e.g. "January"."""
    index = ts.month - 1
    # Negative indexes would wrap to the end of the table.
    if index < 0:
        raise IndexError(f"month out of range: {ts.month}")
    return MONTH_NAMES[index]


def day(ts: HasDay) -> str:
    """Format the day of the month as a numeric string."""
    return format_number(ts.day)


def day2(ts: HasDay) -> str:
    """Format the day of the month as a 2-digit numeric string."""
    return pad(ts.day, 2)


def day_of_week(ts: HasDate) -> DayOfWeek:
    """Format the name of the day of the week, e.g. "Monday"."""
    return DAY_OF_WEEK_NAMES[calendar.day_of_week(ts.year, ts.month, ts.day)]


def hours(ts: HasHours) -> str:
    """Format the hours as a 24-hour numeric string."""
    return format_number(ts.hours)


def hours2(ts: HasHours) -> str:
    """Format the hours as a 2-digit 24-hour numeric string."""
    return pad(ts.hours, 2)


def _hours_of_12(value: int) -> int:
    # 0 -> 12, 12 -> 12, 13 -> 1
    return (value + 11) % 12 + 1


def hours12(ts: HasHours) -> str:
    """Format the hours as a 12-hour numeric string."""
    return format_number(_hours_of_12(ts.hours))


def hours122(ts: HasHours) -> str:
    """Format the hours as a 2-digit 12-hour numeric string."""
    return pad(_hours_of_12(ts.hours), 2)


def am_pm(ts: HasHours) -> AmPm:
    """Return "AM" or "PM" depending on the hour. Midnight is AM, noon is PM."""
    return "AM" if ts.hours < 12 else "PM"


def minutes(ts: HasMinutes) -> str:
    """Format the minutes as a numeric string."""
    return format_number(ts.minutes)


def minutes2(ts: HasMinutes) -> str:
    """Format the minutes as a 2-digit numeric string."""
    return pad(ts.minutes, 2)


def seconds(ts: HasSeconds) -> str:
    """Format the seconds as a numeric string.

    Fractional seconds are not rounded, so this might produce a result
    similar to "2.234".
    """
    return format_number(ts.seconds)


def seconds2(ts: HasSeconds) -> str:
    """Format the seconds as a numeric string with at least two whole digits.

    Only the whole part is padded and fractional seconds are not rounded,
    so this might produce a result similar to "02.234".
    """
    whole, point, fraction = format_number(ts.seconds).partition(".")
    return whole.zfill(2) + point + fraction


def floor_seconds(ts: HasSeconds) -> str:
    """Round the seconds down and format the result as a numeric string."""
    return format_number(math.floor(ts.seconds))


def floor_seconds2(ts: HasSeconds) -> str:
    """Round the seconds down and format the result as a 2-digit numeric string."""
    return pad(math.floor(ts.seconds), 2)


def seconds_ms(ts: HasSeconds) -> str:
    """Round the seconds down to the millisecond and format as "SS.mmm"."""
    digits = pad(math.floor(ts.seconds * 1000), 5)
    return f"{digits[:2]}.{digits[2:]}"


FORMATTERS: dict[str, TimestampFormatter] = {
    "year": year,
    "short_year": short_year,
    "year4": year4,
    "month": month,
    "month2": month2,
    "month_name": month_name,
    "day": day,
    "day2": day2,
    "day_of_week": day_of_week,
    "hours": hours,
    "hours2": hours2,
    "hours12": hours12,
    "hours122": hours122,
    "am_pm": am_pm,
    "minutes": minutes,
    "minutes2": minutes2,
    "seconds": seconds,
    "seconds2": seconds2,
    "floor_seconds": floor_seconds,
    "floor_seconds2": floor_seconds2,
    "seconds_ms": seconds_ms,
}
