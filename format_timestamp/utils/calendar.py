"""Proleptic Gregorian calendar arithmetic.

This module centralizes all conversions between calendar dates and day
counts. Day counts are relative to 1970-01-01 so they line up with Unix epoch
instants. All functions use integer arithmetic only, which keeps them exact
for years of any magnitude (including years beyond 9999, which the standard
library's datetime cannot represent).
"""

SECONDS_PER_DAY = 86400
MILLISECONDS_PER_SECOND = 1000

# Days between 0000-03-01 and 1970-01-01.
_EPOCH_OFFSET = 719468
_DAYS_PER_ERA = 146097


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a calendar date to the number of days since 1970-01-01.

    Args:
        year: Any year, including zero and negative years
        month: Month of the year, 1-12
        day: Day of the month, 1-31

    Returns:
        Signed day count; 0 for 1970-01-01
    """
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_OFFSET


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert a day count since 1970-01-01 to a (year, month, day) tuple."""
    days += _EPOCH_OFFSET
    era = days // _DAYS_PER_ERA
    day_of_era = days - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + (3 if shifted_month < 10 else -9)
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the weekday of a date, 0 for Sunday through 6 for Saturday."""
    # 1970-01-01 was a Thursday.
    return (days_from_civil(year, month, day) + 4) % 7


def epoch_milliseconds(
    year: int,
    month: int,
    day: int,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    milliseconds: int = 0
) -> int:
    """Convert UTC calendar fields to milliseconds since the Unix epoch.

    Fields are not range-checked; overflowing values simply carry into the
    result (e.g. hours=24 is the next day at midnight).
    """
    days = days_from_civil(year, month, day)
    total_seconds = ((days * 24 + hours) * 60 + minutes) * 60 + seconds
    return total_seconds * MILLISECONDS_PER_SECOND + milliseconds
