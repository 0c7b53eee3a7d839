"""Format UTC timestamps as text.

Field formatters render one part of a Timestamp; templates combine them with
literal text; device-local templates convert to the host timezone first.

    from format_timestamp import timestamp, iso8601, compile_template
    ts = timestamp(year=2021, month=5, day=1, hours=11, minutes=58, seconds=27.239)
    iso8601(ts)                                   # "2021-05-01T11:58:27Z"
    compile_template("{hours122}:{minutes2} {am_pm}")(ts)   # "11:58 AM"
"""

from .exceptions import FormatTimestampError, TemplateError
from .formatters import (
    DAY_OF_WEEK_NAMES,
    FORMATTERS,
    MONTH_NAMES,
    AmPm,
    DayOfWeek,
    MonthName,
    TimestampFormatter,
    am_pm,
    day,
    day2,
    day_of_week,
    floor_seconds,
    floor_seconds2,
    hours,
    hours2,
    hours12,
    hours122,
    minutes,
    minutes2,
    month,
    month2,
    month_name,
    seconds,
    seconds2,
    seconds_ms,
    short_year,
    year,
    year4,
)
from .localtime import (
    DeviceLocalTimestampTemplate,
    LocalFields,
    compile_device_local_template,
    device_local_timestamp_template,
    host_calendar,
    to_local,
)
from .presets import PRESETS, device_local_iso8601, iso8601
from .schema.types import Timestamp, normalize, timestamp
from .template import TimestampTemplate, compile_template, timestamp_template

__all__ = [
    # Types
    "Timestamp",
    "TimestampFormatter",
    "TimestampTemplate",
    "DeviceLocalTimestampTemplate",
    "LocalFields",
    "MonthName",
    "DayOfWeek",
    "AmPm",
    "MONTH_NAMES",
    "DAY_OF_WEEK_NAMES",
    # Construction
    "timestamp",
    "normalize",
    # Field formatters
    "FORMATTERS",
    "year",
    "short_year",
    "year4",
    "month",
    "month2",
    "month_name",
    "day",
    "day2",
    "day_of_week",
    "hours",
    "hours2",
    "hours12",
    "hours122",
    "am_pm",
    "minutes",
    "minutes2",
    "seconds",
    "seconds2",
    "floor_seconds",
    "floor_seconds2",
    "seconds_ms",
    # Templates
    "timestamp_template",
    "compile_template",
    "device_local_timestamp_template",
    "compile_device_local_template",
    "to_local",
    "host_calendar",
    # Presets
    "PRESETS",
    "iso8601",
    "device_local_iso8601",
    # Exceptions
    "FormatTimestampError",
    "TemplateError",
]
