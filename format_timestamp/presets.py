"""Ready-made templates."""

from .formatters import (
    day2,
    floor_seconds2,
    hours2,
    minutes2,
    month2,
    year4,
)
from .localtime import DeviceLocalTimestampTemplate, device_local_timestamp_template
from .template import TimestampTemplate, timestamp_template

iso8601: TimestampTemplate = timestamp_template(
    ["", "-", "-", "T", ":", ":", "Z"],
    [year4, month2, day2, hours2, minutes2, floor_seconds2]
)
"""Format as ISO 8601 extended, rounded down to the second, e.g. "2021-05-01T11:57:23Z"."""

device_local_iso8601: DeviceLocalTimestampTemplate = device_local_timestamp_template(
    ["", "-", "-", "T", ":", ":", ""],
    [year4, month2, day2, hours2, minutes2, floor_seconds2]
)
"""Convert to the device's local timezone, then format as ISO 8601 extended
rounded down to the second, with no zone designator, e.g. "2021-05-01T11:57:23"."""

PRESETS: dict[str, TimestampTemplate] = {
    "iso8601": iso8601,
    "device-local-iso8601": device_local_iso8601,
}

# UTC preset name -> preset rendering the same fields in device-local time
DEVICE_LOCAL_VARIANTS: dict[str, str] = {
    "iso8601": "device-local-iso8601",
}
