"""Conversion from UTC to the device's local timezone.

The conversion delegates to a "local calendar": a function mapping a UTC
instant, in epoch milliseconds, to local calendar fields. By default this is
host_calendar(), which asks the operating system via time.localtime() and so
depends on the host's configured timezone at call time. Results are NOT
portable across hosts with different timezone settings; callers needing a
specific zone should pass their own calendar function.

    local = to_local(ts)
    local = to_local(ts, calendar=my_fixed_offset_calendar)
"""

import logging
import math
import time
from collections.abc import Callable, Sequence
from typing import NamedTuple

from .formatters import TimestampFormatter
from .schema.types import Timestamp, normalize
from .template import TimestampTemplate, parse_pattern
from .utils import calendar as civil

logger = logging.getLogger(__name__)


class LocalFields(NamedTuple):
    """Local calendar fields for one instant, as reported by a local calendar."""

    year: int
    month: int
    day: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


LocalCalendar = Callable[[int], LocalFields]


def host_calendar(epoch_ms: int) -> LocalFields:
    """Look up local calendar fields for an instant using the host timezone.

    Args:
        epoch_ms: Milliseconds since 1970-01-01T00:00:00Z

    Returns:
        The host's local calendar fields for that instant

    Raises:
        OverflowError, OSError: If the platform cannot represent the instant
    """
    epoch_seconds, milliseconds = divmod(epoch_ms, civil.MILLISECONDS_PER_SECOND)
    local = time.localtime(epoch_seconds)
    return LocalFields(
        year=local.tm_year,
        month=local.tm_mon,
        day=local.tm_mday,
        hours=local.tm_hour,
        minutes=local.tm_min,
        # tm_sec may be 60 on hosts with leap second tables; normalize() carries it.
        seconds=local.tm_sec,
        milliseconds=milliseconds
    )


def to_local(ts: Timestamp, calendar: LocalCalendar = host_calendar) -> Timestamp:
    """Convert a UTC Timestamp to the equivalent local Timestamp.

    Sub-second precision is kept to the millisecond; anything finer is
    truncated, matching the resolution of the local calendar.

    Args:
        ts: Timestamp denominated in UTC
        calendar: Local calendar to consult (defaults to the host timezone)

    Returns:
        A normalized Timestamp denominated in the calendar's local time
    """
    whole_seconds = math.floor(ts.seconds)
    # Round away float noise (27.002 - 27 == 0.00199999...) before truncating.
    milliseconds = math.floor(
        round((ts.seconds - whole_seconds) * civil.MILLISECONDS_PER_SECOND, 6)
    )
    instant = civil.epoch_milliseconds(
        ts.year,
        ts.month,
        ts.day,
        ts.hours,
        ts.minutes,
        whole_seconds,
        milliseconds
    )
    local = calendar(instant)
    logger.debug("Localized instant %d to %s", instant, local)
    return normalize(
        Timestamp(
            year=local.year,
            month=local.month,
            day=local.day,
            hours=local.hours,
            minutes=local.minutes,
            seconds=local.seconds + local.milliseconds / civil.MILLISECONDS_PER_SECOND
        )
    )


class DeviceLocalTimestampTemplate(TimestampTemplate):
    """A TimestampTemplate that localizes its input before rendering."""

    __slots__ = ("_calendar",)

    def __init__(
        self,
        texts: Sequence[str],
        formatters: Sequence[TimestampFormatter],
        calendar: LocalCalendar | None = None
    ):
        super().__init__(texts, formatters)
        self._calendar = calendar

    @property
    def calendar(self) -> LocalCalendar | None:
        return self._calendar

    def __call__(self, ts: Timestamp) -> str:
        # host_calendar is resolved per call
        calendar = self._calendar or host_calendar
        return self.render(to_local(ts, calendar))


def device_local_timestamp_template(
    texts: Sequence[str],
    formatters: Sequence[TimestampFormatter],
    calendar: LocalCalendar | None = None
) -> DeviceLocalTimestampTemplate:
    """Construct a TimestampFormatter that converts to local time, then formats.

    The placeholders are called with the localized Timestamp.

    Raises:
        TemplateError: If len(texts) != len(formatters) + 1
    """
    return DeviceLocalTimestampTemplate(texts, formatters, calendar)


def compile_device_local_template(
    pattern: str,
    calendar: LocalCalendar | None = None
) -> DeviceLocalTimestampTemplate:
    """Pattern form of device_local_timestamp_template()."""
    texts, formatters = parse_pattern(pattern)
    return DeviceLocalTimestampTemplate(texts, formatters, calendar)
