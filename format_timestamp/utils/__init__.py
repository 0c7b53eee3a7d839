"""Utility functions for format-timestamp.

This package provides centralized helpers shared by the formatters and the
local-time converter. Import convention: use module-level imports for clarity.

    from format_timestamp.utils import calendar, numeric
    days = calendar.days_from_civil(2021, 5, 1)
    text = numeric.format_number(2.234)
"""

from . import calendar, numeric

__all__ = ["calendar", "numeric"]
