"""Numeric-to-text helpers used by the field formatters.

This is the ONLY module that decides how numbers are spelled out. All
formatters should go through format_number() and pad() so that padding and
fractional rendering stay consistent.
"""

from decimal import Decimal


def format_number(value: float) -> str:
    """Render a number as plain decimal text.

    Integral values render without a fractional part ("30", not "30.0").
    Fractional values use the shortest text that round-trips to the same
    float, and are never rounded or written in exponent notation
    (2.234 -> "2.234", 1e-07 -> "0.0000001").
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def pad(value: float, width: int) -> str:
    """Zero-pad the decimal text of a value to at least width characters.

    Never truncates: pad(10000, 4) == "10000".
    """
    return format_number(value).zfill(width)
