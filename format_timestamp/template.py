"""Template composition.

A template interleaves literal text segments with formatters:

    texts[0] + formatters[0](ts) + texts[1] + ... + formatters[n-1](ts) + texts[n]

There is always exactly one more text segment than formatters. Templates are
built once and never mutated, so a composed template is itself a pure
TimestampFormatter and can be nested inside other templates.

Two construction styles are supported:

    # Explicit segments and formatters
    fmt = timestamp_template(["", ":", ""], [formatters.hours2, formatters.minutes2])

    # str.format-style pattern resolved against formatters.FORMATTERS
    fmt = compile_template("{hours2}:{minutes2}")
"""

import logging
from collections.abc import Sequence
from string import Formatter

from .exceptions import TemplateError
from .formatters import FORMATTERS, TimestampFormatter
from .schema.types import Timestamp

logger = logging.getLogger(__name__)


class TimestampTemplate:
    """A TimestampFormatter composed from text segments and formatters."""

    __slots__ = ("_texts", "_formatters")

    def __init__(
        self,
        texts: Sequence[str],
        formatters: Sequence[TimestampFormatter]
    ):
        """Initialize the template, checking its shape.

        Args:
            texts: Literal segments surrounding and separating the placeholders
            formatters: Formatters filling the placeholders, in output order

        Raises:
            TemplateError: If len(texts) != len(formatters) + 1, or if any
                           formatter is not callable
        """
        texts = tuple(texts)
        formatters = tuple(formatters)
        if len(texts) != len(formatters) + 1:
            raise TemplateError(
                "Template must have exactly one more text segment than formatters",
                details={"texts": len(texts), "formatters": len(formatters)}
            )
        for index, formatter in enumerate(formatters):
            if not callable(formatter):
                raise TemplateError(
                    "Template placeholder is not a formatter",
                    details={"index": index, "type": type(formatter).__name__}
                )
        self._texts = texts
        self._formatters = formatters
        logger.debug(
            "Built %s with %d text segments and %d formatters",
            type(self).__name__, len(texts), len(formatters)
        )

    @property
    def texts(self) -> tuple[str, ...]:
        return self._texts

    @property
    def formatters(self) -> tuple[TimestampFormatter, ...]:
        return self._formatters

    def render(self, ts: Timestamp) -> str:
        """Interleave the text segments with each formatter's output for ts."""
        parts = [self._texts[0]]
        for formatter, text in zip(self._formatters, self._texts[1:]):
            parts.append(formatter(ts))
            parts.append(text)
        return "".join(parts)

    def __call__(self, ts: Timestamp) -> str:
        return self.render(ts)

    def __repr__(self) -> str:
        names = [getattr(f, "__name__", repr(f)) for f in self._formatters]
        return f"{type(self).__name__}(texts={self._texts!r}, formatters={names!r})"


def parse_pattern(
    pattern: str
) -> tuple[list[str], list[TimestampFormatter]]:
    """Split a str.format-style pattern into text segments and formatters.

    Each replacement field must name a formatter in FORMATTERS, with no format
    spec or conversion. Literal braces are written as "{{" and "}}".

    Raises:
        TemplateError: If the pattern is malformed or names an unknown formatter
    """
    texts = []
    formatters = []
    pending = ""
    try:
        fields = list(Formatter().parse(pattern))
    except ValueError as e:
        raise TemplateError(
            f"Malformed template pattern: {e}",
            details={"pattern": pattern}
        ) from e

    for literal, name, spec, conversion in fields:
        pending += literal
        if name is None:
            continue
        if not name:
            raise TemplateError(
                "Template placeholder must name a formatter",
                details={"pattern": pattern}
            )
        if spec or conversion:
            raise TemplateError(
                "Template placeholders do not accept format specs or conversions",
                details={"pattern": pattern, "placeholder": name}
            )
        if name not in FORMATTERS:
            raise TemplateError(
                f"Unknown formatter: {name}",
                details={"pattern": pattern, "placeholder": name}
            )
        texts.append(pending)
        formatters.append(FORMATTERS[name])
        pending = ""

    texts.append(pending)
    return texts, formatters


def timestamp_template(
    texts: Sequence[str],
    formatters: Sequence[TimestampFormatter]
) -> TimestampTemplate:
    """Construct a TimestampFormatter from text segments and formatters.

    Example:
        fmt = timestamp_template(
            ["", ":", ":", " ", "/", "/", ""],
            [hours2, minutes2, seconds2, day2, month2, short_year]
        )
        text = fmt(ts)
    """
    return TimestampTemplate(texts, formatters)


def compile_template(pattern: str) -> TimestampTemplate:
    """Construct a TimestampFormatter from a pattern like "{year4}-{month2}"."""
    return TimestampTemplate(*parse_pattern(pattern))
