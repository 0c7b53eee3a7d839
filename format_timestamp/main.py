"""Command line entry point.

    format-timestamp
    format-timestamp --template "{day_of_week}, {day} {month_name} {year4}"
    format-timestamp --local --at year=2021,month=5,day=1,hours=11,minutes=58
"""

import logging

import click
from pydantic import ValidationError

from .config import settings
from .exceptions import FormatTimestampError
from .localtime import DeviceLocalTimestampTemplate
from .presets import DEVICE_LOCAL_VARIANTS, PRESETS
from .schema.types import Timestamp, timestamp
from .template import TimestampTemplate, compile_template

logger = logging.getLogger(__name__)

_INTEGER_FIELDS = ("year", "month", "day", "hours", "minutes")
_REQUIRED_FIELDS = ("year", "month", "day")


def parse_fields(text: str) -> dict[str, float]:
    """Read comma-separated key=value timestamp fields.

    Example: "year=2021,month=5,day=1,hours=11,seconds=27.239"

    Raises:
        FormatTimestampError: If a field is unknown, repeated, missing or
                              not a number
    """
    fields = {}
    for item in filter(None, (part.strip() for part in text.split(","))):
        key, separator, value = item.partition("=")
        key = key.strip()
        if not separator:
            raise FormatTimestampError(
                f"Expected key=value, got: {item}", details={"field": item}
            )
        if key not in _INTEGER_FIELDS and key != "seconds":
            raise FormatTimestampError(
                f"Unknown timestamp field: {key}", details={"field": key}
            )
        if key in fields:
            raise FormatTimestampError(
                f"Timestamp field given twice: {key}", details={"field": key}
            )
        try:
            fields[key] = int(value) if key in _INTEGER_FIELDS else float(value)
        except ValueError as e:
            raise FormatTimestampError(
                f"Invalid value for {key}: {value.strip()}",
                details={"field": key, "value": value}
            ) from e

    missing = [key for key in _REQUIRED_FIELDS if key not in fields]
    if missing:
        raise FormatTimestampError(
            f"Missing timestamp fields: {', '.join(missing)}",
            details={"missing": missing}
        )
    return fields


def resolve_template(name: str, local: bool) -> TimestampTemplate:
    """Look up a preset by name, or compile name as a pattern.

    With local=True the result always localizes its input first; UTC presets
    are swapped for their device-local variant.
    """
    if local:
        name = DEVICE_LOCAL_VARIANTS.get(name, name)
    template = PRESETS.get(name) or compile_template(name)
    if local and not isinstance(template, DeviceLocalTimestampTemplate):
        template = DeviceLocalTimestampTemplate(template.texts, template.formatters)
    return template


@click.command()
@click.option(
    "--template", "-t", "template_name",
    default=lambda: settings.default_template,
    show_default="iso8601",
    help="Preset name (iso8601, device-local-iso8601) or a pattern such as "
         "'{year4}-{month2}-{day2}'.",
)
@click.option(
    "--local/--utc",
    default=lambda: settings.local,
    help="Convert to the device's local timezone before formatting.",
)
@click.option(
    "--at", "at",
    default=None,
    metavar="FIELDS",
    help="Timestamp fields to format, e.g. 'year=2021,month=5,day=1,hours=11'. "
         "Defaults to the current time.",
)
@click.option(
    "--log-level",
    default=lambda: settings.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level.",
)
def cli(template_name: str, local: bool, at: str | None, log_level: str) -> None:
    """Format a UTC timestamp as text."""
    logging.basicConfig(level=log_level.upper(), format=settings.log_format)

    try:
        template = resolve_template(template_name, local)
        ts = timestamp(**parse_fields(at)) if at is not None else Timestamp.now()
    except FormatTimestampError as e:
        raise click.UsageError(e.message) from e
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    logger.info("Formatting %s with %r", ts, template)
    click.echo(template(ts))


if __name__ == "__main__":
    cli()
