"""Custom exceptions for format-timestamp."""


class FormatTimestampError(Exception):
    """Base exception for all format-timestamp errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TemplateError(FormatTimestampError):
    """Template could not be built from the given segments and formatters.

    Raised at construction time, never while formatting.
    """
