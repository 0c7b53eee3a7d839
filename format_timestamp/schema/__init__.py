"""Schema module for format-timestamp.

This module provides the Timestamp value type consumed by every formatter.
"""

from . import types

__all__ = ["types"]
