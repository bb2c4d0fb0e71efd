"""Custom exception hierarchy for sqlstring.

All public errors inherit from SqlStringError so callers can catch the base
class for any sqlstring-specific failure.
"""
from __future__ import annotations

from typing import Any


class SqlStringError(Exception):
    """Base exception for all sqlstring errors."""


class MissingParameterError(SqlStringError):
    """Raised when a named placeholder has no value in the parameter mapping.

    Args:
        marker: The full marker text found in the template (e.g. ``':id'``).
        name: The parameter name the marker refers to (e.g. ``'id'``).
    """

    def __init__(self, marker: str, name: str) -> None:
        super().__init__(
            f'Named parameter "{marker}" has no value in the given object.'
        )
        self.marker = marker
        self.name = name


class UnsupportedValueError(SqlStringError, TypeError):
    """Raised when a value matches no supported shape and cannot be stringified.

    Args:
        value: The offending value.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Cannot escape value of type '{type(value).__name__}' as an "
            "assignment list; pass stringify_objects=True to quote its text form."
        )
        self.value = value


class IdentifierTypeError(SqlStringError, TypeError):
    """Raised when an identifier is not a ``str``."""

    def __init__(self, name: Any) -> None:
        super().__init__(
            f"Identifier must be a str, got '{type(name).__name__}'."
        )
        self.name = name


class TimestampRangeError(SqlStringError, ValueError):
    """Raised when a timestamp leaves the representable datetime range.

    Converting to UTC or applying a time zone offset can push values near
    ``datetime.min`` / ``datetime.max`` past year 1 or year 9999.

    Args:
        value: The date or datetime being formatted.
        time_zone: The time zone specifier in effect, if any.
    """

    def __init__(self, value: Any, time_zone: str | None = None) -> None:
        super().__init__(
            f"Timestamp {value!r} is out of range after time zone conversion"
            f" ({time_zone or 'local'})."
        )
        self.value = value
        self.time_zone = time_zone
