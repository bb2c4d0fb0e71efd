"""Timestamp literal formatting."""
from __future__ import annotations

from datetime import date

from sqlstring.dialects import DialectFactory, SQLDialect
from sqlstring.options import UTC
from sqlstring.timezone import as_aware


def date_to_string(
    instant: date,
    time_zone: str | None = UTC,
    dialect: SQLDialect | str | None = None,
) -> str:
    """Format a date or datetime as a quoted timestamp literal.

    PostgreSQL always receives ``'YYYY-MM-DD HH:mm:ss.SSS +00:00'`` in UTC.
    Other dialects receive ``'YYYY-MM-DD HH:mm:ss'``: in local time when
    ``time_zone`` is ``'local'``, otherwise in UTC shifted by the offset
    ``time_zone`` describes (``'Z'``, ``'+05:30'``, ``'-08'`` ...).

    Naive datetimes are read as local time; plain dates as local midnight.

    Args:
        instant: The value to format.
        time_zone: Target time zone specifier; ``None`` means UTC.
        dialect: Dialect name or instance.

    Returns:
        The quoted literal.

    Raises:
        TimestampRangeError: If the conversion leaves years 1 to 9999.
    """
    sql_dialect = DialectFactory.resolve(dialect)
    return sql_dialect.format_timestamp(as_aware(instant), time_zone or UTC)
