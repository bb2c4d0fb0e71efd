"""Time zone helpers shared by the timestamp formatters."""
from __future__ import annotations

import re
from datetime import date, datetime, time

from sqlstring.errors import TimestampRangeError
from sqlstring.options import UTC

_OFFSET_RE = re.compile(r"([+\- ])(\d\d):?(\d\d)?")


def convert_timezone(time_zone: str) -> int | None:
    """Parse a time zone specifier into an offset from UTC in minutes.

    ``'Z'`` is UTC.  Offsets look like ``'+05:30'``, ``'-0800'`` or ``'+02'``;
    a leading space counts as ``+`` (a URL-decoded plus sign).

    Args:
        time_zone: The specifier to parse.

    Returns:
        Signed minutes east of UTC, or ``None`` when the specifier is not
        recognised (callers then apply no offset).
    """
    if time_zone == UTC:
        return 0

    match = _OFFSET_RE.search(time_zone)
    if match is None:
        return None
    sign = -1 if match.group(1) == "-" else 1
    hours = int(match.group(2))
    minutes = int(match.group(3)) if match.group(3) else 0
    return sign * (hours * 60 + minutes)


def as_aware(instant: date) -> datetime:
    """Return ``instant`` as a timezone-aware datetime.

    Naive datetimes are read as local wall-clock time and plain dates as
    local midnight, matching :meth:`datetime.astimezone`.

    Raises:
        TimestampRangeError: If attaching the local offset leaves the
            supported datetime range.
    """
    if not isinstance(instant, datetime):
        instant = datetime.combine(instant, time())
    if instant.tzinfo is None:
        try:
            return instant.astimezone()
        except (OverflowError, ValueError) as exc:
            raise TimestampRangeError(instant) from exc
    return instant
