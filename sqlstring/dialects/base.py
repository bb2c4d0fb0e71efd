"""Dialect abstraction: the SQLDialect base class.

The Template Method pattern (GoF) is used:
- ``SQLDialect`` implements every literal rule the way the generic
  (MySQL-style) dialect expects it.
- ``PostgresDialect`` and ``SQLiteDialect`` override only the steps where
  their syntax differs (string quoting, booleans, bytea, arrays, timestamps).

The value escaper in :mod:`sqlstring.literals` owns type dispatch and calls
back into the dialect for each of these decisions.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any

from sqlstring.errors import TimestampRangeError
from sqlstring.options import LOCAL, FieldHint
from sqlstring.timezone import convert_timezone

#: ``(item, field) -> literal`` callback used to escape list elements.
ItemBuilder = Callable[[Any, FieldHint | None], str]

_BACKSLASH_ESCAPE_RE = re.compile("[\x00\n\r\b\t\\\\'\"\x1a]")

_BACKSLASH_ESCAPES = {
    "\x00": "\\0",
    "\n": "\\n",
    "\r": "\\r",
    "\b": "\\b",
    "\t": "\\t",
    "\x1a": "\\Z",
}


def _backslash_escape(match: re.Match[str]) -> str:
    char = match.group()
    return _BACKSLASH_ESCAPES.get(char, "\\" + char)


def format_wall_clock(instant: datetime, millis: bool = False) -> str:
    """Render ``instant``'s wall-clock fields as ``YYYY-MM-DD HH:mm:ss[.SSS]``."""
    text = (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d} "
        f"{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"
    )
    if millis:
        text += f".{instant.microsecond // 1000:03d}"
    return text


class SQLDialect(ABC):
    """Base for dialect-specific literal rules.

    The default implementations produce MySQL-compatible literals; subclasses
    override the steps their engine spells differently.
    """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (e.g. ``'postgres'``)."""

    def format_boolean(self, value: bool) -> str:
        """Return the literal for a boolean."""
        return "true" if value else "false"

    def quote_string(self, text: str) -> str:
        """Escape ``text`` and wrap it in single quotes.

        Control characters, backslashes and both quote characters are
        backslash-escaped.
        """
        escaped = _BACKSLASH_ESCAPE_RE.sub(_backslash_escape, text)
        return f"'{escaped}'"

    def format_binary(self, hex_digits: str) -> str:
        """Return a binary literal from lowercase hex digits."""
        return f"X'{hex_digits}'"

    def format_timestamp(self, instant: datetime, time_zone: str) -> str:
        """Return a quoted timestamp literal with second precision.

        Args:
            instant: A timezone-aware datetime.
            time_zone: ``'local'`` to keep the local system offset; anything
                else normalises to UTC and then applies the parsed offset
                (when it parses).

        Returns:
            Quoted ``'YYYY-MM-DD HH:mm:ss'`` literal.

        Raises:
            TimestampRangeError: If the conversion leaves the supported
                datetime range (years 1 to 9999).
        """
        try:
            if time_zone == LOCAL:
                shifted = instant.astimezone()
            else:
                shifted = instant.astimezone(timezone.utc)
                offset = convert_timezone(time_zone)
                if offset is not None:
                    shifted += timedelta(minutes=offset)
        except (OverflowError, ValueError) as exc:
            raise TimestampRangeError(instant, time_zone) from exc
        return self.quote_string(format_wall_clock(shifted))

    def format_list(
        self,
        items: Sequence[Any],
        build_item: ItemBuilder,
        field: FieldHint | None = None,
    ) -> str:
        """Return a comma-separated value list.

        Nested lists and tuples become parenthesised groups, so
        ``[[1, 2], 3]`` renders as ``(1, 2), 3``.  ``field`` is not used by
        the generic rules.

        Args:
            items: The elements to render.
            build_item: Escapes a single element.
            field: Column hint (ignored here).

        Returns:
            The joined list body without surrounding brackets.
        """
        parts: list[str] = []
        for item in items:
            if isinstance(item, (list, tuple)):
                parts.append(f"({self.format_list(item, build_item)})")
            else:
                parts.append(build_item(item, None))
        return ", ".join(parts)
