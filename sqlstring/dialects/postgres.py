"""PostgreSQL dialect."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from sqlstring.dialects.base import ItemBuilder, SQLDialect, format_wall_clock
from sqlstring.errors import TimestampRangeError
from sqlstring.options import FieldHint


class PostgresDialect(SQLDialect):
    """PostgreSQL-flavoured literal rules.

    Strings follow standard SQL quoting (``'`` doubled, no backslash
    escapes), binary values use the bytea hex format, lists become
    ``ARRAY[...]`` constructors and timestamps are always written in UTC
    with an explicit offset.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def quote_string(self, text: str) -> str:
        escaped = text.replace("'", "''")
        return f"'{escaped}'"

    def format_binary(self, hex_digits: str) -> str:
        return f"E'\\\\x{hex_digits}'"

    def format_timestamp(self, instant: datetime, time_zone: str) -> str:
        """Return ``'YYYY-MM-DD HH:mm:ss.SSS +00:00'``.

        ``time_zone`` is ignored: the value is always normalised to UTC and
        the offset is spelled out, so the server never has to guess.

        Raises:
            TimestampRangeError: If the UTC value falls outside years 1 to 9999.
        """
        try:
            utc = instant.astimezone(timezone.utc)
        except (OverflowError, ValueError) as exc:
            raise TimestampRangeError(instant, time_zone) from exc
        return self.quote_string(f"{format_wall_clock(utc, millis=True)} +00:00")

    def format_list(
        self,
        items: Sequence[Any],
        build_item: ItemBuilder,
        field: FieldHint | None = None,
    ) -> str:
        """Return an ``ARRAY[...]`` constructor.

        Elements are joined without spaces.  When ``field`` declares a type
        the array gets an explicit cast with size suffixes dropped, e.g.
        ``ARRAY['a']::VARCHAR[]`` for ``VARCHAR(255)[]``.
        """
        body = ",".join(build_item(item, field) for item in items)
        literal = f"ARRAY[{body}]"
        cast_type = field.cast_type() if field is not None else None
        if cast_type:
            literal += f"::{cast_type}"
        return literal
