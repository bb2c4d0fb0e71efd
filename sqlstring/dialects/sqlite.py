"""SQLite dialect."""
from __future__ import annotations

from sqlstring.dialects.base import SQLDialect


class SQLiteDialect(SQLDialect):
    """SQLite-flavoured literal rules.

    SQLite has no boolean literals; ``true``/``false`` are written as ``1``
    and ``0``.  Backslash has no special meaning inside SQLite strings, so
    only single quotes are escaped (by doubling).
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def format_boolean(self, value: bool) -> str:
        return "1" if value else "0"

    def quote_string(self, text: str) -> str:
        escaped = text.replace("'", "''")
        return f"'{escaped}'"
