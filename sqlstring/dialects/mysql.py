"""MySQL (generic) dialect."""

from __future__ import annotations

from sqlstring.dialects.base import SQLDialect


class MySQLDialect(SQLDialect):
    """Generic, MySQL-flavoured literal rules.

    Strings are backslash-escaped, booleans are ``true``/``false``, binary
    values use ``X'..'`` hex literals and timestamps carry no offset suffix.

    This is also the fallback for any dialect name that is not registered.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"
