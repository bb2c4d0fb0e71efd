"""sqlstring – dialect-aware SQL literal escaping and placeholder formatting.

Public API
----------
``escape``
    Convert a Python value to a SQL literal.

``escape_id``
    Quote a (optionally dotted) identifier with backticks.

``format`` / ``format_named_parameters``
    Substitute ``?`` or ``:name`` placeholders with escaped values.

``array_to_list``, ``object_to_values``, ``date_to_string``,
``buffer_to_string``
    The per-type formatters ``escape`` delegates to.

``SqlString``
    Binds a ``FormatOptions`` once and exposes every operation above.

Extensibility
-------------
New dialects can be registered via::

    from sqlstring.dialects import DialectFactory, SQLDialect

    @DialectFactory.register("mssql")
    class MSSQLDialect(SQLDialect):
        ...

After registration, every function accepting ``dialect="mssql"`` picks it up.
"""

from __future__ import annotations

from sqlstring.dialects import (
    DialectFactory,
    MySQLDialect,
    PostgresDialect,
    SQLDialect,
    SQLiteDialect,
)
from sqlstring.errors import (
    IdentifierTypeError,
    MissingParameterError,
    SqlStringError,
    TimestampRangeError,
    UnsupportedValueError,
)
from sqlstring.formatter import SqlString
from sqlstring.identifier import escape_id
from sqlstring.literals import array_to_list, buffer_to_string, escape, object_to_values
from sqlstring.options import LOCAL, UTC, FieldHint, FormatOptions
from sqlstring.template import format, format_named_parameters
from sqlstring.timestamp import date_to_string
from sqlstring.timezone import convert_timezone

__all__ = [
    # Escaping
    "escape",
    "escape_id",
    "array_to_list",
    "object_to_values",
    "date_to_string",
    "buffer_to_string",
    "convert_timezone",
    # Templates
    "format",
    "format_named_parameters",
    # Configuration
    "SqlString",
    "FormatOptions",
    "FieldHint",
    "UTC",
    "LOCAL",
    # Dialects
    "DialectFactory",
    "SQLDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    # Errors
    "SqlStringError",
    "MissingParameterError",
    "UnsupportedValueError",
    "IdentifierTypeError",
    "TimestampRangeError",
]
