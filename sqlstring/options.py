"""Pydantic models for formatting options.

``FormatOptions`` bundles the settings every escaping call needs (object
stringification, time zone, dialect, field hint) into one validated,
immutable object.  Build it once and hand it to
:class:`~sqlstring.formatter.SqlString`::

    from sqlstring import FormatOptions, SqlString

    pg = SqlString(FormatOptions(dialect="postgres"))
    pg.format("SELECT * FROM t WHERE tags = ?", [["a", "b"]])
    # "SELECT * FROM t WHERE tags = ARRAY['a','b']"
"""
from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

#: Time zone sentinel meaning "normalise to UTC".
UTC = "Z"

#: Time zone sentinel meaning "format in the local system offset, no shift".
LOCAL = "local"

_SIZE_SUFFIX_RE = re.compile(r"\(\d+\)")


class FieldHint(BaseModel):
    """Metadata about the column a value is written to.

    Only the PostgreSQL array formatter reads it, to append an explicit
    ``::type`` cast to ``ARRAY[...]`` literals.

    Attributes:
        type: Declared SQL type of the column (e.g. ``'VARCHAR(255)[]'``).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str | None = None

    def cast_type(self) -> str | None:
        """Return the declared type with any ``(size)`` suffixes removed."""
        if not self.type:
            return None
        return _SIZE_SUFFIX_RE.sub("", self.type)


class FormatOptions(BaseModel):
    """Settings shared by every escaping and formatting call.

    Attributes:
        stringify_objects: Quote mappings and plain objects as text instead
            of expanding them into a ``key = value`` assignment list.
        time_zone: ``'Z'`` (UTC), ``'local'``, or an offset such as
            ``'+05:30'``.  ``None`` means UTC.
        dialect: Target dialect name.  Unknown names fall back to the
            generic (MySQL-style) dialect.
        field: Optional column hint used by the PostgreSQL array formatter.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    stringify_objects: bool = False
    time_zone: str | None = None
    dialect: str | None = None
    field: FieldHint | None = Field(default=None)
