"""Bound formatter: one set of options, every operation.

``SqlString`` holds a validated :class:`~sqlstring.options.FormatOptions`
and forwards it to the module-level functions, so callers configure the
dialect and time zone once instead of threading them through every call::

    sq = SqlString(dialect="sqlite", time_zone="+02:00")
    sq.format("INSERT INTO t VALUES (?, ?)", [True, "it's"])
    # "INSERT INTO t VALUES (1, 'it''s')"
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

from sqlstring import identifier as _identifier
from sqlstring import literals as _literals
from sqlstring import template as _template
from sqlstring import timestamp as _timestamp
from sqlstring.dialects import DialectFactory, SQLDialect
from sqlstring.options import FormatOptions


class SqlString:
    """Escapes values and formats templates with fixed options.

    Args:
        options: Base options; defaults to ``FormatOptions()``.
        **overrides: Individual option fields applied on top of ``options``
            (e.g. ``dialect="postgres"``).  Unknown names are rejected by
            pydantic validation.
    """

    def __init__(self, options: FormatOptions | None = None, **overrides: Any) -> None:
        base = options or FormatOptions()
        if overrides:
            base = FormatOptions.model_validate({**base.model_dump(), **overrides})
        self._options = base
        self._dialect = DialectFactory.create(base.dialect)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def options(self) -> FormatOptions:
        return self._options

    @property
    def dialect(self) -> SQLDialect:
        return self._dialect

    def with_options(self, **changes: Any) -> SqlString:
        """Return a new formatter with ``changes`` applied to the options."""
        return SqlString(self._options, **changes)

    # ------------------------------------------------------------------
    # Escaping
    # ------------------------------------------------------------------

    def escape(self, val: Any) -> str:
        opts = self._options
        return _literals.escape(
            val, opts.stringify_objects, opts.time_zone, self._dialect, opts.field
        )

    def escape_id(self, name: str, forbid_qualified: bool = False) -> str:
        return _identifier.escape_id(name, forbid_qualified)

    def array_to_list(self, items: Sequence[Any]) -> str:
        opts = self._options
        return _literals.array_to_list(items, opts.time_zone, self._dialect, opts.field)

    def object_to_values(self, obj: Any) -> str:
        return _literals.object_to_values(obj, self._options.time_zone)

    def date_to_string(self, instant: date) -> str:
        return _timestamp.date_to_string(instant, self._options.time_zone, self._dialect)

    def buffer_to_string(self, data: bytes | bytearray | memoryview) -> str:
        return _literals.buffer_to_string(data, self._dialect)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def format(self, sql: str, values: Any = None) -> str:
        return _template.format(sql, values, self._options.time_zone, self._dialect)

    def format_named_parameters(self, sql: str, values: Mapping[str, Any]) -> str:
        return _template.format_named_parameters(
            sql, values, self._options.time_zone, self._dialect
        )
