"""Value escaping: Python values → SQL literals.

``escape`` is the single entry point for type dispatch.  Checks run in a
fixed order over the supported value shapes:

* ``None`` → ``NULL``
* ``bool`` → dialect boolean (``true`` / ``1``)
* ``int``, ``float``, ``Decimal`` → ``str(value)``, unquoted
* ``datetime``, ``date`` → quoted timestamp (:mod:`sqlstring.timestamp`)
* ``bytes``, ``bytearray``, ``memoryview`` → hex literal
* ``list``, ``tuple``, ``array.array`` → value list or ``ARRAY[...]``
* mapping or plain object → ``key = value`` assignment list, or its quoted
  ``str()`` when ``stringify_objects`` is set
* ``str`` → quoted, escaped string

``bool`` is tested before numbers because it is an ``int`` subclass.
"""
from __future__ import annotations

import array
from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal
from numbers import Integral
from typing import Any

from sqlstring.dialects import DialectFactory, SQLDialect
from sqlstring.errors import UnsupportedValueError
from sqlstring.identifier import escape_id
from sqlstring.options import UTC, FieldHint
from sqlstring.timestamp import date_to_string

_BINARY_TYPES = (bytes, bytearray, memoryview)
_SEQUENCE_TYPES = (list, tuple, array.array)


def escape(
    val: Any,
    stringify_objects: bool = False,
    time_zone: str | None = None,
    dialect: SQLDialect | str | None = None,
    field: FieldHint | Mapping[str, Any] | None = None,
) -> str:
    """Convert ``val`` to a SQL literal.

    Args:
        val: The value to escape.
        stringify_objects: Quote mappings and plain objects as their
            ``str()`` instead of expanding them into ``key = value`` pairs.
        time_zone: Time zone for datetimes; ``None`` means UTC.
        dialect: Dialect name or instance; ``None`` means generic.
        field: Column hint forwarded to the list formatter.

    Returns:
        The literal.  For a mapping with ``stringify_objects`` unset this is
        an assignment list, not a single literal.

    Raises:
        UnsupportedValueError: If ``val`` has no mapping or attribute shape
            and ``stringify_objects`` is unset.
        TimestampRangeError: If a datetime cannot be converted to the
            requested time zone within years 1 to 9999.
    """
    sql_dialect = DialectFactory.resolve(dialect)

    if val is None:
        return "NULL"
    if isinstance(val, bool):
        return sql_dialect.format_boolean(val)
    if isinstance(val, (Integral, float, Decimal)):
        return str(val)
    if isinstance(val, date):
        return date_to_string(val, time_zone or UTC, sql_dialect)
    if isinstance(val, _BINARY_TYPES):
        return buffer_to_string(val, sql_dialect)
    if isinstance(val, _SEQUENCE_TYPES):
        return array_to_list(val, time_zone, sql_dialect, field)

    if not isinstance(val, str):
        if not stringify_objects:
            return object_to_values(val, time_zone)
        val = str(val)

    return sql_dialect.quote_string(val)


def array_to_list(
    items: Sequence[Any],
    time_zone: str | None = None,
    dialect: SQLDialect | str | None = None,
    field: FieldHint | Mapping[str, Any] | None = None,
) -> str:
    """Render a sequence as a dialect-specific value list.

    PostgreSQL gets ``ARRAY[1,2,3]`` (cast to ``field.type`` when given);
    other dialects get ``1, 2, 3`` with nested lists as ``(a, b)`` groups.
    Elements are escaped with ``stringify_objects=True``.
    """
    sql_dialect = DialectFactory.resolve(dialect)
    hint = FieldHint.model_validate(field) if field is not None else None

    def build_item(item: Any, item_field: FieldHint | None) -> str:
        return escape(item, True, time_zone, sql_dialect, item_field)

    return sql_dialect.format_list(items, build_item, hint)


def object_to_values(obj: Any, time_zone: str | None = None) -> str:
    """Render a mapping or plain object as ``key = value`` pairs.

    Keys keep insertion order and are quoted with :func:`escape_id`; callable
    values are skipped.  Values are always escaped with the generic dialect.

    Raises:
        UnsupportedValueError: If ``obj`` is neither a mapping nor an object
            with instance attributes.
    """
    fragments: list[str] = []
    for key, value in _object_items(obj):
        if callable(value):
            continue
        fragments.append(f"{escape_id(str(key))} = {escape(value, True, time_zone)}")
    return ", ".join(fragments)


def buffer_to_string(
    data: bytes | bytearray | memoryview,
    dialect: SQLDialect | str | None = None,
) -> str:
    """Render binary data as a hex literal (``X'..'`` or PostgreSQL bytea)."""
    sql_dialect = DialectFactory.resolve(dialect)
    return sql_dialect.format_binary(bytes(data).hex())


def _object_items(obj: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(obj, Mapping):
        return obj.items()
    if hasattr(obj, "__dict__"):
        return vars(obj).items()
    raise UnsupportedValueError(obj)
