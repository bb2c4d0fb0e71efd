"""Placeholder substitution for ``?`` and ``:name`` query templates.

Placeholders are found with a plain regular-expression scan; quoted strings
and comments in the template are not skipped, so a literal ``?`` or
``:word`` inside them is substituted too.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from sqlstring.dialects import DialectFactory, PostgresDialect, SQLDialect
from sqlstring.errors import MissingParameterError
from sqlstring.literals import escape

logger = logging.getLogger(__name__)

_POSITIONAL_RE = re.compile(r"\?")

# One or more colons, then a word that does not start with a digit, so
# time literals such as ``12:30`` are left alone.
_NAMED_RE = re.compile(r":+(?!\d)(\w+)")


def format(
    sql: str,
    values: Any = None,
    time_zone: str | None = None,
    dialect: SQLDialect | str | None = None,
) -> str:
    """Replace each ``?`` in ``sql`` with the next escaped value.

    Markers left over after ``values`` runs out stay as ``?``.  A value that
    is not a list or tuple is used as the only value.

    Args:
        sql: The query template.
        values: Positional values, consumed front to back.
        time_zone: Time zone for datetime values.
        dialect: Dialect name or instance.

    Returns:
        The formatted query.
    """
    sql_dialect = DialectFactory.resolve(dialect)
    pending = iter(values if isinstance(values, (list, tuple)) else [values])
    unreplaced = 0

    def substitute(match: re.Match[str]) -> str:
        nonlocal unreplaced
        try:
            value = next(pending)
        except StopIteration:
            unreplaced += 1
            return match.group()
        return escape(value, False, time_zone, sql_dialect)

    result = _POSITIONAL_RE.sub(substitute, sql)
    if unreplaced:
        logger.debug("%d positional placeholder(s) left unreplaced", unreplaced)
    return result


def format_named_parameters(
    sql: str,
    values: Mapping[str, Any],
    time_zone: str | None = None,
    dialect: SQLDialect | str | None = None,
) -> str:
    """Replace each ``:name`` marker in ``sql`` with ``values[name]``, escaped.

    With the PostgreSQL dialect, ``::type`` casts are left untouched.

    Args:
        sql: The query template.
        values: Parameter values keyed by name.
        time_zone: Time zone for datetime values.
        dialect: Dialect name or instance.

    Returns:
        The formatted query.

    Raises:
        MissingParameterError: If a marker has no entry in ``values``.
    """
    sql_dialect = DialectFactory.resolve(dialect)
    keep_casts = isinstance(sql_dialect, PostgresDialect)

    def substitute(match: re.Match[str]) -> str:
        marker, name = match.group(), match.group(1)
        if keep_casts and marker.startswith("::"):
            return marker
        if name not in values:
            raise MissingParameterError(marker, name)
        return escape(values[name], False, time_zone, sql_dialect)

    return _NAMED_RE.sub(substitute, sql)
