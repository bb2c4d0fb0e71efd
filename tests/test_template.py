"""Unit tests for positional and named placeholder formatting."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from sqlstring.errors import MissingParameterError
from sqlstring.template import format, format_named_parameters

# ---------------------------------------------------------------------------
# Positional
# ---------------------------------------------------------------------------


def test_positional_single_value():
    assert format("SELECT * FROM t WHERE id = ?", [42]) == "SELECT * FROM t WHERE id = 42"


def test_positional_exhausted_values_leave_marker():
    assert format("? ?", [1]) == "1 ?"
    assert format("SELECT ?, ?", []) == "SELECT ?, ?"


def test_positional_logs_unreplaced_markers(caplog):
    with caplog.at_level(logging.DEBUG, logger="sqlstring.template"):
        format("? ? ?", [1])
    assert "2 positional placeholder(s) left unreplaced" in caplog.text


def test_positional_scalar_is_single_value():
    assert format("WHERE name = ?", "x") == "WHERE name = 'x'"


def test_positional_no_markers():
    assert format("SELECT 1", [1, 2]) == "SELECT 1"


def test_positional_values_are_not_rescanned():
    assert format("? = ?", ["a?", "b"]) == "'a?' = 'b'"


def test_positional_list_and_object_values():
    assert format("id IN (?)", [[1, 2, 3]]) == "id IN (1, 2, 3)"
    assert (
        format("UPDATE t SET ? WHERE id = ?", [{"a": 1, "b": "x"}, 5])
        == "UPDATE t SET `a` = 1, `b` = 'x' WHERE id = 5"
    )


def test_positional_respects_dialect():
    assert format("VALUES (?, ?)", [True, "it's"], dialect="sqlite") == "VALUES (1, 'it''s')"
    assert format("VALUES (?)", [[1, 2]], dialect="postgres") == "VALUES (ARRAY[1,2])"


# ---------------------------------------------------------------------------
# Named
# ---------------------------------------------------------------------------


def test_named_single_value():
    assert format_named_parameters("WHERE id = :id", {"id": 5}) == "WHERE id = 5"


def test_named_repeated_marker():
    assert format_named_parameters(":a + :a", {"a": 1}) == "1 + 1"


def test_named_missing_raises():
    with pytest.raises(MissingParameterError) as exc_info:
        format_named_parameters("WHERE id = :missing", {})
    assert exc_info.value.marker == ":missing"
    assert exc_info.value.name == "missing"
    assert '":missing" has no value' in str(exc_info.value)


def test_named_ignores_time_literals():
    assert format_named_parameters("SELECT '12:30'", {}) == "SELECT '12:30'"


def test_named_postgres_keeps_casts():
    assert (
        format_named_parameters("SELECT :v::int", {"v": "5"}, dialect="postgres")
        == "SELECT '5'::int"
    )


def test_named_generic_treats_cast_as_marker():
    with pytest.raises(MissingParameterError) as exc_info:
        format_named_parameters("SELECT x::int", {}, dialect="mysql")
    assert exc_info.value.marker == "::int"


def test_named_values_are_not_rescanned():
    assert format_named_parameters(":a, :b", {"a": ":b", "b": 2}) == "':b', 2"


def test_named_respects_dialect_and_time_zone():
    ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert (
        format_named_parameters("SET at = :at", {"at": ts}, time_zone="+01:00")
        == "SET at = '2024-01-02 04:04:05'"
    )
    assert (
        format_named_parameters("SET ok = :ok", {"ok": False}, dialect="sqlite")
        == "SET ok = 0"
    )
