"""Unit tests for timestamp formatting and time zone parsing."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from sqlstring.errors import SqlStringError, TimestampRangeError
from sqlstring.literals import escape
from sqlstring.timestamp import date_to_string
from sqlstring.timezone import convert_timezone

INSTANT = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("specifier", "minutes"),
    [
        ("Z", 0),
        ("+05:30", 330),
        ("-0800", -480),
        ("+02", 120),
        (" 01:00", 60),
        ("local", None),
        ("UTC", None),
    ],
)
def test_convert_timezone(specifier, minutes):
    assert convert_timezone(specifier) == minutes


def test_generic_default_is_utc_seconds():
    assert date_to_string(INSTANT) == "'2024-01-02 03:04:05'"
    assert escape(INSTANT) == "'2024-01-02 03:04:05'"


def test_generic_applies_offset():
    assert date_to_string(INSTANT, "+05:30") == "'2024-01-02 08:34:05'"
    assert date_to_string(INSTANT, "-08:00", "sqlite") == "'2024-01-01 19:04:05'"
    assert escape(INSTANT, time_zone="+02") == "'2024-01-02 05:04:05'"


def test_generic_unparseable_offset_stays_utc():
    assert date_to_string(INSTANT, "Europe/Paris") == "'2024-01-02 03:04:05'"


def test_aware_input_in_other_zone_is_normalised():
    tokyo = INSTANT.astimezone(timezone(timedelta(hours=9)))
    assert date_to_string(tokyo) == "'2024-01-02 03:04:05'"


def test_postgres_always_utc_with_millis():
    expected = "'2024-01-02 03:04:05.678 +00:00'"
    assert date_to_string(INSTANT, "Z", "postgres") == expected
    assert date_to_string(INSTANT, "+05:30", "postgres") == expected
    assert escape(INSTANT, time_zone="local", dialect="postgres") == expected


def test_local_uses_system_offset(local_tz):
    local_tz("TST-02")
    assert date_to_string(INSTANT, "local") == "'2024-01-02 05:04:05'"


def test_naive_datetime_is_local_time(local_tz):
    local_tz("TST-02")
    naive = datetime(2024, 1, 2, 5, 4, 5)
    assert date_to_string(naive) == "'2024-01-02 03:04:05'"
    assert date_to_string(naive, "local") == "'2024-01-02 05:04:05'"
    assert date_to_string(naive, dialect="postgres") == "'2024-01-02 03:04:05.000 +00:00'"


def test_plain_date_is_local_midnight(local_tz):
    local_tz("UTC0")
    assert escape(date(2024, 1, 2)) == "'2024-01-02 00:00:00'"


def test_list_of_datetimes_threads_time_zone():
    assert escape([INSTANT], time_zone="+01:00") == "'2024-01-02 04:04:05'"


def test_offset_past_max_year_raises_range_error():
    late = datetime(9999, 12, 31, 23, tzinfo=timezone.utc)
    with pytest.raises(TimestampRangeError) as exc_info:
        date_to_string(late, "+05:00")
    assert exc_info.value.value == late
    assert exc_info.value.time_zone == "+05:00"
    assert date_to_string(late, "-05:00") == "'9999-12-31 18:00:00'"


def test_postgres_utc_past_max_year_raises_range_error():
    late = datetime(9999, 12, 31, 23, tzinfo=timezone(timedelta(hours=-5)))
    with pytest.raises(TimestampRangeError):
        date_to_string(late, dialect="postgres")


def test_local_date_before_min_year_raises_range_error(local_tz):
    local_tz("TST-02")
    with pytest.raises(TimestampRangeError) as exc_info:
        escape(date(1, 1, 1))
    assert isinstance(exc_info.value, SqlStringError)
