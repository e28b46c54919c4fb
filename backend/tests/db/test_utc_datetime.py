"""UTCDateTime — every value crossing the column is aware UTC."""

from datetime import datetime, timedelta, timezone

from sqlalchemy.dialects import sqlite

from task_manager.db.types import UTCDateTime

NAIVE = datetime(2026, 3, 1, 12, 30)
PLUS_TWO = timezone(timedelta(hours=2))


def test_naive_result_is_taken_as_utc():
    value = UTCDateTime().process_result_value(NAIVE, sqlite.dialect())
    assert value == NAIVE.replace(tzinfo=timezone.utc)
    assert value.tzinfo is timezone.utc


def test_aware_bind_is_converted_to_utc():
    value = UTCDateTime().process_bind_param(
        datetime(2026, 3, 1, 14, 30, tzinfo=PLUS_TWO), sqlite.dialect(),
    )
    assert value == NAIVE.replace(tzinfo=timezone.utc)
    assert value.utcoffset() == timedelta(0)


def test_none_passes_through():
    assert UTCDateTime().process_bind_param(None, sqlite.dialect()) is None
    assert UTCDateTime().process_result_value(None, sqlite.dialect()) is None
