"""Tests for UTC datetime helpers."""

from datetime import UTC, datetime, timedelta, timezone

from bookhaven.shared.utils.datetime import ensure_utc, is_past, utc_now


def test_ensure_utc_attaches_and_converts() -> None:
    assert ensure_utc(None) is None
    naive = datetime(2024, 1, 1, 12, 0)
    assert ensure_utc(naive) == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    plus_two = datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(plus_two).hour == 12
    assert ensure_utc(plus_two).tzinfo == UTC


def test_is_past() -> None:
    now = utc_now()
    assert is_past(now - timedelta(seconds=1), now)
    assert not is_past(now, now)
    assert not is_past(now + timedelta(days=1))
    assert is_past(datetime(2000, 1, 1))
