"""UTC datetime helpers.

Every datetime crossing a layer boundary is timezone-aware UTC. SQLite
hands back naive values, so repositories pass what they read through
ensure_utc.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as aware UTC: naive values are taken to be UTC, aware ones converted.

    None passes through unchanged.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def is_past(moment: datetime, now: datetime | None = None) -> bool:
    """True when moment lies strictly before now (default: utc_now())."""
    reference = now if now is not None else utc_now()
    return ensure_utc(moment) < ensure_utc(reference)
