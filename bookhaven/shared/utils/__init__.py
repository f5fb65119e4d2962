"""Shared utilities: datetime."""

from bookhaven.shared.utils.datetime import ensure_utc, is_past, utc_now

__all__ = [
    "ensure_utc",
    "is_past",
    "utc_now",
]
