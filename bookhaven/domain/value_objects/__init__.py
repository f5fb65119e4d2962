"""Domain value objects and shared value types."""

from bookhaven.domain.value_objects.core import (
    UNKNOWN_NAME,
    PageRequest,
    SearchTerm,
    normalize_email,
)

__all__ = [
    "UNKNOWN_NAME",
    "PageRequest",
    "SearchTerm",
    "normalize_email",
]
