"""Domain value objects for the BookHaven application.

Value objects are immutable types that represent domain concepts with
self-normalization. They have no identity, only value.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Self

# Literal substituted for a reference (author, item type) that no longer exists.
UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class PageRequest:
    """Value object for a normalized page request (SRP: pagination arithmetic).

    page_number below 1 becomes 1. page_size below 1 becomes the default;
    page_size above MAX_PAGE_SIZE is clamped to it. Use PageRequest.of()
    to build from raw query values.
    """

    MAX_PAGE_SIZE: ClassVar[int] = 50
    DEFAULT_ITEM_PAGE_SIZE: ClassVar[int] = 6
    DEFAULT_EVENT_PAGE_SIZE: ClassVar[int] = 10

    page_number: int
    page_size: int

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError("page_number must be >= 1")
        if not 1 <= self.page_size <= self.MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {self.MAX_PAGE_SIZE}")

    @classmethod
    def of(
        cls,
        page_number: int | None,
        page_size: int | None,
        default_size: int = DEFAULT_ITEM_PAGE_SIZE,
    ) -> Self:
        """Normalize raw values (None means absent) into a valid PageRequest."""
        number = page_number if page_number is not None and page_number >= 1 else 1
        if page_size is None or page_size < 1:
            size = default_size
        else:
            size = min(page_size, cls.MAX_PAGE_SIZE)
        return cls(page_number=number, page_size=size)

    @property
    def skip(self) -> int:
        return (self.page_number - 1) * self.page_size

    def total_pages(self, total_count: int) -> int:
        """Return ceil(total_count / page_size); 0 when there are no records."""
        if total_count <= 0:
            return 0
        return math.ceil(total_count / self.page_size)


@dataclass(frozen=True)
class SearchTerm:
    """Value object for a case-insensitive substring search term.

    Holds the raw value as given (echoed back to clients) and the trimmed,
    lower-cased value used for matching. is_empty is True for blank input.
    """

    raw: str

    @property
    def normalized(self) -> str:
        return self.raw.strip().lower()

    @property
    def is_empty(self) -> bool:
        return not self.normalized

    @property
    def like_pattern(self) -> str:
        """Return a %term% LIKE pattern with %, _ and \\ escaped (use escape='\\')."""
        escaped = (
            self.normalized.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        )
        return f"%{escaped}%"


def normalize_email(email: str) -> str:
    """Return email trimmed and lower-cased (subscriber/registration identity)."""
    return email.strip().lower()
