"""DTOs for reference data: authors and item types. No dependency on ORM."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AuthorWrite:
    """Every mutable field of an author (create and full-replace update)."""

    name: str
    birth_date: datetime | None = None
    biography: str | None = None
    cover_image: str | None = None


@dataclass(frozen=True)
class AuthorResult:
    """Author read-model."""

    id: int
    name: str
    birth_date: datetime | None
    biography: str | None
    cover_image: str | None


@dataclass(frozen=True)
class ItemTypeWrite:
    """Every mutable field of an item type."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class ItemTypeResult:
    """Item type read-model."""

    id: int
    name: str
    description: str | None
