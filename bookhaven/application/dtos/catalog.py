"""DTOs for the catalog (sell items, enrichment, pages). No dependency on ORM."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class SellItemWrite:
    """Every mutable field of a sell item (create and full-replace update)."""

    title: str
    author_id: int
    item_type_id: int
    published_date: datetime | None = None
    description: str | None = None
    price: Decimal = Decimal("0")
    isbn: str | None = None
    stock_quantity: int = 0
    cover_image: str | None = None


@dataclass(frozen=True)
class SellItemResult:
    """Sell item read-model (raw record, no enrichment)."""

    id: int
    title: str
    author_id: int
    item_type_id: int
    published_date: datetime | None
    description: str | None
    price: Decimal
    isbn: str | None
    stock_quantity: int
    cover_image: str | None


@dataclass(frozen=True)
class EnrichedSellItem:
    """Sell item plus denormalized author and item type names ("Unknown" when dangling)."""

    id: int
    title: str
    author_id: int
    author_name: str
    item_type_id: int
    item_type_name: str
    published_date: datetime | None
    description: str | None
    price: Decimal
    isbn: str | None
    stock_quantity: int
    cover_image: str | None


@dataclass(frozen=True)
class ItemSearchCriteria:
    """Filter for the item query.

    like_pattern: escaped %term% matched against title, description, isbn.
    author_ids / item_type_ids: reference ids whose name matched the term;
    OR-composed with the text match. item_type_id: exact filter, AND-composed.
    """

    like_pattern: str | None = None
    author_ids: frozenset[int] = frozenset()
    item_type_ids: frozenset[int] = frozenset()
    item_type_id: int | None = None


@dataclass(frozen=True)
class ItemPage:
    """One page of enriched items with counts over the full filtered set."""

    page_number: int
    page_size: int
    total_count: int
    total_pages: int
    search: str
    items: list[EnrichedSellItem] = field(default_factory=list)


@dataclass(frozen=True)
class CategoryResult:
    """Distinct item type present on sell items, with its display name."""

    id: int
    name: str
