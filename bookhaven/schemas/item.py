"""Catalog item schemas: write body, raw item, enriched page envelopes, categories."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import Field, field_serializer, field_validator

from bookhaven.application.dtos.catalog import SellItemWrite
from bookhaven.schemas.common import ApiModel, ensure_aware_datetime


class SellItemRequest(ApiModel):
    """Body for POST /items and PUT /items/{id} (every mutable field)."""

    title: str = Field(..., min_length=1, max_length=255)
    author_id: int
    item_type_id: int
    published_date: datetime | None = None
    description: str | None = None
    price: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    isbn: str | None = Field(default=None, max_length=13)
    stock_quantity: int = Field(default=0, ge=0)
    cover_image: str | None = None

    @field_validator("published_date", mode="before")
    @classmethod
    def _published_date_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)

    def to_dto(self) -> SellItemWrite:
        return SellItemWrite(
            title=self.title,
            author_id=self.author_id,
            item_type_id=self.item_type_id,
            published_date=self.published_date,
            description=self.description,
            price=self.price,
            isbn=self.isbn,
            stock_quantity=self.stock_quantity,
            cover_image=self.cover_image,
        )


class SellItemResponse(ApiModel):
    """Raw sell item (GET /items/{id}, create and update responses)."""

    id: int
    title: str
    author_id: int
    item_type_id: int
    published_date: datetime | None = None
    description: str | None = None
    price: Decimal
    isbn: str | None = None
    stock_quantity: int
    cover_image: str | None = None

    @field_serializer("price")
    def _price_to_number(self, v: Decimal) -> float:
        return float(v)


class EnrichedSellItemResponse(SellItemResponse):
    """Sell item with author and item type display names."""

    author_name: str
    item_type_name: str


class ItemPageResponse(ApiModel):
    """Envelope for GET /items."""

    page_number: int
    page_size: int
    total_books: int
    total_pages: int
    search_term: str
    data: list[EnrichedSellItemResponse]


class ItemSearchResponse(ApiModel):
    """Envelope for GET /items/search."""

    page_number: int
    page_size: int
    total_books: int
    total_pages: int
    search_query: str
    data: list[EnrichedSellItemResponse]


class CategoryResponse(ApiModel):
    """Distinct item type in use by catalog items."""

    id: int
    name: str
