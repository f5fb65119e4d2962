"""Catalog use cases: read/search pages of sell items with enrichment, and item writes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bookhaven.application.dtos.catalog import (
    CategoryResult,
    EnrichedSellItem,
    ItemPage,
    ItemSearchCriteria,
    SellItemResult,
    SellItemWrite,
)
from bookhaven.domain.exceptions import ResourceNotFoundException, ValidationException
from bookhaven.domain.value_objects.core import UNKNOWN_NAME, PageRequest, SearchTerm

if TYPE_CHECKING:
    from bookhaven.application.interfaces.repositories import (
        IAuthorRepository,
        IItemTypeRepository,
        ISellItemRepository,
    )

logger = logging.getLogger(__name__)


def _item_not_found(item_id: int) -> ResourceNotFoundException:
    return ResourceNotFoundException(
        "item", item_id, message=f"Item with ID {item_id} not found."
    )


class CatalogQueryService:
    """Read side of the catalog: single item, filtered pages, search, categories.

    Pages are ordered by id, counted over the full filtered set, and
    enriched with author and item type names after slicing. References
    that no longer exist are reported as "Unknown".
    """

    def __init__(
        self,
        item_repo: ISellItemRepository,
        author_repo: IAuthorRepository,
        item_type_repo: IItemTypeRepository,
    ) -> None:
        self.item_repo = item_repo
        self.author_repo = author_repo
        self.item_type_repo = item_type_repo

    async def get_item(self, item_id: int) -> SellItemResult:
        """Return the raw item; raise ResourceNotFoundException if absent."""
        item = await self.item_repo.get_by_id(item_id)
        if not item:
            raise _item_not_found(item_id)
        return item

    async def read_page(
        self,
        page_number: int | None,
        page_size: int | None,
        search: str | None = None,
        item_type_id: int | None = None,
    ) -> ItemPage:
        """Page of items matching search on title, description or isbn (and item type)."""
        page = PageRequest.of(page_number, page_size)
        raw = search or ""
        term = SearchTerm(raw)
        criteria = ItemSearchCriteria(
            like_pattern=None if term.is_empty else term.like_pattern,
            item_type_id=item_type_id,
        )
        return await self._page(page, criteria, raw)

    async def search(
        self,
        query: str | None,
        page_number: int | None,
        page_size: int | None,
    ) -> ItemPage:
        """Page of items matching query on item text, author name or item type name."""
        raw = query or ""
        term = SearchTerm(raw)
        if term.is_empty:
            raise ValidationException("Search query is required.", field="query")
        page = PageRequest.of(page_number, page_size)
        pattern = term.like_pattern
        author_ids = await self.author_repo.find_ids_by_name(pattern)
        item_type_ids = await self.item_type_repo.find_ids_by_name(pattern)
        criteria = ItemSearchCriteria(
            like_pattern=pattern,
            author_ids=frozenset(author_ids),
            item_type_ids=frozenset(item_type_ids),
        )
        return await self._page(page, criteria, raw)

    async def list_categories(self) -> list[CategoryResult]:
        """Distinct item types used by items, ascending by id, with display names."""
        ids = await self.item_repo.list_distinct_item_type_ids()
        names = await self.item_type_repo.get_names_by_ids(set(ids))
        return [CategoryResult(id=i, name=names.get(i, UNKNOWN_NAME)) for i in ids]

    async def _page(
        self, page: PageRequest, criteria: ItemSearchCriteria, raw_search: str
    ) -> ItemPage:
        items, total = await self.item_repo.find_page(
            criteria, skip=page.skip, limit=page.page_size
        )
        return ItemPage(
            page_number=page.page_number,
            page_size=page.page_size,
            total_count=total,
            total_pages=page.total_pages(total),
            search=raw_search,
            items=await self._enrich(items),
        )

    async def _enrich(self, items: list[SellItemResult]) -> list[EnrichedSellItem]:
        # One IN lookup per reference collection, bounded by the page slice.
        if not items:
            return []
        authors = await self.author_repo.get_names_by_ids({i.author_id for i in items})
        item_types = await self.item_type_repo.get_names_by_ids(
            {i.item_type_id for i in items}
        )
        return [
            EnrichedSellItem(
                id=i.id,
                title=i.title,
                author_id=i.author_id,
                author_name=authors.get(i.author_id, UNKNOWN_NAME),
                item_type_id=i.item_type_id,
                item_type_name=item_types.get(i.item_type_id, UNKNOWN_NAME),
                published_date=i.published_date,
                description=i.description,
                price=i.price,
                isbn=i.isbn,
                stock_quantity=i.stock_quantity,
                cover_image=i.cover_image,
            )
            for i in items
        ]


class SellItemService:
    """Write side of the catalog: create, full-replace update, delete."""

    def __init__(self, item_repo: ISellItemRepository) -> None:
        self.item_repo = item_repo

    @staticmethod
    def _validate(data: SellItemWrite) -> SellItemWrite:
        if not data.title or not data.title.strip():
            raise ValidationException("Title is required.", field="title")
        if data.author_id is None:
            raise ValidationException("Author is required.", field="author_id")
        if data.item_type_id is None:
            raise ValidationException("Item type is required.", field="item_type_id")
        return data

    async def create_item(self, data: SellItemWrite) -> SellItemResult:
        created = await self.item_repo.create_sell_item(self._validate(data))
        logger.info("Created sell item %s", created.id)
        return created

    async def update_item(self, item_id: int, data: SellItemWrite) -> SellItemResult:
        """Overwrite every mutable field; raise ResourceNotFoundException if absent."""
        updated = await self.item_repo.replace_sell_item(item_id, self._validate(data))
        if not updated:
            raise _item_not_found(item_id)
        return updated

    async def delete_item(self, item_id: int) -> None:
        if not await self.item_repo.delete_sell_item(item_id):
            raise _item_not_found(item_id)
        logger.info("Deleted sell item %s", item_id)
