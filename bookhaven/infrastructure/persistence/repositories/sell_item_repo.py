"""SellItem repository: filtered, counted, id-ordered pages plus full-replace writes.

Text matching is a case-insensitive substring match (ILIKE on Postgres,
lower() LIKE lower() on SQLite) on title, description and isbn, with
LIKE wildcards escaped by the caller (SearchTerm.like_pattern).
"""

from typing import Any

from sqlalchemy import ColumnElement, and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from bookhaven.application.dtos.catalog import (
    ItemSearchCriteria,
    SellItemResult,
    SellItemWrite,
)
from bookhaven.infrastructure.persistence.models import SellItem
from bookhaven.infrastructure.persistence.repositories.base import BaseRepository
from bookhaven.shared.utils.datetime import ensure_utc

_ESCAPE = "\\"


def _to_result(s: SellItem) -> SellItemResult:
    """Map ORM SellItem to SellItemResult."""
    return SellItemResult(
        id=s.id,
        title=s.title,
        author_id=s.author_id,
        item_type_id=s.item_type_id,
        published_date=ensure_utc(s.published_date),
        description=s.description,
        price=s.price,
        isbn=s.isbn,
        stock_quantity=s.stock_quantity,
        cover_image=s.cover_image,
    )


def _apply(entity: SellItem, data: SellItemWrite) -> None:
    """Overwrite every mutable column (no partial-patch semantics)."""
    entity.title = data.title
    entity.author_id = data.author_id
    entity.item_type_id = data.item_type_id
    entity.published_date = ensure_utc(data.published_date)
    entity.description = data.description
    entity.price = data.price
    entity.isbn = data.isbn
    entity.stock_quantity = data.stock_quantity
    entity.cover_image = data.cover_image


def _build_filter(criteria: ItemSearchCriteria) -> ColumnElement[bool] | None:
    """Compose WHERE: (text OR author match OR type match) AND exact item_type_id."""
    clauses: list[ColumnElement[bool]] = []
    if criteria.like_pattern is not None:
        pattern = criteria.like_pattern
        matches: list[ColumnElement[bool]] = [
            SellItem.title.ilike(pattern, escape=_ESCAPE),
            SellItem.description.ilike(pattern, escape=_ESCAPE),
            SellItem.isbn.ilike(pattern, escape=_ESCAPE),
        ]
        if criteria.author_ids:
            matches.append(SellItem.author_id.in_(criteria.author_ids))
        if criteria.item_type_ids:
            matches.append(SellItem.item_type_id.in_(criteria.item_type_ids))
        clauses.append(or_(*matches))
    if criteria.item_type_id is not None:
        clauses.append(SellItem.item_type_id == criteria.item_type_id)
    if not clauses:
        return None
    return and_(*clauses)


class SellItemRepository(BaseRepository[SellItem]):
    """Catalog item persistence. Deterministic order: id ascending."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, SellItem)

    async def get_by_id(self, item_id: int) -> SellItemResult | None:
        row = await super().get_by_id(item_id)
        return _to_result(row) if row else None

    async def find_page(
        self, criteria: ItemSearchCriteria, skip: int, limit: int
    ) -> tuple[list[SellItemResult], int]:
        """Return (page slice, total count of the filtered set before pagination)."""
        where = _build_filter(criteria)
        count_stmt: Any = select(func.count()).select_from(SellItem)
        page_stmt: Any = select(SellItem)
        if where is not None:
            count_stmt = count_stmt.where(where)
            page_stmt = page_stmt.where(where)
        total = (await self.db.execute(count_stmt)).scalar_one()
        if total == 0 or skip >= total:
            return [], total
        result = await self.db.execute(
            page_stmt.order_by(SellItem.id.asc()).offset(skip).limit(limit)
        )
        return [_to_result(s) for s in result.scalars().all()], total

    async def list_distinct_item_type_ids(self) -> list[int]:
        result = await self.db.execute(
            select(SellItem.item_type_id).distinct().order_by(SellItem.item_type_id.asc())
        )
        return list(result.scalars().all())

    async def create_sell_item(self, data: SellItemWrite) -> SellItemResult:
        entity = SellItem()
        _apply(entity, data)
        created = await self.create(entity)
        return _to_result(created)

    async def replace_sell_item(
        self, item_id: int, data: SellItemWrite
    ) -> SellItemResult | None:
        entity = await super().get_by_id(item_id)
        if not entity:
            return None
        _apply(entity, data)
        updated = await self.update(entity)
        return _to_result(updated)

    async def delete_sell_item(self, item_id: int) -> bool:
        entity = await super().get_by_id(item_id)
        if not entity:
            return False
        await self.delete(entity)
        return True
