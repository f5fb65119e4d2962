"""Catalog and reference-data dependencies (composition root)."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookhaven.application.use_cases import (
    AuthorService,
    CatalogQueryService,
    ItemTypeService,
    SellItemService,
)
from bookhaven.infrastructure.persistence.database import get_db, get_db_transactional
from bookhaven.infrastructure.persistence.repositories import (
    AuthorRepository,
    ItemTypeRepository,
    SellItemRepository,
)


async def get_catalog_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CatalogQueryService:
    """Catalog read service (read-only session)."""
    return CatalogQueryService(
        item_repo=SellItemRepository(db),
        author_repo=AuthorRepository(db),
        item_type_repo=ItemTypeRepository(db),
    )


async def get_sell_item_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> SellItemService:
    """Catalog write service (transactional)."""
    return SellItemService(SellItemRepository(db))


async def get_author_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AuthorService:
    return AuthorService(AuthorRepository(db))


async def get_author_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> AuthorService:
    return AuthorService(AuthorRepository(db))


async def get_item_type_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemTypeService:
    return ItemTypeService(ItemTypeRepository(db))


async def get_item_type_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ItemTypeService:
    return ItemTypeService(ItemTypeRepository(db))
