"""Catalog item API: thin routes delegating to CatalogQueryService / SellItemService.

Static paths (/search, /categories) are declared before /{item_id}.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from bookhaven.api.v1.dependencies import get_catalog_query_service, get_sell_item_service
from bookhaven.application.dtos.catalog import ItemPage
from bookhaven.application.use_cases import CatalogQueryService, SellItemService
from bookhaven.core.limiter import limit_writes
from bookhaven.schemas.item import (
    CategoryResponse,
    EnrichedSellItemResponse,
    ItemPageResponse,
    ItemSearchResponse,
    SellItemRequest,
    SellItemResponse,
)

router = APIRouter()


def _data(page: ItemPage) -> list[EnrichedSellItemResponse]:
    return [EnrichedSellItemResponse.model_validate(i) for i in page.items]


@router.get("", response_model=ItemPageResponse)
async def list_items(
    catalog: Annotated[CatalogQueryService, Depends(get_catalog_query_service)],
    page_number: Annotated[int | None, Query(alias="pageNumber")] = None,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
    search: Annotated[str | None, Query()] = None,
    item_type_id: Annotated[int | None, Query(alias="itemTypeId")] = None,
):
    """Page of enriched items, filtered by search on title/description/isbn."""
    page = await catalog.read_page(page_number, page_size, search, item_type_id)
    return ItemPageResponse(
        page_number=page.page_number,
        page_size=page.page_size,
        total_books=page.total_count,
        total_pages=page.total_pages,
        search_term=page.search,
        data=_data(page),
    )


@router.get("/search", response_model=ItemSearchResponse)
async def search_items(
    catalog: Annotated[CatalogQueryService, Depends(get_catalog_query_service)],
    query: Annotated[str | None, Query()] = None,
    page_number: Annotated[int | None, Query(alias="pageNumber")] = None,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
):
    """Search items by text, author name or item type name. Blank query is a 400."""
    page = await catalog.search(query, page_number, page_size)
    return ItemSearchResponse(
        page_number=page.page_number,
        page_size=page.page_size,
        total_books=page.total_count,
        total_pages=page.total_pages,
        search_query=page.search,
        data=_data(page),
    )


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(
    catalog: Annotated[CatalogQueryService, Depends(get_catalog_query_service)],
):
    categories = await catalog.list_categories()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.get("/{item_id}", response_model=SellItemResponse)
async def get_item(
    item_id: int,
    catalog: Annotated[CatalogQueryService, Depends(get_catalog_query_service)],
):
    """Return the raw item (no author/type names)."""
    item = await catalog.get_item(item_id)
    return SellItemResponse.model_validate(item)


@router.post("", response_model=SellItemResponse, status_code=201)
@limit_writes
async def create_item(
    request: Request,
    body: SellItemRequest,
    items: Annotated[SellItemService, Depends(get_sell_item_service)],
):
    created = await items.create_item(body.to_dto())
    return SellItemResponse.model_validate(created)


@router.put("/{item_id}", response_model=SellItemResponse)
@limit_writes
async def update_item(
    request: Request,
    item_id: int,
    body: SellItemRequest,
    items: Annotated[SellItemService, Depends(get_sell_item_service)],
):
    """Replace every mutable field of the item."""
    updated = await items.update_item(item_id, body.to_dto())
    return SellItemResponse.model_validate(updated)


@router.delete("/{item_id}", status_code=204)
@limit_writes
async def delete_item(
    request: Request,
    item_id: int,
    items: Annotated[SellItemService, Depends(get_sell_item_service)],
) -> None:
    await items.delete_item(item_id)
