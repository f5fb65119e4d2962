"""Item type API (reference data)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from bookhaven.api.v1.dependencies import (
    get_item_type_service,
    get_item_type_service_for_write,
)
from bookhaven.application.use_cases import ItemTypeService
from bookhaven.core.limiter import limit_writes
from bookhaven.schemas.item_type import ItemTypeRequest, ItemTypeResponse

router = APIRouter()


@router.get("", response_model=list[ItemTypeResponse])
async def list_item_types(
    item_types: Annotated[ItemTypeService, Depends(get_item_type_service)],
):
    return [ItemTypeResponse.model_validate(t) for t in await item_types.list_item_types()]


@router.get("/{item_type_id}", response_model=ItemTypeResponse)
async def get_item_type(
    item_type_id: int,
    item_types: Annotated[ItemTypeService, Depends(get_item_type_service)],
):
    return ItemTypeResponse.model_validate(await item_types.get_item_type(item_type_id))


@router.post("", response_model=ItemTypeResponse, status_code=201)
@limit_writes
async def create_item_type(
    request: Request,
    body: ItemTypeRequest,
    item_types: Annotated[ItemTypeService, Depends(get_item_type_service_for_write)],
):
    created = await item_types.create_item_type(body.to_dto())
    return ItemTypeResponse.model_validate(created)


@router.put("/{item_type_id}", response_model=ItemTypeResponse)
@limit_writes
async def update_item_type(
    request: Request,
    item_type_id: int,
    body: ItemTypeRequest,
    item_types: Annotated[ItemTypeService, Depends(get_item_type_service_for_write)],
):
    updated = await item_types.update_item_type(item_type_id, body.to_dto())
    return ItemTypeResponse.model_validate(updated)


@router.delete("/{item_type_id}", status_code=204)
@limit_writes
async def delete_item_type(
    request: Request,
    item_type_id: int,
    item_types: Annotated[ItemTypeService, Depends(get_item_type_service_for_write)],
) -> None:
    await item_types.delete_item_type(item_type_id)
