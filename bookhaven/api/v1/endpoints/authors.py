"""Author API (reference data)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from bookhaven.api.v1.dependencies import get_author_service, get_author_service_for_write
from bookhaven.application.use_cases import AuthorService
from bookhaven.core.limiter import limit_writes
from bookhaven.schemas.author import AuthorRequest, AuthorResponse

router = APIRouter()


@router.get("", response_model=list[AuthorResponse])
async def list_authors(
    authors: Annotated[AuthorService, Depends(get_author_service)],
):
    return [AuthorResponse.model_validate(a) for a in await authors.list_authors()]


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: int,
    authors: Annotated[AuthorService, Depends(get_author_service)],
):
    return AuthorResponse.model_validate(await authors.get_author(author_id))


@router.post("", response_model=AuthorResponse, status_code=201)
@limit_writes
async def create_author(
    request: Request,
    body: AuthorRequest,
    authors: Annotated[AuthorService, Depends(get_author_service_for_write)],
):
    return AuthorResponse.model_validate(await authors.create_author(body.to_dto()))


@router.put("/{author_id}", response_model=AuthorResponse)
@limit_writes
async def update_author(
    request: Request,
    author_id: int,
    body: AuthorRequest,
    authors: Annotated[AuthorService, Depends(get_author_service_for_write)],
):
    updated = await authors.update_author(author_id, body.to_dto())
    return AuthorResponse.model_validate(updated)


@router.delete("/{author_id}", status_code=204)
@limit_writes
async def delete_author(
    request: Request,
    author_id: int,
    authors: Annotated[AuthorService, Depends(get_author_service_for_write)],
) -> None:
    """Delete the author. Items that reference it report "Unknown" as author name."""
    await authors.delete_author(author_id)
