"""Reference data use cases: authors and item types (plain CRUD)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bookhaven.application.dtos.reference import (
    AuthorResult,
    AuthorWrite,
    ItemTypeResult,
    ItemTypeWrite,
)
from bookhaven.domain.exceptions import ResourceNotFoundException, ValidationException

if TYPE_CHECKING:
    from bookhaven.application.interfaces.repositories import (
        IAuthorRepository,
        IItemTypeRepository,
    )


def _require_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationException("Name is required.", field="name")


class AuthorService:
    """Author CRUD. Deleting a referenced author is allowed; items keep the dangling id."""

    def __init__(self, author_repo: IAuthorRepository) -> None:
        self.author_repo = author_repo

    async def list_authors(self) -> list[AuthorResult]:
        return await self.author_repo.list_authors()

    async def get_author(self, author_id: int) -> AuthorResult:
        author = await self.author_repo.get_by_id(author_id)
        if not author:
            raise ResourceNotFoundException("author", author_id)
        return author

    async def create_author(self, data: AuthorWrite) -> AuthorResult:
        _require_name(data.name)
        return await self.author_repo.create_author(data)

    async def update_author(self, author_id: int, data: AuthorWrite) -> AuthorResult:
        _require_name(data.name)
        updated = await self.author_repo.replace_author(author_id, data)
        if not updated:
            raise ResourceNotFoundException("author", author_id)
        return updated

    async def delete_author(self, author_id: int) -> None:
        if not await self.author_repo.delete_author(author_id):
            raise ResourceNotFoundException("author", author_id)


class ItemTypeService:
    """Item type CRUD."""

    def __init__(self, item_type_repo: IItemTypeRepository) -> None:
        self.item_type_repo = item_type_repo

    async def list_item_types(self) -> list[ItemTypeResult]:
        return await self.item_type_repo.list_item_types()

    async def get_item_type(self, item_type_id: int) -> ItemTypeResult:
        item_type = await self.item_type_repo.get_by_id(item_type_id)
        if not item_type:
            raise ResourceNotFoundException("item_type", item_type_id)
        return item_type

    async def create_item_type(self, data: ItemTypeWrite) -> ItemTypeResult:
        _require_name(data.name)
        return await self.item_type_repo.create_item_type(data)

    async def update_item_type(
        self, item_type_id: int, data: ItemTypeWrite
    ) -> ItemTypeResult:
        _require_name(data.name)
        updated = await self.item_type_repo.replace_item_type(item_type_id, data)
        if not updated:
            raise ResourceNotFoundException("item_type", item_type_id)
        return updated

    async def delete_item_type(self, item_type_id: int) -> None:
        if not await self.item_type_repo.delete_item_type(item_type_id):
            raise ResourceNotFoundException("item_type", item_type_id)
