"""Author repository. Returns application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from bookhaven.application.dtos.reference import AuthorResult, AuthorWrite
from bookhaven.infrastructure.persistence.models import Author
from bookhaven.infrastructure.persistence.repositories.reference_repo import (
    NamedReferenceRepository,
)
from bookhaven.shared.utils.datetime import ensure_utc


def _to_result(a: Author) -> AuthorResult:
    """Map ORM Author to AuthorResult."""
    return AuthorResult(
        id=a.id,
        name=a.name,
        birth_date=ensure_utc(a.birth_date),
        biography=a.biography,
        cover_image=a.cover_image,
    )


def _apply(entity: Author, data: AuthorWrite) -> None:
    entity.name = data.name
    entity.birth_date = ensure_utc(data.birth_date)
    entity.biography = data.biography
    entity.cover_image = data.cover_image


class AuthorRepository(NamedReferenceRepository[Author]):
    """Author persistence. Deleting an author leaves items pointing at its id."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Author)

    async def get_by_id(self, author_id: int) -> AuthorResult | None:
        row = await super().get_by_id(author_id)
        return _to_result(row) if row else None

    async def list_authors(self) -> list[AuthorResult]:
        return [_to_result(a) for a in await self.get_all()]

    async def create_author(self, data: AuthorWrite) -> AuthorResult:
        entity = Author()
        _apply(entity, data)
        created = await self.create(entity)
        return _to_result(created)

    async def replace_author(self, author_id: int, data: AuthorWrite) -> AuthorResult | None:
        entity = await super().get_by_id(author_id)
        if not entity:
            return None
        _apply(entity, data)
        updated = await self.update(entity)
        return _to_result(updated)

    async def delete_author(self, author_id: int) -> bool:
        entity = await super().get_by_id(author_id)
        if not entity:
            return False
        await self.delete(entity)
        return True
