"""Name lookups shared by reference collections (authors, item types)."""

from typing import Any, TypeVar

from sqlalchemy import select

from bookhaven.infrastructure.persistence.models import Author, ItemType
from bookhaven.infrastructure.persistence.repositories.base import BaseRepository


ModelType = TypeVar("ModelType", Author, ItemType)


class NamedReferenceRepository(BaseRepository[ModelType]):
    """Repository for a collection with an integer id and a name column."""

    async def get_names_by_ids(self, ids: set[int]) -> dict[int, str]:
        """Return {id: name} for ids that exist (one IN query, bounded by len(ids))."""
        if not ids:
            return {}
        model: Any = self.model
        result = await self.db.execute(
            select(model.id, model.name).where(model.id.in_(ids))
        )
        return {row.id: row.name for row in result.all()}

    async def find_ids_by_name(self, like_pattern: str) -> set[int]:
        """Return ids whose name matches like_pattern (case-insensitive, escape '\\')."""
        model: Any = self.model
        result = await self.db.execute(
            select(model.id).where(model.name.ilike(like_pattern, escape="\\"))
        )
        return set(result.scalars().all())
