"""ItemType repository. Returns application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from bookhaven.application.dtos.reference import ItemTypeResult, ItemTypeWrite
from bookhaven.infrastructure.persistence.models import ItemType
from bookhaven.infrastructure.persistence.repositories.reference_repo import (
    NamedReferenceRepository,
)


def _to_result(t: ItemType) -> ItemTypeResult:
    """Map ORM ItemType to ItemTypeResult."""
    return ItemTypeResult(id=t.id, name=t.name, description=t.description)


class ItemTypeRepository(NamedReferenceRepository[ItemType]):
    """Item type (category) persistence."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ItemType)

    async def get_by_id(self, item_type_id: int) -> ItemTypeResult | None:
        row = await super().get_by_id(item_type_id)
        return _to_result(row) if row else None

    async def list_item_types(self) -> list[ItemTypeResult]:
        return [_to_result(t) for t in await self.get_all()]

    async def create_item_type(self, data: ItemTypeWrite) -> ItemTypeResult:
        created = await self.create(ItemType(name=data.name, description=data.description))
        return _to_result(created)

    async def replace_item_type(
        self, item_type_id: int, data: ItemTypeWrite
    ) -> ItemTypeResult | None:
        entity = await super().get_by_id(item_type_id)
        if not entity:
            return None
        entity.name = data.name
        entity.description = data.description
        updated = await self.update(entity)
        return _to_result(updated)

    async def delete_item_type(self, item_type_id: int) -> bool:
        entity = await super().get_by_id(item_type_id)
        if not entity:
            return False
        await self.delete(entity)
        return True
