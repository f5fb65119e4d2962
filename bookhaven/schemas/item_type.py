"""Item type API schemas."""

from pydantic import Field

from bookhaven.application.dtos.reference import ItemTypeWrite
from bookhaven.schemas.common import ApiModel


class ItemTypeRequest(ApiModel):
    """Body for creating or replacing an item type."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None

    def to_dto(self) -> ItemTypeWrite:
        return ItemTypeWrite(name=self.name, description=self.description)


class ItemTypeResponse(ApiModel):
    id: int
    name: str
    description: str | None = None
