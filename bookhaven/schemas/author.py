"""Author API schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from bookhaven.application.dtos.reference import AuthorWrite
from bookhaven.schemas.common import ApiModel, ensure_aware_datetime


class AuthorRequest(ApiModel):
    """Body for creating or replacing an author."""

    name: str = Field(..., min_length=1, max_length=200)
    birth_date: datetime | None = None
    biography: str | None = None
    cover_image: str | None = None

    @field_validator("birth_date", mode="before")
    @classmethod
    def _birth_date_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)

    def to_dto(self) -> AuthorWrite:
        return AuthorWrite(
            name=self.name,
            birth_date=self.birth_date,
            biography=self.biography,
            cover_image=self.cover_image,
        )


class AuthorResponse(ApiModel):
    id: int
    name: str
    birth_date: datetime | None = None
    biography: str | None = None
    cover_image: str | None = None
