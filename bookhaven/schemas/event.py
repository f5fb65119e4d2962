"""Event and registration API schemas."""

from datetime import datetime
from typing import Any

from pydantic import AwareDatetime, EmailStr, Field, field_validator

from bookhaven.application.dtos.event import EventCreate, EventUpdate
from bookhaven.schemas.common import ApiModel, ensure_aware_datetime


class EventCreateRequest(ApiModel):
    """Body for POST /events. The event starts active with no registrations."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    event_type: str = Field(..., min_length=1, max_length=100)
    event_date: AwareDatetime
    location: str = Field(..., min_length=1, max_length=100)
    capacity: int = Field(..., ge=1)
    image_url: str | None = Field(default=None, max_length=500)
    card_image: str | None = None

    @field_validator("event_date", mode="before")
    @classmethod
    def _event_date_aware(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("eventDate is required")
        return ensure_aware_datetime(v)

    def to_dto(self) -> EventCreate:
        return EventCreate(
            name=self.name,
            description=self.description,
            event_type=self.event_type,
            event_date=self.event_date,
            location=self.location,
            capacity=self.capacity,
            image_url=self.image_url,
            card_image=self.card_image,
        )


class EventUpdateRequest(ApiModel):
    """Body for PUT /events/{id} (partial: omitted fields keep their value)."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    event_type: str | None = Field(default=None, min_length=1, max_length=100)
    event_date: AwareDatetime | None = None
    location: str | None = Field(default=None, min_length=1, max_length=100)
    capacity: int | None = Field(default=None, ge=1)
    image_url: str | None = Field(default=None, max_length=500)
    card_image: str | None = None

    @field_validator("event_date", mode="before")
    @classmethod
    def _event_date_aware(cls, v: Any) -> Any:
        return ensure_aware_datetime(v)

    def to_dto(self) -> EventUpdate:
        return EventUpdate(
            name=self.name,
            description=self.description,
            event_type=self.event_type,
            event_date=self.event_date,
            location=self.location,
            capacity=self.capacity,
            image_url=self.image_url,
            card_image=self.card_image,
        )


class EventResponse(ApiModel):
    id: int
    name: str
    description: str
    event_type: str
    event_date: datetime
    location: str
    capacity: int
    current_registrations: int
    image_url: str | None = None
    card_image: str | None = None
    is_active: bool
    created_date: datetime


class EventPageResponse(ApiModel):
    """Envelope for GET /events."""

    total_count: int
    page_number: int
    page_size: int
    total_pages: int
    data: list[EventResponse]


class EventRegistrationRequest(ApiModel):
    """Body for POST /events/{id}/register."""

    email: EmailStr = Field(..., max_length=255)
    name: str = Field(..., min_length=1, max_length=100)


class EventUnregisterRequest(ApiModel):
    """Body for POST /events/{id}/unregister."""

    email: str = Field(..., max_length=255)


class EventRegistrationResponse(ApiModel):
    id: int
    event_id: int
    email: str
    name: str
    registered_date: datetime
    is_attended: bool
