"""DTOs for events and registrations (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class EventCreate:
    """Data for creating an event; it starts active with no registrations."""

    name: str
    description: str
    event_type: str
    event_date: datetime
    location: str
    capacity: int
    image_url: str | None = None
    card_image: str | None = None


@dataclass(frozen=True)
class EventUpdate:
    """Partial event update. None keeps the stored value."""

    name: str | None = None
    description: str | None = None
    event_type: str | None = None
    event_date: datetime | None = None
    location: str | None = None
    capacity: int | None = None
    image_url: str | None = None
    card_image: str | None = None


@dataclass(frozen=True)
class EventResult:
    """Event read-model."""

    id: int
    name: str
    description: str
    event_type: str
    event_date: datetime
    location: str
    capacity: int
    current_registrations: int
    image_url: str | None
    card_image: str | None
    is_active: bool
    created_date: datetime


@dataclass(frozen=True)
class EventRegistrationResult:
    """Registration read-model."""

    id: int
    event_id: int
    email: str
    name: str
    registered_date: datetime
    is_attended: bool


@dataclass(frozen=True)
class EventPage:
    """One page of upcoming events."""

    page_number: int
    page_size: int
    total_count: int
    total_pages: int
    items: list[EventResult] = field(default_factory=list)
