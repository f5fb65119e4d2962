"""Event use cases: listing, management, and registration with capacity tracking.

Registration checks run in a fixed order (exists, active, not passed,
not already registered, seat available). The seat itself is taken by
an atomic conditional update in the repository, so two concurrent
requests for the last seat cannot both succeed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bookhaven.application.dtos.event import (
    EventCreate,
    EventPage,
    EventRegistrationResult,
    EventResult,
    EventUpdate,
)
from bookhaven.domain.exceptions import (
    AlreadyRegisteredException,
    CapacityBelowRegistrationsException,
    EventAlreadyPassedException,
    EventCancelledException,
    EventFullException,
    ResourceNotFoundException,
    ValidationException,
)
from bookhaven.domain.value_objects.core import PageRequest, normalize_email
from bookhaven.shared.utils.datetime import is_past, utc_now

if TYPE_CHECKING:
    from bookhaven.application.interfaces.repositories import IEventRepository

logger = logging.getLogger(__name__)


def _event_not_found(event_id: int) -> ResourceNotFoundException:
    return ResourceNotFoundException("event", event_id, message="Event not found.")


def _require_text(value: str | None, field: str, label: str) -> str:
    if value is None or not value.strip():
        raise ValidationException(f"{label} is required.", field=field)
    return value.strip()


class EventService:
    """Store events and their registrations."""

    def __init__(self, event_repo: IEventRepository) -> None:
        self.event_repo = event_repo

    async def list_events(
        self,
        event_type: str | None,
        page_number: int | None,
        page_size: int | None,
    ) -> EventPage:
        """Upcoming active events ordered by date, optionally filtered by type substring."""
        page = PageRequest.of(
            page_number, page_size, default_size=PageRequest.DEFAULT_EVENT_PAGE_SIZE
        )
        type_filter = event_type.strip() if event_type and event_type.strip() else None
        items, total = await self.event_repo.list_upcoming(
            utc_now(), type_filter, skip=page.skip, limit=page.page_size
        )
        return EventPage(
            page_number=page.page_number,
            page_size=page.page_size,
            total_count=total,
            total_pages=page.total_pages(total),
            items=items,
        )

    async def list_event_types(self) -> list[str]:
        return await self.event_repo.list_event_types()

    async def get_event(self, event_id: int) -> EventResult:
        event = await self.event_repo.get_by_id(event_id)
        if not event:
            raise _event_not_found(event_id)
        return event

    async def create_event(self, data: EventCreate) -> EventResult:
        """Create an active event with zero registrations. Capacity must be at least 1."""
        for field, label in (
            ("name", "Name"),
            ("description", "Description"),
            ("event_type", "Event type"),
            ("location", "Location"),
        ):
            _require_text(getattr(data, field), field, label)
        if data.capacity < 1:
            raise ValidationException("Capacity must be at least 1.", field="capacity")
        created = await self.event_repo.create_event(data)
        logger.info("Created event %s (%s)", created.id, created.event_type)
        return created

    async def update_event(self, event_id: int, data: EventUpdate) -> EventResult:
        """Partial update. Capacity may not drop below current registrations."""
        await self.get_event(event_id)
        if data.capacity is not None:
            if data.capacity < 1:
                raise ValidationException("Capacity must be at least 1.", field="capacity")
            if not await self.event_repo.set_capacity(event_id, data.capacity):
                latest = await self.get_event(event_id)
                logger.info(
                    "Rejected capacity %s for event %s with %s registrations",
                    data.capacity,
                    event_id,
                    latest.current_registrations,
                )
                raise CapacityBelowRegistrationsException(
                    event_id, data.capacity, latest.current_registrations
                )
        updated = await self.event_repo.update_event(event_id, data)
        if updated is None:
            raise _event_not_found(event_id)
        return updated

    async def cancel_event(self, event_id: int) -> None:
        if not await self.event_repo.cancel_event(event_id):
            raise _event_not_found(event_id)
        logger.info("Cancelled event %s", event_id)

    async def register(
        self, event_id: int, email: str, name: str
    ) -> EventRegistrationResult:
        """Register email for the event and take one seat."""
        address = normalize_email(_require_text(email, "email", "Email"))
        display_name = _require_text(name, "name", "Name")

        event = await self.get_event(event_id)
        if not event.is_active:
            raise EventCancelledException(event_id)
        now = utc_now()
        if is_past(event.event_date, now):
            raise EventAlreadyPassedException(event_id)
        if await self.event_repo.get_registration(event_id, address):
            raise AlreadyRegisteredException(event_id, address)
        if not await self.event_repo.try_reserve_seat(event_id):
            logger.info("Event %s is full (capacity %s)", event_id, event.capacity)
            raise EventFullException(event_id, event.capacity)

        registration = await self.event_repo.add_registration(
            event_id, address, display_name, now
        )
        logger.info("Registered %s for event %s", address, event_id)
        return registration

    async def unregister(self, event_id: int, email: str) -> None:
        """Remove the registration and release its seat (counter never below 0)."""
        address = normalize_email(_require_text(email, "email", "Email"))
        registration = await self.event_repo.get_registration(event_id, address)
        if not registration or not await self.event_repo.delete_registration(
            event_id, registration.id
        ):
            raise ResourceNotFoundException(
                "registration", address, message="Registration not found."
            )
        await self.event_repo.release_seat(event_id)
        logger.info("Unregistered %s from event %s", address, event_id)

    async def list_registrations(self, event_id: int) -> list[EventRegistrationResult]:
        await self.get_event(event_id)
        return await self.event_repo.list_registrations(event_id)
