"""Event and registration repository. Returns application DTOs.

Seat counting never reads-then-writes: try_reserve_seat, release_seat,
delete_registration and set_capacity are single conditional statements, so
the invariant 0 <= current_registrations <= capacity holds under concurrent
requests. A seat is released only after this request deleted the row.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookhaven.application.dtos.event import (
    EventCreate,
    EventRegistrationResult,
    EventResult,
    EventUpdate,
)
from bookhaven.domain.exceptions import AlreadyRegisteredException
from bookhaven.infrastructure.persistence.models import Event, EventRegistration
from bookhaven.infrastructure.persistence.repositories.base import BaseRepository
from bookhaven.shared.utils.datetime import ensure_utc, utc_now

# Partial update: DTO fields copied verbatim when not None (capacity handled separately).
_UPDATABLE_FIELDS = (
    "name",
    "description",
    "event_type",
    "location",
    "image_url",
    "card_image",
)


def _to_result(e: Event) -> EventResult:
    """Map ORM Event to EventResult."""
    return EventResult(
        id=e.id,
        name=e.name,
        description=e.description,
        event_type=e.event_type,
        event_date=ensure_utc(e.event_date),
        location=e.location,
        capacity=e.capacity,
        current_registrations=e.current_registrations,
        image_url=e.image_url,
        card_image=e.card_image,
        is_active=e.is_active,
        created_date=ensure_utc(e.created_date),
    )


def _registration_to_result(r: EventRegistration) -> EventRegistrationResult:
    """Map ORM EventRegistration to EventRegistrationResult."""
    return EventRegistrationResult(
        id=r.id,
        event_id=r.event_id,
        email=r.email,
        name=r.name,
        registered_date=ensure_utc(r.registered_date),
        is_attended=r.is_attended,
    )


class EventRepository(BaseRepository[Event]):
    """Event persistence plus registrations (owned by Event, cascade-deleted)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Event)

    async def _load(self, event_id: int) -> Event | None:
        # populate_existing: counters may have changed via conditional UPDATEs.
        result = await self.db.execute(
            select(Event)
            .where(Event.id == event_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, event_id: int) -> EventResult | None:
        row = await self._load(event_id)
        return _to_result(row) if row else None

    async def list_upcoming(
        self, now: datetime, event_type: str | None, skip: int, limit: int
    ) -> tuple[list[EventResult], int]:
        conditions: list[Any] = [Event.is_active.is_(True), Event.event_date >= now]
        if event_type:
            conditions.append(Event.event_type.icontains(event_type, autoescape=True))
        total = (
            await self.db.execute(select(func.count()).select_from(Event).where(*conditions))
        ).scalar_one()
        result = await self.db.execute(
            select(Event)
            .where(*conditions)
            .order_by(Event.event_date.asc(), Event.id.asc())
            .offset(skip)
            .limit(limit)
        )
        return [_to_result(e) for e in result.scalars().all()], total

    async def list_event_types(self) -> list[str]:
        result = await self.db.execute(
            select(Event.event_type)
            .where(Event.is_active.is_(True))
            .distinct()
            .order_by(Event.event_type.asc())
        )
        return list(result.scalars().all())

    async def create_event(self, data: EventCreate) -> EventResult:
        entity = Event(
            name=data.name,
            description=data.description,
            event_type=data.event_type,
            event_date=ensure_utc(data.event_date),
            location=data.location,
            capacity=data.capacity,
            current_registrations=0,
            image_url=data.image_url,
            card_image=data.card_image,
            is_active=True,
            created_date=utc_now(),
        )
        created = await self.create(entity)
        return _to_result(created)

    async def update_event(self, event_id: int, data: EventUpdate) -> EventResult | None:
        entity = await self._load(event_id)
        if not entity:
            return None
        for name in _UPDATABLE_FIELDS:
            value = getattr(data, name)
            if value is not None:
                setattr(entity, name, value)
        if data.event_date is not None:
            entity.event_date = ensure_utc(data.event_date)
        updated = await self.update(entity)
        return _to_result(updated)

    async def set_capacity(self, event_id: int, capacity: int) -> bool:
        result = await self.db.execute(
            update(Event)
            .where(Event.id == event_id, Event.current_registrations <= capacity)
            .values(capacity=capacity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def cancel_event(self, event_id: int) -> bool:
        result = await self.db.execute(
            update(Event)
            .where(Event.id == event_id)
            .values(is_active=False)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def try_reserve_seat(self, event_id: int) -> bool:
        result = await self.db.execute(
            update(Event)
            .where(
                Event.id == event_id,
                Event.is_active.is_(True),
                Event.current_registrations < Event.capacity,
            )
            .values(current_registrations=Event.current_registrations + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def release_seat(self, event_id: int) -> None:
        await self.db.execute(
            update(Event)
            .where(Event.id == event_id)
            .values(
                current_registrations=case(
                    (Event.current_registrations > 0, Event.current_registrations - 1),
                    else_=0,
                )
            )
            .execution_options(synchronize_session=False)
        )

    async def get_registration(
        self, event_id: int, email: str
    ) -> EventRegistrationResult | None:
        result = await self.db.execute(
            select(EventRegistration).where(
                EventRegistration.event_id == event_id,
                EventRegistration.email == email,
            )
        )
        row = result.scalar_one_or_none()
        return _registration_to_result(row) if row else None

    async def add_registration(
        self, event_id: int, email: str, name: str, registered_date: datetime
    ) -> EventRegistrationResult:
        entity = EventRegistration(
            event_id=event_id,
            email=email,
            name=name,
            registered_date=ensure_utc(registered_date),
            is_attended=False,
        )
        self.db.add(entity)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise AlreadyRegisteredException(event_id, email) from e
        await self.db.refresh(entity)
        return _registration_to_result(entity)

    async def delete_registration(self, event_id: int, registration_id: int) -> bool:
        """Delete in one statement; False when another request already removed the row."""
        result = await self.db.execute(
            delete(EventRegistration)
            .where(
                EventRegistration.id == registration_id,
                EventRegistration.event_id == event_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def list_registrations(self, event_id: int) -> list[EventRegistrationResult]:
        result = await self.db.execute(
            select(EventRegistration)
            .where(EventRegistration.event_id == event_id)
            .order_by(EventRegistration.registered_date.asc(), EventRegistration.id.asc())
        )
        return [_registration_to_result(r) for r in result.scalars().all()]
