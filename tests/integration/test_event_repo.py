"""Event and subscriber repository tests against an in-memory SQLite store."""

from datetime import timedelta

import pytest

from bookhaven.application.dtos.event import EventCreate, EventUpdate
from bookhaven.application.use_cases.events import EventService
from bookhaven.domain.exceptions import (
    AlreadyRegisteredException,
    AlreadySubscribedException,
    ResourceNotFoundException,
)
from bookhaven.infrastructure.persistence.repositories import (
    EventRepository,
    SubscriberRepository,
)
from bookhaven.shared.utils.datetime import utc_now

pytestmark = pytest.mark.requires_db


def _create(capacity: int = 2, days_ahead: int = 5, event_type: str = "Book Signing") -> EventCreate:
    return EventCreate(
        name="Evening with an author",
        description="Signing and Q&A",
        event_type=event_type,
        event_date=utc_now() + timedelta(days=days_ahead),
        location="Main store",
        capacity=capacity,
    )


async def test_create_event_starts_active_and_empty(db_session) -> None:
    repo = EventRepository(db_session)
    event = await repo.create_event(_create())
    assert event.is_active is True
    assert event.current_registrations == 0
    assert event.event_date.tzinfo is not None


async def test_reserve_seat_stops_at_capacity(db_session) -> None:
    repo = EventRepository(db_session)
    event = await repo.create_event(_create(capacity=2))
    assert await repo.try_reserve_seat(event.id) is True
    assert await repo.try_reserve_seat(event.id) is True
    assert await repo.try_reserve_seat(event.id) is False
    assert (await repo.get_by_id(event.id)).current_registrations == 2


async def test_reserve_seat_refused_when_cancelled(db_session) -> None:
    repo = EventRepository(db_session)
    event = await repo.create_event(_create())
    assert await repo.cancel_event(event.id) is True
    assert await repo.try_reserve_seat(event.id) is False
    assert await repo.cancel_event(999) is False


async def test_release_seat_floors_at_zero(db_session) -> None:
    repo = EventRepository(db_session)
    event = await repo.create_event(_create())
    await repo.try_reserve_seat(event.id)
    await repo.release_seat(event.id)
    await repo.release_seat(event.id)
    assert (await repo.get_by_id(event.id)).current_registrations == 0


async def test_set_capacity_is_conditional(db_session) -> None:
    repo = EventRepository(db_session)
    event = await repo.create_event(_create(capacity=3))
    await repo.try_reserve_seat(event.id)
    await repo.try_reserve_seat(event.id)
    assert await repo.set_capacity(event.id, 1) is False
    assert await repo.set_capacity(event.id, 2) is True
    assert (await repo.get_by_id(event.id)).capacity == 2


async def test_partial_update_keeps_other_fields(db_session) -> None:
    repo = EventRepository(db_session)
    event = await repo.create_event(_create())
    updated = await repo.update_event(event.id, EventUpdate(location="Upstairs"))
    assert updated is not None
    assert updated.location == "Upstairs"
    assert updated.name == event.name
    assert updated.capacity == event.capacity
    assert await repo.update_event(999, EventUpdate(name="x")) is None


async def test_duplicate_registration_raises_conflict(db_session) -> None:
    repo = EventRepository(db_session)
    event = await repo.create_event(_create())
    await repo.add_registration(event.id, "reader@bookhaven-mail.com", "Reader", utc_now())
    with pytest.raises(AlreadyRegisteredException):
        await repo.add_registration(event.id, "reader@bookhaven-mail.com", "Reader", utc_now())


async def test_registrations_listed_and_deleted(db_session) -> None:
    repo = EventRepository(db_session)
    event = await repo.create_event(_create())
    first = await repo.add_registration(event.id, "a@bookhaven-mail.com", "A", utc_now())
    await repo.add_registration(
        event.id, "b@bookhaven-mail.com", "B", utc_now() + timedelta(seconds=1)
    )
    listed = await repo.list_registrations(event.id)
    assert [r.email for r in listed] == ["a@bookhaven-mail.com", "b@bookhaven-mail.com"]

    found = await repo.get_registration(event.id, "a@bookhaven-mail.com")
    assert found is not None and found.id == first.id
    assert await repo.delete_registration(event.id, first.id) is True
    assert await repo.delete_registration(event.id, first.id) is False
    assert await repo.get_registration(event.id, "a@bookhaven-mail.com") is None


async def test_delete_registration_scoped_to_event(db_session) -> None:
    repo = EventRepository(db_session)
    event = await repo.create_event(_create())
    other = await repo.create_event(_create())
    reg = await repo.add_registration(event.id, "a@bookhaven-mail.com", "A", utc_now())
    assert await repo.delete_registration(other.id, reg.id) is False
    assert await repo.get_registration(event.id, "a@bookhaven-mail.com") is not None


async def test_unregister_with_stale_registration_keeps_counter_in_step(db_session) -> None:
    repo = EventRepository(db_session)
    service = EventService(repo)
    event = await repo.create_event(_create(capacity=2))
    await service.register(event.id, "a@bookhaven-mail.com", "A")
    await service.register(event.id, "b@bookhaven-mail.com", "B")
    stale = await repo.get_registration(event.id, "a@bookhaven-mail.com")

    await service.unregister(event.id, "a@bookhaven-mail.com")

    # A second request that read the row before the first delete committed.
    async def _stale_lookup(event_id: int, email: str):
        return stale

    repo.get_registration = _stale_lookup
    with pytest.raises(ResourceNotFoundException, match="Registration not found."):
        await service.unregister(event.id, "a@bookhaven-mail.com")

    rows = await repo.list_registrations(event.id)
    assert len(rows) == 1
    assert (await repo.get_by_id(event.id)).current_registrations == len(rows)


async def test_list_upcoming_filters_and_orders(db_session) -> None:
    repo = EventRepository(db_session)
    later = await repo.create_event(_create(days_ahead=10, event_type="Reading"))
    sooner = await repo.create_event(_create(days_ahead=2, event_type="Book Signing"))
    await repo.create_event(_create(days_ahead=-2, event_type="Reading"))
    cancelled = await repo.create_event(_create(days_ahead=3, event_type="Workshop"))
    await repo.cancel_event(cancelled.id)

    items, total = await repo.list_upcoming(utc_now(), None, skip=0, limit=10)
    assert total == 2
    assert [e.id for e in items] == [sooner.id, later.id]

    items, total = await repo.list_upcoming(utc_now(), "read", skip=0, limit=10)
    assert [e.id for e in items] == [later.id]

    assert await repo.list_event_types() == ["Book Signing", "Reading"]


async def test_subscriber_unique_email_and_active_count(db_session) -> None:
    repo = SubscriberRepository(db_session)
    await repo.create_subscriber("reader@bookhaven-mail.com", None, utc_now())
    assert await repo.count_active() == 1
    with pytest.raises(AlreadySubscribedException):
        await repo.create_subscriber("reader@bookhaven-mail.com", None, utc_now())


async def test_subscriber_set_active(db_session) -> None:
    repo = SubscriberRepository(db_session)
    created = await repo.create_subscriber("reader@bookhaven-mail.com", None, utc_now())
    off = await repo.set_active(created.id, False)
    assert off is not None and off.is_active is False
    assert await repo.count_active() == 0
    on = await repo.set_active(created.id, True, name="Reader")
    assert on.is_active is True and on.name == "Reader"
    assert (await repo.get_by_email("reader@bookhaven-mail.com")).id == created.id
    assert await repo.set_active(999, True) is None
