"""Event API: listing, management, registration. Thin routes over EventService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from bookhaven.api.v1.dependencies import get_event_service, get_event_service_for_write
from bookhaven.application.use_cases import EventService
from bookhaven.core.limiter import limit_public_forms, limit_writes
from bookhaven.schemas.common import MessageResponse
from bookhaven.schemas.event import (
    EventCreateRequest,
    EventPageResponse,
    EventRegistrationRequest,
    EventRegistrationResponse,
    EventResponse,
    EventUnregisterRequest,
    EventUpdateRequest,
)

router = APIRouter()


@router.get("", response_model=EventPageResponse)
async def list_events(
    events: Annotated[EventService, Depends(get_event_service)],
    event_type: Annotated[str | None, Query(alias="eventType")] = None,
    page_number: Annotated[int | None, Query(alias="pageNumber")] = None,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
):
    """Upcoming active events ordered by date (page size defaults to 10, max 50)."""
    page = await events.list_events(event_type, page_number, page_size)
    return EventPageResponse(
        total_count=page.total_count,
        page_number=page.page_number,
        page_size=page.page_size,
        total_pages=page.total_pages,
        data=[EventResponse.model_validate(e) for e in page.items],
    )


@router.get("/types", response_model=list[str])
async def list_event_types(
    events: Annotated[EventService, Depends(get_event_service)],
):
    return await events.list_event_types()


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: int,
    events: Annotated[EventService, Depends(get_event_service)],
):
    return EventResponse.model_validate(await events.get_event(event_id))


@router.post("", response_model=EventResponse, status_code=201)
@limit_writes
async def create_event(
    request: Request,
    body: EventCreateRequest,
    events: Annotated[EventService, Depends(get_event_service_for_write)],
):
    return EventResponse.model_validate(await events.create_event(body.to_dto()))


@router.put("/{event_id}", response_model=EventResponse)
@limit_writes
async def update_event(
    request: Request,
    event_id: int,
    body: EventUpdateRequest,
    events: Annotated[EventService, Depends(get_event_service_for_write)],
):
    """Partial update; a capacity below current registrations is a 409."""
    updated = await events.update_event(event_id, body.to_dto())
    return EventResponse.model_validate(updated)


@router.delete("/{event_id}", status_code=204)
@limit_writes
async def cancel_event(
    request: Request,
    event_id: int,
    events: Annotated[EventService, Depends(get_event_service_for_write)],
) -> None:
    """Cancel the event (soft delete: it stops being listed and accepting sign-ups)."""
    await events.cancel_event(event_id)


@router.post(
    "/{event_id}/register", response_model=EventRegistrationResponse, status_code=201
)
@limit_public_forms
async def register_for_event(
    request: Request,
    event_id: int,
    body: EventRegistrationRequest,
    events: Annotated[EventService, Depends(get_event_service_for_write)],
):
    registration = await events.register(event_id, body.email, body.name)
    return EventRegistrationResponse.model_validate(registration)


@router.post("/{event_id}/unregister", response_model=MessageResponse)
@limit_public_forms
async def unregister_from_event(
    request: Request,
    event_id: int,
    body: EventUnregisterRequest,
    events: Annotated[EventService, Depends(get_event_service_for_write)],
):
    await events.unregister(event_id, body.email)
    return MessageResponse(message="Successfully unregistered from the event.")


@router.get("/{event_id}/registrations", response_model=list[EventRegistrationResponse])
async def list_registrations(
    event_id: int,
    events: Annotated[EventService, Depends(get_event_service)],
):
    registrations = await events.list_registrations(event_id)
    return [EventRegistrationResponse.model_validate(r) for r in registrations]
