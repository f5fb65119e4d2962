"""Event and subscription dependencies (composition root).

Registration and unregistration run on the transactional session so the
seat counter update and the registration row commit or roll back together.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookhaven.application.use_cases import EventService, SubscriptionService
from bookhaven.infrastructure.persistence.database import get_db, get_db_transactional
from bookhaven.infrastructure.persistence.repositories import (
    EventRepository,
    SubscriberRepository,
)


async def get_event_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EventService:
    """Event service for reads."""
    return EventService(EventRepository(db))


async def get_event_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> EventService:
    """Event service for create/update/cancel/register/unregister (transactional)."""
    return EventService(EventRepository(db))


async def get_subscription_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SubscriptionService:
    return SubscriptionService(SubscriberRepository(db))


async def get_subscription_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> SubscriptionService:
    return SubscriptionService(SubscriberRepository(db))
