"""Subscriber repository. One row per email; unsubscribe flips is_active."""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookhaven.application.dtos.subscriber import SubscriberResult
from bookhaven.domain.exceptions import AlreadySubscribedException
from bookhaven.infrastructure.persistence.models import Subscriber
from bookhaven.infrastructure.persistence.repositories.base import BaseRepository
from bookhaven.shared.utils.datetime import ensure_utc


def _to_result(s: Subscriber) -> SubscriberResult:
    return SubscriberResult(
        id=s.id,
        email=s.email,
        name=s.name,
        subscribed_date=ensure_utc(s.subscribed_date),
        is_active=s.is_active,
    )


class SubscriberRepository(BaseRepository[Subscriber]):
    """Newsletter subscribers keyed by normalized email."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Subscriber)

    async def get_by_email(self, email: str) -> SubscriberResult | None:
        result = await self.db.execute(select(Subscriber).where(Subscriber.email == email))
        row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def create_subscriber(
        self, email: str, name: str | None, subscribed_date: datetime
    ) -> SubscriberResult:
        entity = Subscriber(
            email=email,
            name=name,
            subscribed_date=ensure_utc(subscribed_date),
            is_active=True,
        )
        self.db.add(entity)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise AlreadySubscribedException(email) from e
        await self.db.refresh(entity)
        return _to_result(entity)

    async def set_active(
        self,
        subscriber_id: int,
        is_active: bool,
        *,
        subscribed_date: datetime | None = None,
        name: str | None = None,
    ) -> SubscriberResult | None:
        entity = await super().get_by_id(subscriber_id)
        if not entity:
            return None
        entity.is_active = is_active
        if subscribed_date is not None:
            entity.subscribed_date = ensure_utc(subscribed_date)
        if name is not None:
            entity.name = name
        updated = await self.update(entity)
        return _to_result(updated)

    async def count_active(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Subscriber).where(Subscriber.is_active.is_(True))
        )
        return result.scalar_one()
