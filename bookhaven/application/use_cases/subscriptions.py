"""Newsletter subscription use cases."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bookhaven.application.dtos.subscriber import SubscribeOutcome
from bookhaven.domain.exceptions import (
    AlreadySubscribedException,
    ResourceNotFoundException,
    ValidationException,
)
from bookhaven.domain.value_objects.core import normalize_email
from bookhaven.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from bookhaven.application.interfaces.repositories import ISubscriberRepository

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Subscribe, unsubscribe and count. One record per email; unsubscribe is a soft flag."""

    def __init__(self, subscriber_repo: ISubscriberRepository) -> None:
        self.subscriber_repo = subscriber_repo

    async def subscribe(self, email: str | None, name: str | None = None) -> SubscribeOutcome:
        """Create, or reactivate an inactive subscriber. Raises if already active."""
        if email is None or not email.strip():
            raise ValidationException("Email is required.", field="email")
        address = normalize_email(email)
        display_name = name.strip() if name and name.strip() else None

        existing = await self.subscriber_repo.get_by_email(address)
        if existing and existing.is_active:
            raise AlreadySubscribedException(address)
        if existing:
            reactivated = await self.subscriber_repo.set_active(
                existing.id, True, subscribed_date=utc_now(), name=display_name
            )
            if reactivated:
                logger.info("Reactivated subscriber %s", existing.id)
                return SubscribeOutcome(subscriber=reactivated, reactivated=True)

        created = await self.subscriber_repo.create_subscriber(
            address, display_name, utc_now()
        )
        logger.info("New subscriber %s", created.id)
        return SubscribeOutcome(subscriber=created, reactivated=False)

    async def unsubscribe(self, email: str | None) -> None:
        if email is None or not email.strip():
            raise ValidationException("Email is required.", field="email")
        address = normalize_email(email)
        existing = await self.subscriber_repo.get_by_email(address)
        if not existing:
            raise ResourceNotFoundException(
                "subscriber", address, message="Subscriber not found."
            )
        await self.subscriber_repo.set_active(existing.id, False)
        logger.info("Unsubscribed %s", existing.id)

    async def count_active(self) -> int:
        return await self.subscriber_repo.count_active()
