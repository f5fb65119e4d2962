"""DTOs for newsletter subscribers (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SubscriberResult:
    """Subscriber read-model."""

    id: int
    email: str
    name: str | None
    subscribed_date: datetime
    is_active: bool


@dataclass(frozen=True)
class SubscribeOutcome:
    """Result of subscribe: the record and whether an inactive one was reactivated."""

    subscriber: SubscriberResult
    reactivated: bool
