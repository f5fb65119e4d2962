"""SQLAlchemy repository implementations of the application ports."""

from bookhaven.infrastructure.persistence.repositories.author_repo import AuthorRepository
from bookhaven.infrastructure.persistence.repositories.base import BaseRepository
from bookhaven.infrastructure.persistence.repositories.event_repo import EventRepository
from bookhaven.infrastructure.persistence.repositories.item_type_repo import (
    ItemTypeRepository,
)
from bookhaven.infrastructure.persistence.repositories.sell_item_repo import (
    SellItemRepository,
)
from bookhaven.infrastructure.persistence.repositories.subscriber_repo import (
    SubscriberRepository,
)

__all__ = [
    "AuthorRepository",
    "BaseRepository",
    "EventRepository",
    "ItemTypeRepository",
    "SellItemRepository",
    "SubscriberRepository",
]
