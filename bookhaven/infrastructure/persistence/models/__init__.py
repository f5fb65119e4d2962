"""Persistence models: ORM entities and mixins."""

from bookhaven.infrastructure.persistence.models.author import Author
from bookhaven.infrastructure.persistence.models.event import Event, EventRegistration
from bookhaven.infrastructure.persistence.models.item_type import ItemType
from bookhaven.infrastructure.persistence.models.mixins import ActiveFlagMixin, IntIdMixin
from bookhaven.infrastructure.persistence.models.sell_item import SellItem
from bookhaven.infrastructure.persistence.models.subscriber import Subscriber

__all__ = [
    "Author",
    "Event",
    "EventRegistration",
    "ItemType",
    "SellItem",
    "Subscriber",
    "ActiveFlagMixin",
    "IntIdMixin",
]
