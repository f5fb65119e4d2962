"""Application DTOs: plain dataclasses passed between repositories, use cases and routes."""

from bookhaven.application.dtos.catalog import (
    CategoryResult,
    EnrichedSellItem,
    ItemPage,
    ItemSearchCriteria,
    SellItemResult,
    SellItemWrite,
)
from bookhaven.application.dtos.event import (
    EventCreate,
    EventPage,
    EventRegistrationResult,
    EventResult,
    EventUpdate,
)
from bookhaven.application.dtos.reference import (
    AuthorResult,
    AuthorWrite,
    ItemTypeResult,
    ItemTypeWrite,
)
from bookhaven.application.dtos.subscriber import SubscribeOutcome, SubscriberResult

__all__ = [
    "AuthorResult",
    "AuthorWrite",
    "CategoryResult",
    "EnrichedSellItem",
    "EventCreate",
    "EventPage",
    "EventRegistrationResult",
    "EventResult",
    "EventUpdate",
    "ItemPage",
    "ItemSearchCriteria",
    "ItemTypeResult",
    "ItemTypeWrite",
    "SellItemResult",
    "SellItemWrite",
    "SubscribeOutcome",
    "SubscriberResult",
]
