"""Pydantic request/response schemas for the API."""

from bookhaven.schemas.author import AuthorRequest, AuthorResponse
from bookhaven.schemas.common import ApiModel, MessageResponse
from bookhaven.schemas.event import (
    EventCreateRequest,
    EventPageResponse,
    EventRegistrationRequest,
    EventRegistrationResponse,
    EventResponse,
    EventUnregisterRequest,
    EventUpdateRequest,
)
from bookhaven.schemas.health import HealthResponse
from bookhaven.schemas.item import (
    CategoryResponse,
    EnrichedSellItemResponse,
    ItemPageResponse,
    ItemSearchResponse,
    SellItemRequest,
    SellItemResponse,
)
from bookhaven.schemas.item_type import ItemTypeRequest, ItemTypeResponse
from bookhaven.schemas.subscriber import (
    SubscribeRequest,
    SubscriberCountResponse,
    SubscriberResponse,
    UnsubscribeRequest,
)

__all__ = [
    "ApiModel",
    "AuthorRequest",
    "AuthorResponse",
    "CategoryResponse",
    "EnrichedSellItemResponse",
    "EventCreateRequest",
    "EventPageResponse",
    "EventRegistrationRequest",
    "EventRegistrationResponse",
    "EventResponse",
    "EventUnregisterRequest",
    "EventUpdateRequest",
    "HealthResponse",
    "ItemPageResponse",
    "ItemSearchResponse",
    "ItemTypeRequest",
    "ItemTypeResponse",
    "MessageResponse",
    "SellItemRequest",
    "SellItemResponse",
    "SubscribeRequest",
    "SubscriberCountResponse",
    "SubscriberResponse",
    "UnsubscribeRequest",
]
