"""Application use cases (services orchestrating repositories)."""

from bookhaven.application.use_cases.catalog import CatalogQueryService, SellItemService
from bookhaven.application.use_cases.events import EventService
from bookhaven.application.use_cases.reference import AuthorService, ItemTypeService
from bookhaven.application.use_cases.subscriptions import SubscriptionService

__all__ = [
    "AuthorService",
    "CatalogQueryService",
    "EventService",
    "ItemTypeService",
    "SellItemService",
    "SubscriptionService",
]
