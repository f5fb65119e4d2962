"""Application ports (repository protocols)."""

from bookhaven.application.interfaces.repositories import (
    IAuthorRepository,
    IEventRepository,
    IItemTypeRepository,
    INameLookupRepository,
    ISellItemRepository,
    ISubscriberRepository,
)

__all__ = [
    "IAuthorRepository",
    "IEventRepository",
    "IItemTypeRepository",
    "INameLookupRepository",
    "ISellItemRepository",
    "ISubscriberRepository",
]
